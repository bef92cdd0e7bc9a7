"""
입찰 목록 스크래퍼

렌더링된 구매 페이지에서 입찰 항목을 추출합니다.
항목 하나의 구조가 깨져도 나머지 항목 처리는 계속됩니다.
"""

from typing import List, Optional

from playwright.async_api import ElementHandle, Page

from etowah_bids.config import SiteConfig
from etowah_bids.models.bid_item import Attachment, BidItem
from etowah_bids.scrapers.base import BaseScraper
from etowah_bids.utils.dedup import dedupe_bids
from etowah_bids.utils.logger import CrawlLogger


class BidListScraper(BaseScraper):
    """
    입찰 목록 스크래퍼

    div.post-wrapper 컨테이너마다 제목 링크, 입찰번호, 첨부파일을 읽어
    중복이 제거된 BidItem 리스트를 반환합니다.
    """

    def __init__(self, page: Page, site: Optional[SiteConfig] = None):
        super().__init__(page)
        self.site = site or SiteConfig()
        self.crawl_logger = CrawlLogger(self.logger)

    async def scrape(self) -> List[BidItem]:
        """
        현재 페이지의 입찰 목록 스크래핑

        Returns:
            처음 등장한 순서를 유지한, 중복 없는 입찰 항목 리스트
        """
        containers = await self.query_all(self.site.container_selector)
        self.logger.debug(f"Bid containers found: {len(containers)}")

        items = await self._extract_items(containers)
        unique = dedupe_bids(items)

        if len(unique) < len(items):
            self.logger.info(f"Removed {len(items) - len(unique)} duplicate bids")

        return unique

    async def _extract_items(self, containers: List[ElementHandle]) -> List[BidItem]:
        """컨테이너 목록에서 입찰 항목 추출"""
        items = []

        for i, container in enumerate(containers):
            try:
                item = await self._parse_container(container, i)
                if item:
                    items.append(item)
                    self.crawl_logger.item_collected(item.signal_source_unique_id, item.title)
            except Exception as e:
                self.logger.warning(f"Error processing bid container {i}: {e}")
                continue

        return items

    async def _parse_container(self, container: ElementHandle, index: int) -> Optional[BidItem]:
        """
        단일 컨테이너 파싱

        제목 링크가 없거나 입찰번호를 도출할 수 없으면 None을 반환합니다.
        """
        title_link = await self.query_one(self.site.title_selector, root=container)
        if title_link is None:
            self.crawl_logger.item_skipped(index, "no title link")
            return None

        raw_text = await self.element_text(title_link)
        title = self._parser.strip_boilerplate(raw_text, self.site.title_boilerplate)

        href = await self.element_attribute(title_link, "href")
        details_url = self._parser.build_details_url(self.site.details_base_url, href)

        bid_number = self._parser.extract_bid_number(title)
        if bid_number is None:
            self.crawl_logger.item_skipped(index, f"no bid number in {title!r}")
            return None

        attachments = await self._extract_attachments(container)

        return BidItem(
            title=title,
            signal_source_unique_id=bid_number,
            due_date=None,  # 목록에 마감일 표기가 없음
            details_url_for_item=details_url,
            attachments=attachments,
        )

    async def _extract_attachments(self, container: ElementHandle) -> List[Attachment]:
        """컨테이너 하위 첨부파일 링크 추출"""
        attachments = []

        links = await self.query_all(self.site.attachment_selector, root=container)
        for link in links:
            try:
                url = await self.element_attribute(link, "href")
                if not url:
                    continue

                filename = self._parser.filename_from_url(url, self.site.unknown_filename)
                attachments.append(
                    Attachment(filename=filename, suggested_filename=filename)
                )
            except Exception as e:
                self.logger.warning(f"Error processing attachment: {e}")
                continue

        return attachments


async def extract_bids(page: Page, site: Optional[SiteConfig] = None) -> List[BidItem]:
    """
    입찰 목록 추출 헬퍼 함수

    Args:
        page: 목록이 렌더링된 페이지
        site: 사이트 설정 (None이면 기본값)

    Returns:
        중복이 제거된 입찰 항목 리스트
    """
    return await BidListScraper(page, site).scrape()
