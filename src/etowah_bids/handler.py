"""
입찰 목록 핸들러

구매 페이지 이동 → 입찰 링크 클릭(실패 허용) → 목록 추출 → 상세 수집 작업 등록
순서로 한 번의 스크래핑을 수행합니다.
"""

from typing import List, Optional

from playwright.async_api import Page

from etowah_bids.config import SiteConfig
from etowah_bids.models.bid_item import BidItem
from etowah_bids.models.task import FollowUpTask
from etowah_bids.scheduler.payload import TaskScheduler
from etowah_bids.scrapers.bid_list_scraper import BidListScraper
from etowah_bids.utils.logger import CrawlLogger, get_logger

logger = get_logger(__name__)


async def open_bid_listing(scraper: BidListScraper) -> bool:
    """
    입찰 목록 화면 열기

    링크 클릭과 네트워크 유휴 대기는 최선 노력으로 수행합니다.
    목록이 이미 보이거나 링크가 바뀌었을 수 있으므로 실패해도 중단하지 않습니다.

    Returns:
        클릭에 성공했으면 True
    """
    site = scraper.site
    if not await scraper.click(site.bids_link_selector):
        logger.warning("Failed to click on bids link - scraping current page")
        return False

    await scraper.wait_until_idle()
    return True


def schedule_details(
    bids: List[BidItem],
    scheduler: TaskScheduler,
    task_name: str,
    crawl_logger: Optional[CrawlLogger] = None,
) -> int:
    """
    상세 URL이 있는 입찰마다 후속 작업 등록

    Returns:
        등록한 작업 수
    """
    scheduled = 0
    for bid in bids:
        if not bid.has_details_url():
            continue
        scheduler.extend_payload(FollowUpTask.for_bid_details(bid, api=task_name))
        scheduled += 1
        if crawl_logger:
            crawl_logger.task_scheduled(task_name, bid.signal_source_unique_id)
    return scheduled


async def handle(
    page: Page,
    scheduler: TaskScheduler,
    site: Optional[SiteConfig] = None,
) -> List[BidItem]:
    """
    입찰 목록 스크래핑 실행

    Args:
        page: Playwright 페이지
        scheduler: 상세 수집 작업을 받을 스케줄러
        site: 사이트 설정 (None이면 기본값)

    Returns:
        중복이 제거된 입찰 항목 리스트

    Raises:
        NavigationException: 구매 페이지로 이동하지 못했을 때
    """
    site = site or SiteConfig()
    scraper = BidListScraper(page, site)

    logger.info(f"Navigating to {site.listing_url}")
    await scraper.navigate(site.listing_url)

    await open_bid_listing(scraper)

    bids = await scraper.scrape()
    logger.info(f"Extracted {len(bids)} bids")

    scheduled = schedule_details(bids, scheduler, site.details_task_name, scraper.crawl_logger)
    logger.info(f"Scheduled {scheduled} {site.details_task_name} tasks")

    return bids
