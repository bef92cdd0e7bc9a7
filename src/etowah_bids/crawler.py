"""
크롤러 실행기

브라우저 세션을 열어 핸들러를 실행하고, 결과 요약과 선택적 JSON 저장을 담당합니다.
"""

import asyncio
import json
from pathlib import Path
from typing import Any, List, Optional

from etowah_bids.config import ScraperConfig
from etowah_bids.handler import handle
from etowah_bids.models.bid_item import BidItem
from etowah_bids.models.task import FollowUpTask
from etowah_bids.scheduler.payload import PayloadQueue, TaskScheduler
from etowah_bids.utils.browser import BrowserManager
from etowah_bids.utils.logger import CrawlLogger, get_logger, setup_logger

logger = get_logger(__name__)


class BidCrawler:
    """
    입찰 목록 크롤러

    의존성 주입(DI)을 지원합니다. scheduler를 넘기지 않으면
    PayloadQueue에 작업을 모아 scheduled_tasks로 노출합니다.
    """

    def __init__(
        self,
        config: Optional[ScraperConfig] = None,
        scheduler: Optional[TaskScheduler] = None,
        browser_manager: Optional[BrowserManager] = None,
    ):
        """
        Args:
            config: 스크래퍼 설정 (None이면 기본값 사용)
            scheduler: 후속 작업 스케줄러 (None이면 PayloadQueue)
            browser_manager: 브라우저 관리자 (테스트용 주입)
        """
        self.config = config or ScraperConfig()

        setup_logger(self.config.logging)
        self.crawl_logger = CrawlLogger()

        self.browser_manager = browser_manager or BrowserManager(self.config.browser)
        self._queue = PayloadQueue() if scheduler is None else None
        self.scheduler: TaskScheduler = scheduler if scheduler is not None else self._queue

    @property
    def scheduled_tasks(self) -> List[FollowUpTask]:
        """기본 PayloadQueue에 모인 작업 (외부 스케줄러를 주입했다면 빈 리스트)"""
        return self._queue.tasks if self._queue is not None else []

    async def run(self) -> List[BidItem]:
        """
        스크래핑 실행

        Returns:
            중복이 제거된 입찰 항목 리스트

        Raises:
            NavigationException: 구매 페이지로 이동하지 못했을 때
            asyncio.TimeoutError: run_timeout을 넘겼을 때
        """
        self.crawl_logger.start_run(self.config.run_id, self.config.to_summary())

        try:
            async with self.browser_manager:
                if self.config.run_timeout:
                    bids = await asyncio.wait_for(
                        self._scrape(), timeout=self.config.run_timeout
                    )
                else:
                    bids = await self._scrape()

        except asyncio.TimeoutError:
            logger.error(f"Scrape timed out after {self.config.run_timeout}s")
            raise

        except Exception as e:
            logger.error(f"Scrape error: {e}")
            raise

        if self.config.output_file:
            save_results(bids, self.config.output_file)

        scheduled = sum(1 for bid in bids if bid.has_details_url())
        self.crawl_logger.end_run(total=len(bids), scheduled=scheduled)
        return bids

    async def _scrape(self) -> List[BidItem]:
        async with self.browser_manager.get_page() as page:
            return await handle(page, self.scheduler, self.config.site)


def bids_to_json(bids: List[BidItem]) -> List[dict[str, Any]]:
    """입찰 항목을 JSON 직렬화 가능한 리스트로 변환"""
    return [bid.to_dict() for bid in bids]


def save_results(bids: List[BidItem], path: Path) -> Path:
    """
    결과를 JSON 파일로 저장

    Returns:
        저장한 파일 경로
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(bids_to_json(bids), f, ensure_ascii=False, indent=2)

    logger.info(f"Saved {len(bids)} bids to {path}")
    return path


async def run_crawler(
    config: Optional[ScraperConfig] = None,
    scheduler: Optional[TaskScheduler] = None,
) -> List[BidItem]:
    """
    크롤러 실행 헬퍼 함수

    Args:
        config: 스크래퍼 설정
        scheduler: 후속 작업 스케줄러 (DI)

    Returns:
        중복이 제거된 입찰 항목 리스트
    """
    crawler = BidCrawler(config, scheduler=scheduler)
    return await crawler.run()
