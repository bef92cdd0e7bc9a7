"""
Etowah County 입찰 목록 스크래퍼 패키지

카운티 구매 페이지에 게시된 입찰 목록을 추출하고,
각 입찰의 상세 페이지 수집을 외부 스케줄러에 요청합니다.

주요 기능:
- 동적 웹페이지 스크래핑 (Playwright 기반)
- 제목에서 회계연도 입찰번호(FY YYYY-NN) 도출
- 첨부파일 메타데이터 수집
- 중복 제거 및 항목 단위 오류 격리
- 상세 페이지 후속 작업("bid-details") 등록
"""

__version__ = "1.0.0"

from etowah_bids.config import ScraperConfig
from etowah_bids.crawler import BidCrawler, run_crawler
from etowah_bids.handler import handle
from etowah_bids.models.bid_item import Attachment, BidItem
from etowah_bids.models.task import FollowUpTask

__all__ = [
    "Attachment",
    "BidCrawler",
    "BidItem",
    "FollowUpTask",
    "ScraperConfig",
    "handle",
    "run_crawler",
]
