"""스크래퍼 패키지"""

from etowah_bids.scrapers.base import BaseScraper
from etowah_bids.scrapers.bid_list_scraper import BidListScraper, extract_bids

__all__ = [
    "BaseScraper",
    "BidListScraper",
    "extract_bids",
]
