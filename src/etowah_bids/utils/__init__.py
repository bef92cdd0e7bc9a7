"""유틸리티 패키지"""

from etowah_bids.utils.browser import BrowserManager, wait_for_network_idle
from etowah_bids.utils.dedup import dedupe_bids
from etowah_bids.utils.logger import CrawlLogger, JsonFormatter, get_logger, reset_loggers, setup_logger
from etowah_bids.utils.parser import ParserUtils

__all__ = [
    # parser
    "ParserUtils",
    "dedupe_bids",
    # logger
    "setup_logger",
    "get_logger",
    "reset_loggers",
    "CrawlLogger",
    "JsonFormatter",
    # browser
    "BrowserManager",
    "wait_for_network_idle",
]
