"""
로깅 설정 모듈

"etowah_bids" 로거 하나에 핸들러를 달고, 모듈 로거는 모두 그 하위로 전파합니다.
콘솔은 stderr로만 출력합니다 (stdout은 --json 결과용).
"""

import json
import logging
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Optional

from etowah_bids.config import LoggingConfig


ROOT_LOGGER_NAME = "etowah_bids"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# LogRecord 기본 속성 (이외의 속성은 extra=로 넘어온 값)
_RECORD_ATTRS = set(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


class ColoredFormatter(logging.Formatter):
    """
    콘솔용 컬러 포매터

    레벨 이름만 색을 입힙니다. 같은 레코드를 파일 핸들러도 쓰므로
    원본 레코드는 건드리지 않고 복사본을 포맷합니다.
    """

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().format(record)

        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)


class JsonFormatter(logging.Formatter):
    """
    JSON Lines 포매터

    한 줄 예:
        {"time": "2025-01-15T14:30:00+00:00", "level": "DEBUG",
         "logger": "etowah_bids.scrapers.BidListScraper",
         "message": "Collected: [FY 2025-11] ...", "extra": {"bid_id": "FY 2025-11"}}
    """

    def __init__(self, extra_fields: Optional[dict[str, Any]] = None):
        """
        Args:
            extra_fields: 모든 줄에 붙일 고정 필드 (예: {"service": "etowah_bids"})
        """
        super().__init__()
        self.extra_fields = extra_fields or {}

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **self.extra_fields,
        }

        extra = {
            key: value for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        }
        if extra:
            entry["extra"] = extra

        if record.exc_info and record.exc_info[0] is not None:
            entry["error"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": self.formatException(record.exc_info),
            }

        return json.dumps(entry, ensure_ascii=False, default=str)


def _build_file_handler(settings: LoggingConfig) -> logging.Handler:
    log_file = Path(settings.file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    if settings.rotation == "size":
        return RotatingFileHandler(
            log_file,
            maxBytes=settings.max_bytes,
            backupCount=settings.backup_count,
            encoding="utf-8",
        )
    return logging.FileHandler(log_file, encoding="utf-8")


def setup_logger(
    settings: Optional[LoggingConfig] = None,
    console_output: bool = True,
) -> logging.Logger:
    """
    패키지 루트 로거 설정

    호출할 때마다 기존 핸들러를 닫고 설정에 맞춰 다시 답니다.
    (CLI에서 --verbose 등으로 설정이 바뀐 뒤 다시 호출해도 중복 출력이 없습니다.)

    Args:
        settings: 로깅 설정 (None이면 기본값)
        console_output: stderr 출력 여부

    Returns:
        "etowah_bids" 로거
    """
    settings = settings or LoggingConfig()
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    reset_loggers()
    logger.setLevel(settings.level)

    json_formatter = JsonFormatter(settings.extra_fields) if settings.json_format else None

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(
            json_formatter or ColoredFormatter(LOG_FORMAT, datefmt=DATE_FORMAT)
        )
        logger.addHandler(console_handler)

    if settings.file:
        file_handler = _build_file_handler(settings)
        file_handler.setFormatter(
            json_formatter or logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
        )
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """모듈 로거 (핸들러 없이 루트 로거로 전파)"""
    return logging.getLogger(name)


def reset_loggers() -> None:
    """루트 로거의 핸들러를 닫고 제거, 레벨도 해제"""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.NOTSET)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


class CrawlLogger:
    """
    실행 단위 로거

    한 번의 스크래핑 실행의 시작/종료와 항목 단위 이벤트를 일관된 형식으로 남깁니다.
    입찰번호는 extra로도 넘겨 JSON 로그에서 필드로 검색할 수 있게 합니다.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or get_logger(ROOT_LOGGER_NAME)
        self.start_time: Optional[datetime] = None

    def start_run(self, run_id: str, config_summary: str = "") -> None:
        """실행 시작 로그"""
        self.start_time = datetime.now()
        self.logger.info(f"Scrape started: {run_id}", extra={"run_id": run_id})
        if config_summary:
            self.logger.info(f"Config: {config_summary}")

    def end_run(self, total: int, scheduled: int) -> None:
        """실행 종료 로그"""
        elapsed = ""
        if self.start_time:
            elapsed = f" in {datetime.now() - self.start_time}"

        self.logger.info(
            f"Scrape finished{elapsed}: bids: {total}, follow-up tasks: {scheduled}",
            extra={"bids": total, "scheduled": scheduled},
        )

    def item_collected(self, bid_id: str, title: str) -> None:
        """항목 수집 로그"""
        self.logger.debug(f"Collected: [{bid_id}] {title[:60]}", extra={"bid_id": bid_id})

    def item_skipped(self, index: int, reason: str) -> None:
        """항목 제외 로그 (오류가 아닌 의도된 제외)"""
        self.logger.debug(f"Skipped container {index}: {reason}", extra={"container": index})

    def task_scheduled(self, api: str, bid_id: str) -> None:
        """후속 작업 등록 로그"""
        self.logger.debug(f"Scheduled {api} for {bid_id}", extra={"api": api, "bid_id": bid_id})
