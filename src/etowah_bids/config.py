"""
스크래퍼 설정 관리 모듈

환경 변수, YAML 설정 파일, CLI 옵션을 통합 관리합니다.
python-dotenv를 통한 .env 파일 지원을 포함합니다.
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Any, Literal, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from etowah_bids.exceptions import ConfigurationException


class BrowserConfig(BaseModel):
    """브라우저 설정"""

    headless: bool = Field(default=True, description="헤드리스 모드 실행 여부")
    timeout: int = Field(default=30000, description="페이지 작업 기본 타임아웃 (ms)")
    slow_mo: int = Field(default=0, description="작업 간 딜레이 (ms)")
    viewport_width: int = Field(default=1920, description="뷰포트 너비")
    viewport_height: int = Field(default=1080, description="뷰포트 높이")
    user_agent: Optional[str] = Field(
        default="EtowahBidScraper/1.0",
        description="User-Agent 문자열",
    )


class SiteConfig(BaseModel):
    """
    대상 사이트 설정

    Etowah County 구매 페이지의 URL, 선택자, 고정 문구를 담습니다.
    사이트 구조가 바뀌면 코드 대신 이 값들을 조정합니다.
    """

    listing_url: str = Field(
        default="https://etowahcounty.org/department/purchasing/",
        description="이동할 구매 페이지 URL",
    )
    details_base_url: str = Field(
        default="https://etowahcounty.org/department/purchasing/",
        description="상세 URL 앞에 그대로 붙이는 기본 경로",
    )
    bids_link_selector: str = Field(
        default="html body main section div div div article div div div div div a",
        description="입찰 목록 화면으로 가는 링크",
    )
    container_selector: str = Field(default="div.post-wrapper", description="입찰 항목 컨테이너")
    title_selector: str = Field(default="h3.title a", description="컨테이너 내 제목 링크")
    attachment_selector: str = Field(
        default="div.attachments div.attachment-title a",
        description="컨테이너 내 첨부파일 링크",
    )
    title_boilerplate: str = Field(default="Read More", description="제목에서 제거할 문구")
    unknown_filename: str = Field(default="unknown_file", description="파일명을 알 수 없을 때 사용")
    details_task_name: str = Field(default="bid-details", description="상세 수집 작업 이름")


class LoggingConfig(BaseModel):
    """로깅 설정"""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="로그 레벨"
    )
    file: Optional[Path] = Field(default=None, description="로그 파일 경로")
    rotation: Literal["size", "none"] = Field(
        default="size", description="로그 회전 방식 (size: 크기 기준 회전, none: 단일 파일)"
    )
    max_bytes: int = Field(default=10 * 1024 * 1024, description="회전 시 최대 파일 크기")
    backup_count: int = Field(default=5, description="보관할 백업 파일 수")
    json_format: bool = Field(default=False, description="JSON 형식 로깅")
    extra_fields: Optional[dict[str, str]] = Field(
        default=None,
        description="JSON 로그에 추가할 필드 (예: {'service': 'etowah_bids'})",
    )


class ScraperConfig(BaseModel):
    """
    스크래퍼 통합 설정

    모든 설정을 하나의 객체로 관리합니다.
    """

    browser: BrowserConfig = Field(default_factory=BrowserConfig)
    site: SiteConfig = Field(default_factory=SiteConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    run_timeout: Optional[float] = Field(
        default=None, description="전체 실행 제한 시간 (초, None: 무제한)"
    )
    output_file: Optional[Path] = Field(default=None, description="결과 JSON 저장 경로")

    run_id: str = Field(
        default_factory=lambda: datetime.now().strftime("%Y%m%d_%H%M%S"),
        description="실행 식별자",
    )

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> "ScraperConfig":
        """
        환경 변수에서 설정 로드

        Args:
            env_file: .env 파일 경로 (None이면 자동 탐색)

        Returns:
            ScraperConfig 인스턴스
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        site = SiteConfig()
        if os.getenv("ETOWAH_LISTING_URL"):
            site.listing_url = os.environ["ETOWAH_LISTING_URL"]

        run_timeout = os.getenv("ETOWAH_RUN_TIMEOUT")
        log_file = os.getenv("ETOWAH_LOG_FILE")

        try:
            return cls(
                browser=BrowserConfig(
                    headless=os.getenv("ETOWAH_HEADLESS", "true").lower() == "true",
                    timeout=int(os.getenv("ETOWAH_TIMEOUT", "30000")),
                ),
                site=site,
                logging=LoggingConfig(
                    level=os.getenv("ETOWAH_LOG_LEVEL", "INFO"),  # type: ignore
                    file=Path(log_file) if log_file else None,
                ),
                run_timeout=float(run_timeout) if run_timeout else None,
            )
        except ValueError as e:
            raise ConfigurationException(f"Invalid environment configuration: {e}")

    @classmethod
    def from_yaml(cls, config_file: Path) -> "ScraperConfig":
        """
        YAML 설정 파일에서 로드

        Args:
            config_file: 설정 파일 경로

        Returns:
            ScraperConfig 인스턴스

        Raises:
            ConfigurationException: 파일이 없을 때
        """
        config_file = Path(config_file)
        if not config_file.exists():
            raise ConfigurationException(f"Config file not found: {config_file}")

        with open(config_file, "r", encoding="utf-8") as f:
            data: dict[str, Any] = yaml.safe_load(f) or {}

        return cls(**data)

    def to_summary(self) -> str:
        """설정 요약 문자열 생성"""
        parts = [
            f"URL={self.site.listing_url}",
            f"headless={self.browser.headless}",
            f"timeout={self.run_timeout or 'none'}",
        ]
        if self.output_file:
            parts.append(f"output={self.output_file}")
        return ", ".join(parts)
