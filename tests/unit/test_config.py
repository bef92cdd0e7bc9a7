"""
config.py 단위 테스트

ScraperConfig 및 하위 설정 클래스들을 테스트합니다.
"""

from pathlib import Path

import pytest
import yaml

from etowah_bids.config import (
    BrowserConfig,
    LoggingConfig,
    ScraperConfig,
    SiteConfig,
)
from etowah_bids.exceptions import ConfigurationException


class TestBrowserConfig:
    """BrowserConfig 테스트"""

    def test_default_values(self) -> None:
        config = BrowserConfig()
        assert config.headless is True
        assert config.timeout == 30000
        assert config.user_agent is not None


class TestSiteConfig:
    """SiteConfig 테스트"""

    def test_default_values(self) -> None:
        config = SiteConfig()
        assert config.listing_url == "https://etowahcounty.org/department/purchasing/"
        assert config.details_base_url == "https://etowahcounty.org/department/purchasing/"
        assert config.container_selector == "div.post-wrapper"
        assert config.title_selector == "h3.title a"
        assert config.attachment_selector == "div.attachments div.attachment-title a"
        assert config.title_boilerplate == "Read More"
        assert config.unknown_filename == "unknown_file"
        assert config.details_task_name == "bid-details"


class TestLoggingConfig:
    """LoggingConfig 테스트"""

    def test_default_values(self) -> None:
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.file is None
        assert config.json_format is False

    def test_invalid_level(self) -> None:
        with pytest.raises(ValueError):
            LoggingConfig(level="VERBOSE")


class TestScraperConfig:
    """ScraperConfig 테스트"""

    def test_default_values(self) -> None:
        config = ScraperConfig()
        assert config.run_timeout is None
        assert config.output_file is None
        assert config.run_id

    def test_from_env(self, monkeypatch, tmp_path) -> None:
        monkeypatch.setenv("ETOWAH_LISTING_URL", "https://staging.example.org/purchasing/")
        monkeypatch.setenv("ETOWAH_HEADLESS", "false")
        monkeypatch.setenv("ETOWAH_TIMEOUT", "5000")
        monkeypatch.setenv("ETOWAH_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("ETOWAH_RUN_TIMEOUT", "90")
        monkeypatch.setenv("ETOWAH_LOG_FILE", str(tmp_path / "scraper.log"))

        config = ScraperConfig.from_env(env_file=tmp_path / "missing.env")

        assert config.site.listing_url == "https://staging.example.org/purchasing/"
        assert config.site.details_base_url == "https://etowahcounty.org/department/purchasing/"
        assert config.browser.headless is False
        assert config.browser.timeout == 5000
        assert config.logging.level == "DEBUG"
        assert config.logging.file == tmp_path / "scraper.log"
        assert config.run_timeout == 90.0

    def test_from_env_defaults(self, monkeypatch, tmp_path) -> None:
        for name in (
            "ETOWAH_LISTING_URL", "ETOWAH_HEADLESS", "ETOWAH_TIMEOUT",
            "ETOWAH_LOG_LEVEL", "ETOWAH_RUN_TIMEOUT", "ETOWAH_LOG_FILE",
        ):
            monkeypatch.delenv(name, raising=False)

        config = ScraperConfig.from_env(env_file=tmp_path / "missing.env")

        assert config.browser.headless is True
        assert config.run_timeout is None
        assert config.logging.file is None

    def test_from_env_invalid_value(self, monkeypatch, tmp_path) -> None:
        monkeypatch.setenv("ETOWAH_TIMEOUT", "soon")

        with pytest.raises(ConfigurationException):
            ScraperConfig.from_env(env_file=tmp_path / "missing.env")

    def test_from_env_file(self, monkeypatch, tmp_path) -> None:
        # .env가 채운 값도 테스트 후 제거되도록 monkeypatch에 등록
        monkeypatch.setenv("ETOWAH_RUN_TIMEOUT", "0")
        monkeypatch.delenv("ETOWAH_RUN_TIMEOUT")
        env_file = tmp_path / ".env"
        env_file.write_text("ETOWAH_RUN_TIMEOUT=45\n", encoding="utf-8")

        config = ScraperConfig.from_env(env_file=env_file)

        assert config.run_timeout == 45.0

    def test_from_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            yaml.safe_dump({
                "browser": {"headless": False},
                "site": {"container_selector": "article.bid"},
                "run_timeout": 120,
            }),
            encoding="utf-8",
        )

        config = ScraperConfig.from_yaml(config_file)

        assert config.browser.headless is False
        assert config.site.container_selector == "article.bid"
        assert config.site.title_selector == "h3.title a"
        assert config.run_timeout == 120

    def test_from_yaml_empty_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("", encoding="utf-8")

        assert ScraperConfig.from_yaml(config_file).site == SiteConfig()

    def test_from_yaml_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationException):
            ScraperConfig.from_yaml(tmp_path / "nope.yaml")

    def test_to_summary(self, tmp_path: Path) -> None:
        config = ScraperConfig(output_file=tmp_path / "bids.json")
        summary = config.to_summary()

        assert "URL=https://etowahcounty.org/department/purchasing/" in summary
        assert "output=" in summary
