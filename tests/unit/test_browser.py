"""
browser.py 단위 테스트

playwright를 목으로 바꿔 세션 생명주기를 검증합니다.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from etowah_bids.config import BrowserConfig
from etowah_bids.utils.browser import BrowserManager


def _fake_playwright():
    """async_playwright() 대체 객체와 주요 목 객체"""
    page = MagicMock()
    page.close = AsyncMock()

    context = MagicMock()
    context.new_page = AsyncMock(return_value=page)
    context.close = AsyncMock()

    browser = MagicMock()
    browser.new_context = AsyncMock(return_value=context)
    browser.close = AsyncMock()

    playwright = MagicMock()
    playwright.chromium.launch = AsyncMock(return_value=browser)
    playwright.stop = AsyncMock()

    starter = MagicMock()
    starter.start = AsyncMock(return_value=playwright)
    return starter, playwright, browser, context, page


class TestBrowserManager:
    """BrowserManager 테스트"""

    def test_context_options(self):
        manager = BrowserManager(BrowserConfig(viewport_width=1280, viewport_height=720))

        options = manager.context_options()

        assert options["viewport"] == {"width": 1280, "height": 720}
        assert options["locale"] == "en-US"
        assert options["timezone_id"] == "America/Chicago"
        assert options["user_agent"] == "EtowahBidScraper/1.0"

    @pytest.mark.asyncio
    async def test_get_page_requires_session(self):
        manager = BrowserManager()

        with pytest.raises(RuntimeError):
            async with manager.get_page():
                pass

    @pytest.mark.asyncio
    async def test_session_lifecycle(self):
        starter, playwright, browser, context, page = _fake_playwright()
        config = BrowserConfig(headless=False, timeout=5000)

        with patch("etowah_bids.utils.browser.async_playwright", return_value=starter):
            async with BrowserManager(config) as manager:
                async with manager.get_page() as opened:
                    assert opened is page
                page.close.assert_awaited_once()

        playwright.chromium.launch.assert_awaited_once_with(headless=False, slow_mo=0)
        context.set_default_timeout.assert_called_once_with(5000)
        context.close.assert_awaited_once()
        browser.close.assert_awaited_once()
        playwright.stop.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_page_closed_on_error(self):
        starter, _, _, _, page = _fake_playwright()

        with patch("etowah_bids.utils.browser.async_playwright", return_value=starter):
            async with BrowserManager() as manager:
                with pytest.raises(ValueError):
                    async with manager.get_page():
                        raise ValueError("scrape failed")

        page.close.assert_awaited_once()
