"""
브라우저 세션 모듈

구매 페이지 한 장을 렌더링하기 위한 Chromium 세션을 열고 닫습니다.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Page,
    Playwright,
    TimeoutError as PlaywrightTimeout,
)

from etowah_bids.config import BrowserConfig
from etowah_bids.utils.logger import get_logger

logger = get_logger(__name__)


class BrowserManager:
    """
    Chromium 세션 관리자

    `async with`로 들어갈 때 브라우저와 컨텍스트를 만들고, 나올 때 모두 닫습니다.
    컨텍스트는 카운티 사이트 기준(미국 영어, 중부 시간대)으로 고정합니다.

    Usage:
        async with BrowserManager(config.browser) as manager:
            async with manager.get_page() as page:
                bids = await handle(page, scheduler)
    """

    LOCALE = "en-US"
    TIMEZONE = "America/Chicago"

    def __init__(self, config: Optional[BrowserConfig] = None):
        self.config = config or BrowserConfig()
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None

    def context_options(self) -> dict[str, Any]:
        """new_context()에 넘길 옵션"""
        return {
            "viewport": {
                "width": self.config.viewport_width,
                "height": self.config.viewport_height,
            },
            "user_agent": self.config.user_agent,
            "locale": self.LOCALE,
            "timezone_id": self.TIMEZONE,
        }

    async def __aenter__(self) -> "BrowserManager":
        self._playwright = await async_playwright().start()
        self._browser = await self._playwright.chromium.launch(
            headless=self.config.headless,
            slow_mo=self.config.slow_mo,
        )
        self._context = await self._browser.new_context(**self.context_options())
        self._context.set_default_timeout(self.config.timeout)

        logger.info(f"Chromium launched (headless={self.config.headless})")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        # 컨텍스트 -> 브라우저 -> playwright 순으로 정리
        if self._context is not None:
            await self._context.close()
        if self._browser is not None:
            await self._browser.close()
        if self._playwright is not None:
            await self._playwright.stop()

        self._context = self._browser = self._playwright = None
        logger.info("Chromium closed")

    @asynccontextmanager
    async def get_page(self) -> AsyncGenerator[Page, None]:
        """세션 안에서 페이지 하나를 열고, 블록이 끝나면 닫음"""
        if self._context is None:
            raise RuntimeError("BrowserManager must be entered with 'async with' first")

        page = await self._context.new_page()
        try:
            yield page
        finally:
            await page.close()


async def wait_for_network_idle(page: Page, timeout: Optional[int] = None) -> bool:
    """
    네트워크 유휴 상태 대기

    타임아웃은 경고만 남기고 진행합니다.

    Returns:
        제한 시간 안에 유휴 상태가 되었으면 True
    """
    try:
        await page.wait_for_load_state("networkidle", timeout=timeout)
        return True
    except PlaywrightTimeout:
        logger.warning("Timed out waiting for network idle - continuing")
        return False
