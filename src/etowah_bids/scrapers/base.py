"""
기본 스크래퍼 추상 클래스

모든 스크래퍼의 공통 인터페이스와 Playwright 상호작용 헬퍼를 정의합니다.
파싱 로직은 ParserUtils에 위임합니다.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from playwright.async_api import ElementHandle, Page

from etowah_bids.exceptions import NavigationException
from etowah_bids.utils.browser import wait_for_network_idle
from etowah_bids.utils.logger import get_logger
from etowah_bids.utils.parser import ParserUtils


class BaseScraper(ABC):
    """
    스크래퍼 기본 클래스

    Attributes:
        page: Playwright 페이지 인스턴스
        logger: 로거 인스턴스
        _parser: ParserUtils 인스턴스 (composition)
    """

    def __init__(self, page: Page):
        self.page = page
        self.logger = get_logger(f"etowah_bids.scrapers.{self.__class__.__name__}")
        self._parser = ParserUtils()

    @abstractmethod
    async def scrape(self) -> Any:
        """
        스크래핑 실행

        Returns:
            스크래핑 결과 (하위 클래스에서 타입 정의)
        """
        pass

    # === 페이지 수준 조작 ===

    async def navigate(self, url: str, wait_until: str = "load") -> None:
        """
        URL로 이동

        Args:
            url: 이동할 URL
            wait_until: 대기 조건 (load, domcontentloaded, networkidle)

        Raises:
            NavigationException: 네비게이션 실패 시
        """
        try:
            await self.page.goto(url, wait_until=wait_until)
        except Exception as e:
            raise NavigationException(f"Navigation failed: {e}", url=url)

    async def click(self, selector: str, timeout: Optional[int] = None) -> bool:
        """
        요소 클릭 (실패 허용)

        클릭 실패는 경고 로그만 남기고 False를 반환합니다.

        Args:
            selector: CSS 선택자
            timeout: 대기 시간 (ms, None이면 컨텍스트 기본값)

        Returns:
            클릭 성공 여부
        """
        try:
            await self.page.click(selector, timeout=timeout)
            return True
        except Exception as e:
            self.logger.warning(f"Click failed on {selector}: {e}")
        return False

    async def wait_until_idle(self, timeout: Optional[int] = None) -> bool:
        """네트워크 유휴 상태 대기 (실패 허용)"""
        try:
            return await wait_for_network_idle(self.page, timeout=timeout)
        except Exception as e:
            self.logger.warning(f"Waiting for network idle failed: {e}")
        return False

    # === 요소 수준 조회 ===

    async def query_all(self, selector: str, root: Optional[ElementHandle] = None) -> List[ElementHandle]:
        """
        선택자에 매칭되는 모든 요소

        root가 주어지면 그 요소의 하위에서만 찾습니다.
        """
        scope = root if root is not None else self.page
        elements = await scope.query_selector_all(selector)
        return list(elements or [])

    async def query_one(self, selector: str, root: Optional[ElementHandle] = None) -> Optional[ElementHandle]:
        """
        선택자에 매칭되는 첫 요소 (없으면 None)

        여러 개가 매칭되어도 예외 없이 문서 순서상 첫 요소를 씁니다.
        (컨테이너에 제목 링크가 둘 이상이면 첫 링크 기준으로 파싱)
        """
        scope = root if root is not None else self.page
        return await scope.query_selector(selector)

    async def element_text(self, element: ElementHandle) -> str:
        """요소의 textContent (None이면 빈 문자열, 공백은 그대로 둠)"""
        text = await element.text_content()
        return text or ""

    async def element_attribute(self, element: ElementHandle, name: str) -> Optional[str]:
        """요소의 속성 값 (없거나 빈 문자열이면 None)"""
        value = await element.get_attribute(name)
        return value or None
