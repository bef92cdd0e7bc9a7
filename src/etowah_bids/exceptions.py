"""
도메인 예외 정의

입찰 목록 스크래핑 과정에서 발생하는 예외를 정의합니다.
추출 루프 내부의 오류는 로깅 후 건너뛰며, 이 예외들은 호출자에게
실패를 알려야 하는 경계(네비게이션, 설정, 작업 등록)에서만 사용됩니다.
"""

from typing import Optional


class EtowahBidsException(Exception):
    """
    기본 예외 클래스

    모든 etowah_bids 예외의 기본 클래스입니다.
    상세 정보를 담을 수 있는 details 딕셔너리를 제공합니다.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class ScraperException(EtowahBidsException):
    """
    스크래핑 오류

    페이지 조작 중 발생하는 오류입니다.

    Attributes:
        selector: 오류가 발생한 CSS 선택자
        url: 오류가 발생한 URL

    Examples:
        >>> raise ScraperException(
        ...     "Element not found",
        ...     selector="div.post-wrapper",
        ...     url="https://etowahcounty.org/department/purchasing/"
        ... )
    """

    def __init__(
        self,
        message: str,
        selector: Optional[str] = None,
        url: Optional[str] = None,
    ):
        details = {}
        if selector:
            details["selector"] = selector
        if url:
            details["url"] = url

        super().__init__(message, details)
        self.selector = selector
        self.url = url


class NavigationException(ScraperException):
    """
    페이지 네비게이션 오류

    목록 페이지로의 이동(goto) 자체가 실패했을 때 발생합니다.
    입찰 링크 클릭 실패는 이 예외로 올리지 않습니다.
    """
    pass


class ParsingException(EtowahBidsException):
    """
    파싱 오류

    제목에서 입찰번호를 도출하지 못했을 때 등 텍스트 파싱 실패에 사용합니다.

    Attributes:
        raw_value: 파싱 시도한 원본 값
        expected_format: 기대한 형식

    Examples:
        >>> raise ParsingException(
        ...     "No bid number in title",
        ...     raw_value="Notice of Award",
        ...     expected_format="FY YYYY-NN"
        ... )
    """

    def __init__(
        self,
        message: str,
        raw_value: Optional[str] = None,
        expected_format: Optional[str] = None,
    ):
        details = {}
        if raw_value:
            details["raw_value"] = raw_value
        if expected_format:
            details["expected_format"] = expected_format

        super().__init__(message, details)
        self.raw_value = raw_value
        self.expected_format = expected_format


class ConfigurationException(EtowahBidsException):
    """
    설정 오류

    잘못된 설정 값이나 설정 파일 누락 시 발생합니다.

    Examples:
        >>> raise ConfigurationException("Config file not found: config.yaml")
    """
    pass


class SchedulingException(EtowahBidsException):
    """
    후속 작업 등록 오류

    작업 이름이 비어 있는 등 스케줄러에 넘길 수 없는 작업일 때 발생합니다.

    Attributes:
        api: 등록하려던 작업 이름
    """

    def __init__(self, message: str, api: Optional[str] = None):
        super().__init__(message, {"api": api} if api is not None else None)
        self.api = api
