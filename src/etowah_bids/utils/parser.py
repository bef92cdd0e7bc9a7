"""
파싱 유틸리티

제목 상용구 제거, 입찰번호 도출, 첨부파일명 추출 등의 문자열 처리를 제공합니다.
브라우저 없이 독립적으로 테스트 가능한 순수 유틸리티입니다.
"""

import re
from typing import Callable, List, Optional, Pattern, Tuple

from etowah_bids.exceptions import ParsingException
from etowah_bids.models.bid_item import FY_PREFIX


DEFAULT_BOILERPLATE = "Read More"
DEFAULT_UNKNOWN_FILENAME = "unknown_file"

# (패턴, 변환 함수) 순서대로 평가하며 첫 매칭이 이깁니다
# 숫자는 ASCII [0-9]만 (전각 숫자 등은 입찰번호로 보지 않음), 공백은 \s로 NBSP까지 허용
BID_NUMBER_RULES: List[Tuple[Pattern[str], Callable[[re.Match], str]]] = [
    # "BID NO FY 2025-11", "Bid No. 2024-3"
    (
        re.compile(r"BID NO\.?\s*(?:FY\s*)?([0-9]{4}-[0-9]{1,2})", re.IGNORECASE),
        lambda m: f"{FY_PREFIX}{m.group(1)}",
    ),
    # 회계연도 범위 "2021-2022-23" -> 가운데 연도는 버림
    (
        re.compile(r"([0-9]{4})-[0-9]{4}-([0-9]{1,2})"),
        lambda m: f"{FY_PREFIX}{m.group(1)}-{m.group(2)}",
    ),
    # "FY 2023-08", "FY2023-8"
    (
        re.compile(r"FY\s*([0-9]{4}-[0-9]{1,2})", re.IGNORECASE),
        lambda m: f"{FY_PREFIX}{m.group(1)}",
    ),
]


class ParserUtils:
    """
    파싱 유틸리티 클래스

    모든 메서드는 정적 메서드로 구현되어 상태를 갖지 않습니다.

    Examples:
        >>> ParserUtils.extract_bid_number("BID NO FY 2025-11 Road Salt")
        'FY 2025-11'

        >>> ParserUtils.filename_from_url("https://x.org/docs/Addendum-1.pdf")
        'Addendum-1.pdf'
    """

    @staticmethod
    def strip_boilerplate(
        text: Optional[str],
        boilerplate: str = DEFAULT_BOILERPLATE,
    ) -> str:
        """
        제목 링크 텍스트에서 상용구 제거

        첫 번째로 나타나는 상용구만 제거한 뒤 앞뒤 공백을 정리합니다.
        내부 공백은 건드리지 않습니다.

        Args:
            text: 링크 텍스트 (None 가능)
            boilerplate: 제거할 문구

        Returns:
            정리된 제목

        Examples:
            >>> ParserUtils.strip_boilerplate("  BID NO FY 2025-11 Read More ")
            'BID NO FY 2025-11'
        """
        if not text:
            return ""
        if boilerplate:
            text = text.replace(boilerplate, "", 1)
        return text.strip()

    @staticmethod
    def extract_bid_number(text: Optional[str]) -> Optional[str]:
        """
        제목에서 회계연도 입찰번호 도출

        BID_NUMBER_RULES를 순서대로 적용하여 첫 매칭 결과를 반환합니다.

        지원 형식:
            - "BID NO FY 2025-11" / "BID NO. 2025-11" -> "FY 2025-11"
            - "2021-2022-23" -> "FY 2021-23"
            - "FY 2023-08" -> "FY 2023-08"

        Args:
            text: 제목 텍스트

        Returns:
            "FY YYYY-N(N)" 형식의 입찰번호 또는 None
        """
        if not text:
            return None

        for pattern, converter in BID_NUMBER_RULES:
            match = pattern.search(text)
            if match:
                return converter(match)

        return None

    @staticmethod
    def require_bid_number(text: Optional[str]) -> str:
        """
        입찰번호 도출 (실패 시 예외)

        Raises:
            ParsingException: 어떤 규칙에도 매칭되지 않을 때
        """
        bid_number = ParserUtils.extract_bid_number(text)
        if bid_number is None:
            raise ParsingException(
                "No bid number found in title",
                raw_value=text,
                expected_format="FY YYYY-NN",
            )
        return bid_number

    @staticmethod
    def filename_from_url(
        url: str,
        fallback: str = DEFAULT_UNKNOWN_FILENAME,
    ) -> str:
        """
        URL의 마지막 경로 조각을 파일명으로 사용

        쿼리스트링 등은 해석하지 않고 "/" 기준으로만 자릅니다.
        마지막 조각이 비어 있으면(예: "/" 로 끝남) fallback을 반환합니다.

        Examples:
            >>> ParserUtils.filename_from_url("/wp-content/uploads/Specs.pdf")
            'Specs.pdf'

            >>> ParserUtils.filename_from_url("https://x.org/docs/")
            'unknown_file'
        """
        return url.split("/")[-1] or fallback

    @staticmethod
    def build_details_url(base_url: str, href: Optional[str]) -> Optional[str]:
        """
        상세 페이지 URL 생성

        URL 결합 규칙을 적용하지 않고 기본 경로와 href를 그대로 이어붙입니다.
        하위 시스템이 이 문자열 형태에 의존하므로 중복 슬래시도 정규화하지 않습니다.

        Args:
            base_url: 기본 경로 (예: "https://etowahcounty.org/department/purchasing/")
            href: 제목 링크의 href (None 또는 빈 문자열 가능)

        Returns:
            이어붙인 URL 또는 None

        Examples:
            >>> ParserUtils.build_details_url("https://e.org/p/", "/bids/123")
            'https://e.org/p//bids/123'
        """
        if not href:
            return None
        return f"{base_url}{href}"
