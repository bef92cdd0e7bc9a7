"""
pytest 설정 및 공통 픽스처

Playwright 페이지/요소 목 객체와 샘플 입찰 데이터를 정의합니다.
"""

from typing import Callable, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from etowah_bids.config import ScraperConfig, SiteConfig
from etowah_bids.models.bid_item import Attachment, BidItem
from etowah_bids.utils.logger import reset_loggers


SITE = SiteConfig()


# === 로거 초기화 ===

@pytest.fixture(autouse=True)
def clean_loggers():
    """테스트 간 로거 핸들러 공유 방지"""
    yield
    reset_loggers()


# === 설정 픽스처 ===

@pytest.fixture
def site_config() -> SiteConfig:
    """기본 사이트 설정"""
    return SiteConfig()


@pytest.fixture
def test_config(tmp_path) -> ScraperConfig:
    """테스트용 스크래퍼 설정"""
    config = ScraperConfig()
    config.logging.level = "DEBUG"
    config.logging.file = tmp_path / "logs" / "test.log"
    return config


# === 목 요소 팩토리 ===

def create_mock_element(
    text: Optional[str] = None,
    attrs: Optional[Dict[str, str]] = None,
    children: Optional[Dict[str, List[MagicMock]]] = None,
) -> MagicMock:
    """
    목 ElementHandle 생성

    Args:
        text: text_content() 반환값
        attrs: get_attribute(name) 조회용 속성
        children: 선택자별 하위 요소 (query_selector / query_selector_all)
    """
    attrs = attrs or {}
    children = children or {}

    element = MagicMock()
    element.text_content = AsyncMock(return_value=text)
    element.get_attribute = AsyncMock(side_effect=lambda name: attrs.get(name))
    element.query_selector = AsyncMock(
        side_effect=lambda selector: (children.get(selector) or [None])[0]
    )
    element.query_selector_all = AsyncMock(
        side_effect=lambda selector: list(children.get(selector, []))
    )
    return element


def create_bid_container(
    title: Optional[str] = None,
    href: Optional[str] = None,
    attachment_hrefs: Optional[List[Optional[str]]] = None,
) -> MagicMock:
    """
    div.post-wrapper 목 컨테이너 생성

    title이 None이면 제목 링크가 없는 컨테이너를 만듭니다.
    attachment_hrefs의 None 항목은 href가 없는 첨부 링크가 됩니다.
    """
    children: Dict[str, List[MagicMock]] = {}

    if title is not None:
        link_attrs = {"href": href} if href is not None else {}
        children[SITE.title_selector] = [create_mock_element(text=title, attrs=link_attrs)]

    links = []
    for attachment_href in attachment_hrefs or []:
        attrs = {"href": attachment_href} if attachment_href is not None else {}
        links.append(create_mock_element(text="Download", attrs=attrs))
    children[SITE.attachment_selector] = links

    return create_mock_element(children=children)


def create_mock_page(containers: Optional[List[MagicMock]] = None) -> MagicMock:
    """
    목 Playwright 페이지 생성

    container 선택자로 조회하면 주어진 컨테이너 목록을 반환합니다.
    """
    containers = containers or []

    page = MagicMock()
    page.url = SITE.listing_url
    page.goto = AsyncMock()
    page.click = AsyncMock()
    page.wait_for_load_state = AsyncMock()
    page.close = AsyncMock()
    page.query_selector = AsyncMock(return_value=None)
    page.query_selector_all = AsyncMock(
        side_effect=lambda selector: list(containers) if selector == SITE.container_selector else []
    )
    return page


@pytest.fixture
def make_element() -> Callable[..., MagicMock]:
    return create_mock_element


@pytest.fixture
def make_container() -> Callable[..., MagicMock]:
    return create_bid_container


@pytest.fixture
def make_page() -> Callable[..., MagicMock]:
    return create_mock_page


@pytest.fixture
def mock_page() -> MagicMock:
    """빈 목 페이지"""
    return create_mock_page()


# === 모델 픽스처 ===

@pytest.fixture
def sample_bid() -> BidItem:
    """샘플 입찰 항목"""
    return BidItem(
        title="BID NO FY 2025-11 Road Salt",
        signal_source_unique_id="FY 2025-11",
        details_url_for_item="https://etowahcounty.org/department/purchasing/bid-no-fy-2025-11/",
        attachments=[
            Attachment(filename="Specs.pdf", suggested_filename="Specs.pdf"),
            Attachment(filename="Addendum-1.pdf", suggested_filename="Addendum-1.pdf"),
        ],
    )


@pytest.fixture
def listing_containers() -> List[MagicMock]:
    """
    실제 목록과 비슷한 컨테이너 묶음

    - 정상 입찰 2건 (하나는 중복 렌더링)
    - 회계연도 범위 형식 1건 (href 없음)
    - 입찰번호 없는 공지 1건
    - 제목 링크 없는 컨테이너 1건
    """
    return [
        create_bid_container(
            "BID NO FY 2025-11 Road Salt Read More",
            href="bid-no-fy-2025-11/",
            attachment_hrefs=["https://etowahcounty.org/wp-content/uploads/Specs.pdf"],
        ),
        create_bid_container("Notice of Award Read More", href="notice-of-award/"),
        create_bid_container(
            "FY 2023-08 Janitorial Services Read More",
            href="fy-2023-08/",
            attachment_hrefs=[None, "/docs/Addendum-1.pdf"],
        ),
        create_bid_container(None),
        create_bid_container("Paving 2021-2022-23 Read More"),
        create_bid_container(
            "BID NO FY 2025-11 Road Salt Read More",
            href="bid-no-fy-2025-11/",
            attachment_hrefs=["https://etowahcounty.org/wp-content/uploads/Specs.pdf"],
        ),
    ]
