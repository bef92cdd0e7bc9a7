"""
중복 제거 유틸리티

같은 목록이 페이지에 여러 번 렌더링되는 경우를 대비하여
복합 키 기준으로 첫 항목만 남깁니다.
"""

from typing import Hashable, List, Set

from etowah_bids.models.bid_item import BidItem


def dedupe_bids(items: List[BidItem]) -> List[BidItem]:
    """
    입찰 항목 중복 제거

    BidItem.dedup_key() 가 같은 항목 중 처음 나온 것만 남기며,
    남은 항목의 순서는 처음 등장한 순서를 유지합니다.

    Args:
        items: 추출 순서대로 나열된 입찰 항목

    Returns:
        중복이 제거된 새 리스트
    """
    seen: Set[Hashable] = set()
    unique: List[BidItem] = []

    for item in items:
        key = item.dedup_key()
        if key in seen:
            continue
        seen.add(key)
        unique.append(item)

    return unique
