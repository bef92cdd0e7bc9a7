"""
후속 작업 모델

상세 페이지 수집을 외부 스케줄러에 요청할 때 전달하는 작업 단위입니다.
"""

from typing import Any

from pydantic import BaseModel, Field

from etowah_bids.models.bid_item import BidItem


DETAILS_TASK_NAME = "bid-details"


class FollowUpTask(BaseModel):
    """
    외부 스케줄러에 등록할 작업

    Attributes:
        api: 논리적 작업 이름 (예: "bid-details")
        parameters: 작업 파라미터 묶음
    """

    api: str = Field(..., description="작업 이름")
    parameters: dict[str, Any] = Field(default_factory=dict, description="작업 파라미터")

    @classmethod
    def for_bid_details(cls, bid: BidItem, api: str = DETAILS_TASK_NAME) -> "FollowUpTask":
        """
        입찰 항목의 상세 페이지 수집 작업 생성

        Args:
            bid: 상세 URL이 있는 입찰 항목
            api: 작업 이름

        Returns:
            bidFullUrl과 signal_source_unique_id를 담은 작업
        """
        return cls(
            api=api,
            parameters={
                "bidFullUrl": bid.details_url_for_item,
                "signal_source_unique_id": bid.signal_source_unique_id,
            },
        )
