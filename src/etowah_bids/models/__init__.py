"""데이터 모델 패키지"""

from etowah_bids.models.bid_item import Attachment, BidItem
from etowah_bids.models.task import DETAILS_TASK_NAME, FollowUpTask

__all__ = [
    "Attachment",
    "BidItem",
    "DETAILS_TASK_NAME",
    "FollowUpTask",
]
