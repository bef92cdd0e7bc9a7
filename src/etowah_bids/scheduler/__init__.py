"""후속 작업 스케줄러 연동 패키지"""

from etowah_bids.scheduler.payload import PayloadQueue, TaskScheduler

__all__ = [
    "PayloadQueue",
    "TaskScheduler",
]
