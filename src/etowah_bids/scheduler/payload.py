"""
후속 작업 스케줄러 연동 모듈

상세 페이지 수집 작업을 외부 스케줄러에 넘기는 경계를 정의합니다.
스크래퍼 입장에서는 fire-and-forget이며 반환값을 사용하지 않습니다.
"""

from typing import Callable, List, Optional, Protocol

from etowah_bids.exceptions import SchedulingException
from etowah_bids.models.task import FollowUpTask
from etowah_bids.utils.logger import get_logger

logger = get_logger(__name__)


class TaskScheduler(Protocol):
    """
    스케줄러 프로토콜

    의존성 주입을 위한 프로토콜입니다.
    PayloadQueue 등이 이 프로토콜을 만족합니다.
    """
    def extend_payload(self, task: FollowUpTask) -> None: ...


class PayloadQueue:
    """
    메모리 내 작업 큐

    등록된 작업을 순서대로 보관하고, 콜백이 있으면 즉시 전달합니다.
    CLI 실행과 테스트에서 기본 스케줄러로 사용됩니다.
    """

    def __init__(self, on_task: Optional[Callable[[FollowUpTask], None]] = None):
        """
        Args:
            on_task: 작업이 등록될 때마다 호출할 콜백 (외부 스케줄러로 전달용)
        """
        self._tasks: List[FollowUpTask] = []
        self._on_task = on_task

    def extend_payload(self, task: FollowUpTask) -> None:
        """
        작업 등록

        Raises:
            SchedulingException: 작업 이름이 비어 있을 때
        """
        if not task.api:
            raise SchedulingException("Task name must not be empty", api=task.api)

        self._tasks.append(task)
        logger.debug(f"Task queued: {task.api} {task.parameters}")

        if self._on_task:
            self._on_task(task)

    @property
    def tasks(self) -> List[FollowUpTask]:
        """등록된 작업 목록 (복사본)"""
        return list(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)
