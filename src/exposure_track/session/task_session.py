# src/exposure_track/session/task_session.py

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from ..core.ports import Clock
from ..tasks.task_models import Task, TaskStatus
from ..tasks.task_store import TaskStore
from .timer import SessionTimer, format_remaining

logger = logging.getLogger(__name__)


class TaskSession:
    """
    One timed attempt at a task.

    The timer never touches the store; only complete() and cancel() do:
    - complete(): records a completion (task becomes available)
    - cancel():   reverts the task to available, no completion recorded
    """

    def __init__(
        self,
        store: TaskStore,
        task: Task,
        *,
        clock: Clock = time.monotonic,
        tick_seconds: float = 1.0,
        on_tick: Callable[[int], None] | None = None,
        on_expire: Callable[[], None] | None = None,
    ) -> None:
        self._store = store
        self._task = task
        self._finished = False
        self.timer = SessionTimer(
            task.duration,
            clock=clock,
            tick_seconds=tick_seconds,
            on_tick=on_tick,
            on_expire=on_expire,
        )

    @classmethod
    def begin(cls, store: TaskStore, task: Task, **kwargs) -> TaskSession | None:
        """
        Mark the task ongoing and start its countdown.

        Returns None when the store refuses the transition (unknown id, or
        another session is active with single_active_session on, or the
        task is archived).
        Must be called from inside a running event loop; outside one it
        raises RuntimeError before the store is touched.
        """
        session = cls(store, task, **kwargs)
        session.timer.start()
        if not store.start(task):
            session.timer.stop()
            return None
        session._task = store.get(task.id) or task
        logger.info("Session started task=%s duration=%sm", task.id, task.duration)
        return session

    @property
    def task(self) -> Task:
        return self._task

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def remaining_seconds(self) -> int:
        return self.timer.remaining_seconds

    @property
    def expired(self) -> bool:
        return self.timer.expired

    def format_remaining(self) -> str:
        return format_remaining(self.timer.remaining_seconds)

    def complete(self) -> bool:
        """Finish the attempt (early or after expiry) and record a completion."""
        if self._finished:
            return False
        self._finished = True
        self.timer.stop()
        ok = self._store.mark_completed(self._task)
        logger.info("Session completed task=%s recorded=%s", self._task.id, ok)
        return ok

    def cancel(self) -> bool:
        """Abandon the attempt before expiry; no completion is recorded."""
        if self._finished:
            return False
        if self.timer.expired:
            logger.info("Session cancel ignored task=%s: timer already expired", self._task.id)
            return False
        self._finished = True
        self.timer.stop()
        current = self._store.get(self._task.id) or self._task
        ok = self._store.update(current.updated(status=TaskStatus.AVAILABLE))
        logger.info("Session cancelled task=%s reverted=%s", self._task.id, ok)
        return ok
