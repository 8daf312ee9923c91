# src/exposure_track/tasks/task_store.py

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from datetime import datetime

from ..core.ports import TaskDocument, TaskObserver
from .task_models import Task, TaskSortOrder, TaskStatus

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now().astimezone()


_SORT_KEYS: dict[TaskSortOrder, Callable[[Task], object]] = {
    TaskSortOrder.TITLE: lambda t: t.title,
    TaskSortOrder.CATEGORY: lambda t: t.category.value,
    TaskSortOrder.ANXIETY_LEVEL: lambda t: t.anxiety_level,
}


class TaskStore:
    """
    Authoritative in-memory task collection.

    Every mutation that changes the collection is written through to the
    document and then announced to observers, synchronously and in order.

    Lookups by id that miss are no-ops: nothing is saved or announced and
    the operation returns False. Callers holding a stale copy can check the
    result but are never raised at.
    """

    def __init__(
        self,
        document: TaskDocument,
        *,
        single_active_session: bool = False,
        now: Callable[[], datetime] = _now,
    ) -> None:
        self._document = document
        self._single_active_session = single_active_session
        self._now = now
        self._observers: list[TaskObserver] = []
        self._tasks: list[Task] = list(document.load())
        logger.info("TaskStore ready total=%s", len(self._tasks))

    # ---- observers ----

    def subscribe(self, observer: TaskObserver) -> Callable[[], None]:
        """Register a change callback. Returns a function that unsubscribes it."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _commit(self, action: str, task_id: uuid.UUID) -> None:
        self._document.save(self._tasks)
        logger.debug("Task %s id=%s total=%s", action, task_id, len(self._tasks))
        for observer in list(self._observers):
            try:
                observer(self)
            except Exception:
                logger.exception("Task observer failed after %s", action)

    # ---- reads ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        """Snapshot of the collection in insertion order."""
        return tuple(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def get(self, task_id: uuid.UUID) -> Task | None:
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    def query(self, status: TaskStatus, sort_order: TaskSortOrder) -> list[Task]:
        """Tasks with the given status, sorted ascending by the chosen key (stable)."""
        filtered = [t for t in self._tasks if t.status == status]
        return sorted(filtered, key=_SORT_KEYS[sort_order])

    def ongoing(self) -> list[Task]:
        return [t for t in self._tasks if t.status == TaskStatus.ONGOING]

    # ---- mutations ----

    def _index_of(self, task_id: uuid.UUID) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    def _replace_at(self, task_id: uuid.UUID, build: Callable[[Task], Task], action: str) -> bool:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("Task %s skipped: id=%s not found", action, task_id)
            return False
        self._tasks[idx] = build(self._tasks[idx])
        self._commit(action, task_id)
        return True

    def add(self, task: Task) -> None:
        # Ids come from uuid4; uniqueness is not re-checked here.
        self._tasks.append(task)
        self._commit("add", task.id)

    def update(self, task: Task) -> bool:
        """Replace the stored task that has task.id with `task` wholesale."""
        return self._replace_at(task.id, lambda _old: task, "update")

    def mark_completed(self, task: Task) -> bool:
        """Prepend a completion timestamp to the stored task and make it available."""
        ts = self._now()
        return self._replace_at(
            task.id,
            lambda old: old.updated(
                completions=(ts, *old.completions),
                status=TaskStatus.AVAILABLE,
            ),
            "complete",
        )

    def delete(self, task: Task) -> bool:
        remaining = [t for t in self._tasks if t.id != task.id]
        if len(remaining) == len(self._tasks):
            logger.debug("Task delete skipped: id=%s not found", task.id)
            return False
        self._tasks = remaining
        self._commit("delete", task.id)
        return True

    def archive(self, task: Task) -> bool:
        return self._set_status(task, TaskStatus.ARCHIVED, "archive")

    def unarchive(self, task: Task) -> bool:
        return self._set_status(task, TaskStatus.AVAILABLE, "unarchive")

    def start(self, task: Task) -> bool:
        """
        Move a task into the ongoing state for a timed session.

        Archived tasks are refused (returns False); they must be unarchived
        first. With single_active_session enabled, also refuses while a
        different task is already ongoing.
        """
        stored = self.get(task.id)
        if stored is not None and stored.status == TaskStatus.ARCHIVED:
            logger.info("Task start refused id=%s: archived", task.id)
            return False
        if self._single_active_session:
            others = [t for t in self.ongoing() if t.id != task.id]
            if others:
                logger.info("Task start refused id=%s: %s already ongoing", task.id, others[0].id)
                return False
        return self._set_status(task, TaskStatus.ONGOING, "start")

    def _set_status(self, task: Task, status: TaskStatus, action: str) -> bool:
        return self._replace_at(task.id, lambda old: old.updated(status=status), action)
