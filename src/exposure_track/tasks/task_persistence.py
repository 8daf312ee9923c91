# src/exposure_track/tasks/task_persistence.py

from __future__ import annotations

import contextlib
import json
import logging
import os
import uuid
from collections.abc import Callable, Iterable
from datetime import datetime
from pathlib import Path
from typing import Any

from .seed_data import seed_tasks
from .task_models import Task, TaskCategory, TaskStatus

logger = logging.getLogger(__name__)

# anxietyLevel has always been stored in a signed 8-bit range.
ANXIETY_LEVEL_RANGE = (-128, 127)


class TaskDocumentError(ValueError):
    """The persisted document does not match the task record schema."""


def task_to_record(task: Task) -> dict[str, Any]:
    return {
        "id": str(task.id),
        "title": task.title,
        "category": task.category.value,
        "trigger": task.trigger,
        "goal": task.goal,
        "instructions": list(task.instructions),
        "duration": task.duration,
        "anxietyLevel": task.anxiety_level,
        "status": task.status.value,
        "completions": [ts.isoformat() for ts in task.completions],
    }


def _require(record: dict[str, Any], key: str, kind: type | tuple[type, ...]) -> Any:
    if key not in record:
        raise TaskDocumentError(f"missing field {key!r}")
    value = record[key]
    # bool is an int subclass; never accept it for numeric fields
    if isinstance(value, bool) or not isinstance(value, kind):
        raise TaskDocumentError(f"field {key!r} has unexpected type {type(value).__name__}")
    return value


def _parse_timestamp(raw: Any) -> datetime:
    if not isinstance(raw, str):
        raise TaskDocumentError(f"completion is not a string: {raw!r}")
    try:
        ts = datetime.fromisoformat(raw)
    except ValueError as e:
        raise TaskDocumentError(f"bad completion timestamp {raw!r}") from e
    # Naive values are read as local time.
    return ts if ts.tzinfo is not None else ts.astimezone()


def record_to_task(record: Any) -> Task:
    """Strict decode of one record. Any deviation raises TaskDocumentError."""
    if not isinstance(record, dict):
        raise TaskDocumentError("task record is not an object")

    try:
        task_id = uuid.UUID(_require(record, "id", str))
        category = TaskCategory(_require(record, "category", str))
        status = TaskStatus(_require(record, "status", str))
    except TaskDocumentError:
        raise
    except ValueError as e:
        raise TaskDocumentError(str(e)) from e

    instructions = _require(record, "instructions", list)
    if not all(isinstance(step, str) for step in instructions):
        raise TaskDocumentError("instructions must be strings")

    duration = _require(record, "duration", int)
    if duration <= 0:
        raise TaskDocumentError(f"duration must be positive, got {duration}")

    anxiety_level = _require(record, "anxietyLevel", int)
    low, high = ANXIETY_LEVEL_RANGE
    if not low <= anxiety_level <= high:
        raise TaskDocumentError(f"anxietyLevel out of range: {anxiety_level}")

    return Task(
        id=task_id,
        title=_require(record, "title", str),
        category=category,
        trigger=_require(record, "trigger", str),
        goal=_require(record, "goal", str),
        instructions=tuple(instructions),
        duration=duration,
        anxiety_level=anxiety_level,
        status=status,
        completions=tuple(_parse_timestamp(ts) for ts in _require(record, "completions", list)),
    )


def encode_tasks(tasks: Iterable[Task]) -> str:
    return json.dumps([task_to_record(t) for t in tasks], ensure_ascii=False, indent=2)


def decode_tasks(raw: str) -> list[Task]:
    data = json.loads(raw)
    if not isinstance(data, list):
        raise TaskDocumentError("task document is not a JSON array")
    return [record_to_task(r) for r in data]


class TaskPersistence:
    """
    Whole-collection JSON document at a fixed path.

    - save() overwrites the document atomically (temp file + os.replace);
      failures are logged, never raised.
    - load() never raises: a missing, unreadable or malformed document
      yields the seed collection. The seed is not written back here.
    """

    def __init__(
        self,
        path: str | Path,
        *,
        seed_factory: Callable[[], list[Task]] = seed_tasks,
    ) -> None:
        self._path = Path(path)
        self._seed_factory = seed_factory

    @property
    def path(self) -> Path:
        return self._path

    def save(self, tasks: Iterable[Task]) -> bool:
        """Write the full collection. Returns False if the write failed."""
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            payload = encode_tasks(tasks)
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self._path)
        except Exception:
            logger.exception("Failed to save tasks to %s", self._path)
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            return False
        logger.debug("Saved tasks to %s", self._path)
        return True

    def load(self) -> list[Task]:
        if not self._path.exists():
            logger.info("No task document at %s; using demo tasks", self._path)
            return self._seed_factory()

        try:
            tasks = decode_tasks(self._path.read_text("utf-8"))
        except Exception:
            logger.warning("Failed to load tasks from %s; using demo tasks", self._path, exc_info=True)
            return self._seed_factory()

        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks
