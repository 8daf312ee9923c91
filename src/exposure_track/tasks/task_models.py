# src/exposure_track/tasks/task_models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import StrEnum
from typing import Any


class TaskCategory(StrEnum):
    """Closed set of ERP exercise categories. Values are display labels."""

    CONTAMINATION = "Contamination"
    CHECKING = "Checking"
    SYMMETRY = "Symmetry"
    RUMINATIONS = "Ruminations"
    HOARDING = "Hoarding"


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    available -> ongoing (a timed session is running)
    ongoing   -> available (completed or cancelled)
    available <-> archived
    """

    AVAILABLE = "Available"
    ONGOING = "Ongoing"
    ARCHIVED = "Archived"


class TaskSortOrder(StrEnum):
    TITLE = "Title"
    CATEGORY = "Category"
    ANXIETY_LEVEL = "Anxiety Level"


@dataclass(slots=True, frozen=True)
class Task:
    """
    One ERP exercise plus its completion history.

    Values are immutable; edits go through updated(), which keeps the id.
    completions are most-recent-first.
    """

    title: str
    category: TaskCategory
    trigger: str
    goal: str
    instructions: tuple[str, ...]
    duration: int  # minutes
    anxiety_level: int  # 1..5, upheld by callers
    status: TaskStatus = TaskStatus.AVAILABLE
    completions: tuple[datetime, ...] = ()
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self) -> None:
        # Accept lists from callers but store tuples.
        object.__setattr__(self, "instructions", tuple(self.instructions))
        object.__setattr__(self, "completions", tuple(self.completions))

    @classmethod
    def create(
        cls,
        *,
        title: str,
        category: TaskCategory,
        trigger: str,
        goal: str,
        instructions: list[str] | tuple[str, ...],
        duration: int,
        anxiety_level: int,
    ) -> Task:
        """New available task with a fresh id and no completions."""
        return cls(
            title=title,
            category=category,
            trigger=trigger,
            goal=goal,
            instructions=tuple(instructions),
            duration=int(duration),
            anxiety_level=int(anxiety_level),
        )

    def updated(self, **overrides: Any) -> Task:
        """Copy with the given fields replaced. The id cannot be overridden."""
        if "id" in overrides:
            raise TypeError("Task id is immutable")
        return replace(self, **overrides)

    @property
    def last_completed(self) -> datetime | None:
        return self.completions[0] if self.completions else None
