# src/exposure_track/tasks/task_form.py

"""
Form-level rules for creating and editing tasks.

The store accepts any values; these checks belong to whoever collects
input from the user.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .task_models import Task, TaskCategory

MIN_ANXIETY_LEVEL = 1
MAX_ANXIETY_LEVEL = 5


@dataclass(slots=True)
class TaskDraft:
    title: str = ""
    category: TaskCategory = TaskCategory.CONTAMINATION
    trigger: str = ""
    goal: str = ""
    instructions: list[str] = field(default_factory=lambda: [""])
    duration: int = 10
    anxiety_level: int = 3

    @classmethod
    def from_task(cls, task: Task) -> TaskDraft:
        return cls(
            title=task.title,
            category=task.category,
            trigger=task.trigger,
            goal=task.goal,
            instructions=list(task.instructions),
            duration=task.duration,
            anxiety_level=task.anxiety_level,
        )

    def cleaned_instructions(self) -> tuple[str, ...]:
        """Stripped steps with blank entries dropped."""
        return tuple(s for s in (step.strip() for step in self.instructions) if s)

    def errors(self) -> list[str]:
        out: list[str] = []
        if not self.title.strip():
            out.append("title is required")
        if not self.trigger.strip():
            out.append("trigger is required")
        if not self.goal.strip():
            out.append("goal is required")
        if not self.cleaned_instructions():
            out.append("at least one instruction is required")
        if self.duration <= 0:
            out.append("duration must be a positive number of minutes")
        if not MIN_ANXIETY_LEVEL <= self.anxiety_level <= MAX_ANXIETY_LEVEL:
            out.append(f"anxiety level must be between {MIN_ANXIETY_LEVEL} and {MAX_ANXIETY_LEVEL}")
        return out

    @property
    def is_valid(self) -> bool:
        return not self.errors()

    def to_task(self) -> Task:
        """New available task built from the draft."""
        self._check()
        return Task.create(
            title=self.title,
            category=self.category,
            trigger=self.trigger,
            goal=self.goal,
            instructions=self.cleaned_instructions(),
            duration=self.duration,
            anxiety_level=self.anxiety_level,
        )

    def apply_to(self, task: Task) -> Task:
        """Edited copy of `task`; id, status and completions are kept."""
        self._check()
        return task.updated(
            title=self.title,
            category=self.category,
            trigger=self.trigger,
            goal=self.goal,
            instructions=self.cleaned_instructions(),
            duration=self.duration,
            anxiety_level=self.anxiety_level,
        )

    def _check(self) -> None:
        errors = self.errors()
        if errors:
            raise ValueError("; ".join(errors))
