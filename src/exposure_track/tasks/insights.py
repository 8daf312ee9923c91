# src/exposure_track/tasks/insights.py

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from .task_models import Task, TaskCategory


@dataclass(slots=True, frozen=True)
class Insights:
    current_streak: int
    most_common_category: TaskCategory | None
    total_completions: int
    completions_this_week: int


def _local_day(ts: datetime) -> date:
    return ts.astimezone().date()


def current_streak(tasks: Iterable[Task]) -> int:
    """
    Number of consecutive local calendar days with at least one completion,
    counted back from the most recent completion day (not from today).
    """
    days = {_local_day(ts) for t in tasks for ts in t.completions}
    if not days:
        return 0

    streak = 0
    cursor = max(days)
    while cursor in days:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def most_common_category(tasks: Iterable[Task]) -> TaskCategory | None:
    """Category with the most completions; ties go to the alphabetically first label."""
    counts: Counter[TaskCategory] = Counter()
    for t in tasks:
        counts[t.category] += len(t.completions)

    best = max(counts.values(), default=0)
    if best == 0:
        return None
    return min((c for c, n in counts.items() if n == best), key=lambda c: c.value)


def total_completions(tasks: Iterable[Task]) -> int:
    return sum(len(t.completions) for t in tasks)


def completions_this_week(tasks: Iterable[Task], now: datetime | None = None) -> int:
    """Completions within the last seven days (rolling window, not calendar week)."""
    if now is None:
        now = datetime.now().astimezone()
    week_start = now - timedelta(days=7)
    return sum(1 for t in tasks for ts in t.completions if ts >= week_start)


def summarize(tasks: Iterable[Task], now: datetime | None = None) -> Insights:
    items = list(tasks)
    return Insights(
        current_streak=current_streak(items),
        most_common_category=most_common_category(items),
        total_completions=total_completions(items),
        completions_this_week=completions_this_week(items, now),
    )
