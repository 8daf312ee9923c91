# src/exposure_track/tasks/seed_data.py

"""
Demonstration tasks.

Returned by the persistence layer when there is no usable document on disk,
so a first run starts with non-empty content. Completion timestamps are
relative to "now" (N days ago at a fixed local wall-clock time).
"""

from __future__ import annotations

from datetime import datetime, timedelta

from .task_models import Task, TaskCategory, TaskStatus


def date_at(now: datetime, days_ago: int, hour: int, minute: int = 0) -> datetime:
    """Local-time datetime `days_ago` calendar days before `now`, at hour:minute."""
    local_now = now.astimezone()
    day = local_now - timedelta(days=days_ago)
    naive = datetime(day.year, day.month, day.day, hour, minute)
    return naive.astimezone()


def seed_tasks(now: datetime | None = None) -> list[Task]:
    if now is None:
        now = datetime.now().astimezone()

    def at(days_ago: int, hour: int, minute: int = 0) -> datetime:
        return date_at(now, days_ago, hour, minute)

    return [
        Task(
            title="Skip Sanitizing on Bus",
            category=TaskCategory.CONTAMINATION,
            trigger="Fear of germs from public surfaces.",
            goal="Avoid washing hands for a period of time.",
            instructions=(
                "Take a bus and hold onto a handrail.",
                "Sit with hands on lap without sanitizing.",
                "Wait 30 minutes before washing hands.",
            ),
            duration=30,
            anxiety_level=5,
            status=TaskStatus.AVAILABLE,
            completions=(at(1, 9, 30), at(3, 14, 15), at(7, 16, 45)),
        ),
        Task(
            title="Leave Without Checking Locks",
            category=TaskCategory.CHECKING,
            trigger="Fear of leaving doors unlocked.",
            goal="Lock once and leave without checking.",
            instructions=(
                "Lock the door once and leave immediately.",
                "Avoid looking back or double-checking.",
                "Distract yourself for 30 minutes.",
            ),
            duration=30,
            anxiety_level=4,
            status=TaskStatus.AVAILABLE,
            completions=(at(2, 11), at(4, 15, 30), at(6, 18)),
        ),
        Task(
            title="Leave Items Unaligned",
            category=TaskCategory.SYMMETRY,
            trigger="Discomfort when things aren't 'just right'.",
            goal="Resist fixing misaligned objects.",
            instructions=(
                "Place objects slightly off-center.",
                "Resist the urge to straighten them.",
                "Sit with the discomfort for 30 minutes.",
            ),
            duration=30,
            anxiety_level=3,
            status=TaskStatus.AVAILABLE,
            completions=(at(1, 20), at(3, 19, 45), at(7, 21, 15)),
        ),
        Task(
            title="Throw Away One Item",
            category=TaskCategory.HOARDING,
            trigger="Fear of discarding something useful.",
            goal="Discard one item without retrieving it.",
            instructions=(
                "Pick one unused or broken item.",
                "Throw it away in a trash can.",
                "Sit and resist retrieving it for 10 minutes.",
            ),
            duration=10,
            anxiety_level=2,
            status=TaskStatus.AVAILABLE,
            completions=(at(20, 10, 30), at(40, 11, 15), at(60, 9, 45)),
        ),
        Task(
            title="Wear Mismatched Socks at Home",
            category=TaskCategory.SYMMETRY,
            trigger="Fear of imbalance or bad luck.",
            goal="Wear mismatched socks and resist fixing.",
            instructions=(
                "Pick different socks and put them on.",
                "Do regular activities at home.",
                "Resist checking or changing socks for 1 hour.",
            ),
            duration=60,
            anxiety_level=5,
            status=TaskStatus.AVAILABLE,
            completions=(at(3, 8, 30), at(10, 7, 45), at(17, 8, 15)),
        ),
        Task(
            title="Delay Analyzing Conversations",
            category=TaskCategory.RUMINATIONS,
            trigger="Urge to replay a past conversation for mistakes.",
            goal="Postpone overthinking for a period of time.",
            instructions=(
                "Set a 10-minute timer when the urge starts.",
                "Do a distraction (e.g. read a book).",
                "If the thought returns, say: 'Not now, later.'",
            ),
            duration=10,
            anxiety_level=2,
            status=TaskStatus.AVAILABLE,
            completions=(at(2, 22, 30), at(5, 23, 15)),
        ),
        Task(
            title="Touch a Public Door Handle",
            category=TaskCategory.CONTAMINATION,
            trigger="Fear of germs on shared surfaces.",
            goal="Avoid washing hands for a period of time.",
            instructions=(
                "Grasp a public door handle.",
                "Resist using sanitizer or washing hands.",
                "Engage in another activity for 20 minutes.",
            ),
            duration=20,
            anxiety_level=4,
            status=TaskStatus.ARCHIVED,
            completions=(at(14, 13, 30), at(16, 14, 45), at(18, 15, 15)),
        ),
        Task(
            title="Leave It Unfinished",
            category=TaskCategory.CHECKING,
            trigger="Fear of not completing something perfectly.",
            goal="Stop an activity before completing it and walk away.",
            instructions=(
                "Choose a task (e.g., cleaning your room).",
                "Stop when you're 90% finished.",
                "Resist the urge to go back and 'fix' it.",
                "Engage in another activity for 15 minutes.",
            ),
            duration=15,
            anxiety_level=5,
            status=TaskStatus.ARCHIVED,
            completions=(at(15, 16, 30), at(17, 17, 45), at(19, 16, 15)),
        ),
    ]
