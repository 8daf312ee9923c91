# src/exposure_track/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The store and session code depend on Protocols instead of concrete
implementations, so tests can swap in fakes for disk and time.
"""

from collections.abc import Callable, Iterable
from typing import Any, Protocol

Clock = Callable[[], float]
# Monotonic seconds, e.g. time.monotonic.

TaskObserver = Callable[[Any], None]
# Called with the store after each mutation has been applied and persisted.


class TaskDocument(Protocol):
    """Whole-collection storage used by the task store."""

    def load(self) -> list[Any]: ...

    def save(self, tasks: Iterable[Any]) -> bool: ...
