# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from exposure_track.tasks.task_store import TaskStore

from .fakes import FakeWallClock, MemoryDocument


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with create_app_state.

    We intentionally use a SimpleNamespace rather than reading the real
    environment, to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        log_level="DEBUG",
        log_dir=tmp_path / "logs",
        data_dir=tmp_path / "data",
        tasks_path=tmp_path / "data" / "tasks.json",
        tick_seconds=0.01,
        single_active_session=False,
    )


@pytest.fixture()
def document() -> MemoryDocument:
    return MemoryDocument()


@pytest.fixture()
def wall_clock() -> FakeWallClock:
    return FakeWallClock()


@pytest.fixture()
def store(document: MemoryDocument, wall_clock: FakeWallClock) -> TaskStore:
    """Empty store backed by an in-memory document."""
    return TaskStore(document, now=wall_clock)
