# src/exposure_track/core/state.py

"""
Composition root.

- loads settings once (unless injected),
- ensures local (gitignored) directories exist,
- wires the JSON document into the task store,
- installs log handlers from settings (configure_logging).

Views hold an AppState and route every mutation through state.task_store.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ..config import get_settings
from ..logging_setup import setup_logging
from ..session.task_session import TaskSession
from ..tasks.task_models import Task
from ..tasks.task_persistence import TaskPersistence
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    settings: object
    task_store: TaskStore

    def begin_session(self, task: Task, **kwargs) -> TaskSession | None:
        """Start a timed session for `task` using the configured tick cadence."""
        kwargs.setdefault("tick_seconds", getattr(self.settings, "tick_seconds", 1.0))
        return TaskSession.begin(self.task_store, task, **kwargs)


def configure_logging(settings) -> Path:
    """Install log handlers using settings.log_level for the console and settings.log_dir for the file."""
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    log_dir = getattr(settings, "log_dir", None) or getattr(settings, "data_dir", ".local/exposure")
    return setup_logging(log_dir=log_dir, console_level=console_level)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_app_state(*, settings=None) -> AppState:
    """
    Build AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore(
        TaskPersistence(settings.tasks_path),
        single_active_session=bool(getattr(settings, "single_active_session", False)),
    )
    logger.info("App state ready tasks_path=%s", settings.tasks_path)
    return AppState(settings=settings, task_store=store)
