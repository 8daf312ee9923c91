# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from exposure_track.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "EXPOSURE_LOG_LEVEL",
        "EXPOSURE_DATA_DIR",
        "EXPOSURE_TASKS_PATH",
        "EXPOSURE_LOG_DIR",
        "EXPOSURE_TICK_SECONDS",
        "EXPOSURE_SINGLE_ACTIVE_SESSION",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()

    assert s.log_level == "INFO"
    assert s.data_dir == Path(".local/exposure")
    assert s.tasks_path == Path(".local/exposure") / "tasks.json"
    assert s.log_dir == s.data_dir
    assert s.tick_seconds == 1.0
    assert s.single_active_session is False


def test_overrides_and_bad_values(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("EXPOSURE_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("EXPOSURE_TASKS_PATH", raising=False)
    monkeypatch.setenv("EXPOSURE_LOG_LEVEL", "debug")
    monkeypatch.setenv("EXPOSURE_TICK_SECONDS", "fast")
    monkeypatch.setenv("EXPOSURE_SINGLE_ACTIVE_SESSION", "yes")

    s = Settings.from_env()

    assert s.tasks_path == tmp_path / "tasks.json"
    assert s.log_level == "DEBUG"
    assert s.tick_seconds == 1.0
    assert s.single_active_session is True
