# tests/test_task_form.py

from __future__ import annotations

from datetime import datetime

import pytest

from exposure_track.tasks.task_form import TaskDraft
from exposure_track.tasks.task_models import TaskCategory, TaskStatus

from .fakes import make_task


def _valid_draft() -> TaskDraft:
    return TaskDraft(
        title="Leave the stove unchecked",
        category=TaskCategory.CHECKING,
        trigger="Fear of fire",
        goal="Leave without checking",
        instructions=["  Turn it off once ", "", "   ", "Walk out"],
        duration=15,
        anxiety_level=4,
    )


def test_valid_draft_builds_available_task() -> None:
    draft = _valid_draft()
    assert draft.is_valid

    task = draft.to_task()

    assert task.status == TaskStatus.AVAILABLE
    assert task.completions == ()
    assert task.instructions == ("Turn it off once", "Walk out")
    assert task.category == TaskCategory.CHECKING


def test_each_new_task_gets_a_fresh_id() -> None:
    draft = _valid_draft()
    assert draft.to_task().id != draft.to_task().id


@pytest.mark.parametrize(
    "field_name, value, message",
    [
        ("title", "   ", "title is required"),
        ("trigger", "", "trigger is required"),
        ("goal", "", "goal is required"),
        ("instructions", ["", "  "], "at least one instruction is required"),
        ("duration", 0, "duration must be a positive number of minutes"),
        ("anxiety_level", 6, "anxiety level must be between 1 and 5"),
    ],
)
def test_invalid_drafts_report_errors(field_name: str, value, message: str) -> None:
    draft = _valid_draft()
    setattr(draft, field_name, value)

    assert not draft.is_valid
    assert message in draft.errors()
    with pytest.raises(ValueError):
        draft.to_task()


def test_edit_keeps_identity_status_and_history() -> None:
    original = make_task(status=TaskStatus.ARCHIVED)
    original = original.updated(completions=(datetime(2024, 1, 1).astimezone(),))
    draft = TaskDraft.from_task(original)
    assert draft.is_valid

    draft.title = "Renamed"
    draft.instructions.append("  extra step ")
    edited = draft.apply_to(original)

    assert edited.id == original.id
    assert edited.status == TaskStatus.ARCHIVED
    assert edited.completions == original.completions
    assert edited.title == "Renamed"
    assert edited.instructions == ("Touch it", "Wait", "extra step")


def test_updated_cannot_change_id() -> None:
    task = make_task()
    with pytest.raises(TypeError):
        task.updated(id=make_task().id)
