# tests/test_task_models.py

from __future__ import annotations

import pytest

from task_tracker.tasks.errors import InvalidInput
from task_tracker.tasks.task_models import Priority, Task, TaskStatus


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("l", Priority.LOW),
        ("Low", Priority.LOW),
        ("M", Priority.MEDIUM),
        ("medium", Priority.MEDIUM),
        ("h", Priority.HIGH),
        (" HIGH ", Priority.HIGH),
        ("c", Priority.CRITICAL),
        ("critical", Priority.CRITICAL),
    ],
)
def test_priority_parse_accepts_names_and_letters(raw: str, expected: Priority) -> None:
    assert Priority.parse(raw) is expected


@pytest.mark.parametrize("raw", ["", "urgent", "lo", "x"])
def test_priority_parse_rejects_unknown(raw: str) -> None:
    with pytest.raises(InvalidInput) as exc:
        Priority.parse(raw)
    assert exc.value.message == "Invalid input provided"


def test_status_parse_is_exact() -> None:
    assert TaskStatus.parse("pending") is TaskStatus.PENDING
    assert TaskStatus.parse("progress") is TaskStatus.IN_PROGRESS
    assert TaskStatus.parse("completed") is TaskStatus.COMPLETED

    for raw in ("Pending", "in_progress", "done", ""):
        with pytest.raises(InvalidInput):
            TaskStatus.parse(raw)


def test_display_names() -> None:
    assert str(Priority.CRITICAL) == "Critical"
    assert str(TaskStatus.IN_PROGRESS) == "In Progress"


def test_new_task_defaults_and_tag_helper() -> None:
    task = Task(id=1, title="Test Task", description="Description", priority=Priority.HIGH)
    assert task.status == TaskStatus.PENDING
    assert task.tags == []

    assert task.add_tag("x") is True
    assert task.add_tag("x") is False
    assert task.tags == ["x"]

    assert task.matches_filter("TEST")
    assert task.matches_filter("X")
    assert not task.matches_filter("y")
