# src/task_tracker/tasks/errors.py

from __future__ import annotations


class TaskError(Exception):
    """Base error for task operations. `message` is safe to show to the user."""

    default_message = "Task error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class TaskNotFound(TaskError):
    default_message = "Task not found"

    def __init__(self, task_id: int | None = None) -> None:
        self.task_id = task_id
        super().__init__()


class DuplicateTask(TaskError):
    default_message = "Task with this title already exists"

    def __init__(self, title: str | None = None) -> None:
        self.title = title
        super().__init__()


class InvalidInput(TaskError):
    """Raised by the text parsers (priority/status tokens), never by the store."""

    default_message = "Invalid input provided"
