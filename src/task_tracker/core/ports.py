# src/task_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the shell.

Command handlers depend on the TaskRepo Protocol rather than TaskStore itself,
so tests can swap in fakes.
"""

from collections.abc import Callable
from typing import Any, Protocol

Prompt = Callable[[str], str]
# Reads one line of user input after printing the given prompt.

Emitter = Callable[[str], None]
# Prints intermediate output while a command is still running.


class TaskRepo(Protocol):
    def count_tasks(self) -> int: ...

    def add_task(self, title: str, description: str, priority: Any) -> int: ...
    def get_task(self, task_id: int) -> Any: ...
    def update_task_status(self, task_id: int, new_status: Any) -> None: ...
    def add_tag(self, task_id: int, tag: str) -> None: ...
    def delete_task(self, task_id: int) -> None: ...

    def list_tasks(self) -> list[Any]: ...
    def filter_tasks(self, keyword: str) -> list[Any]: ...
    def tasks_by_priority(self, priority: Any) -> list[Any]: ...
    def tasks_by_status(self, status: Any) -> list[Any]: ...
    def get_statistics(self) -> Any: ...
