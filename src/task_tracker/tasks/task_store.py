# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import logging
from dataclasses import dataclass

from .errors import DuplicateTask, TaskNotFound
from .task_models import Priority, Task, TaskStatus

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class TaskStatistics:
    total: int
    completed: int
    in_progress: int
    pending: int

    @property
    def completion_rate(self) -> float | None:
        """Completed share in percent, or None for an empty store."""
        if self.total == 0:
            return None
        return self.completed / self.total * 100.0


class TaskStore:
    """
    In-memory task store.

    Ids come from a monotonic counter and are never reused, even after delete.
    Tasks live in a dict keyed by id; since ids only grow, iteration order is
    ascending id order, and every query below returns tasks in that order.

    Not thread-safe: the app drives it from a single control thread.
    """

    def __init__(self) -> None:
        self._tasks: dict[int, Task] = {}
        self._next_id = 1
        logger.debug("TaskStore ready (in-memory)")

    # ---- low-level helpers ----

    def _require(self, task_id: int) -> Task:
        task = self._tasks.get(task_id)
        if task is None:
            raise TaskNotFound(task_id)
        return task

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    def add_task(self, title: str, description: str, priority: Priority) -> int:
        if any(t.title == title for t in self._tasks.values()):
            raise DuplicateTask(title)

        task_id = self._next_id
        self._tasks[task_id] = Task(
            id=task_id,
            title=title,
            description=description,
            priority=priority,
        )
        self._next_id += 1
        logger.debug("Task added id=%s priority=%s", task_id, priority.value)
        return task_id

    def get_task(self, task_id: int) -> Task:
        return self._require(task_id)

    def update_task_status(self, task_id: int, new_status: TaskStatus) -> None:
        self._require(task_id).update_status(new_status)
        logger.debug("Task status id=%s status=%s", task_id, new_status.value)

    def add_tag(self, task_id: int, tag: str) -> None:
        added = self._require(task_id).add_tag(tag)
        logger.debug("Task tag id=%s tag=%r added=%s", task_id, tag, added)

    def delete_task(self, task_id: int) -> None:
        if self._tasks.pop(task_id, None) is None:
            raise TaskNotFound(task_id)
        logger.debug("Task deleted id=%s", task_id)

    def list_tasks(self) -> list[Task]:
        return sorted(self._tasks.values(), key=lambda t: t.id)

    def filter_tasks(self, keyword: str) -> list[Task]:
        """Tasks whose title, description or any tag contains `keyword` (case-insensitive)."""
        return [t for t in self._tasks.values() if t.matches_filter(keyword)]

    def tasks_by_priority(self, priority: Priority) -> list[Task]:
        return [t for t in self._tasks.values() if t.priority == priority]

    def tasks_by_status(self, status: TaskStatus) -> list[Task]:
        return [t for t in self._tasks.values() if t.status == status]

    def get_statistics(self) -> TaskStatistics:
        counts = {s: 0 for s in TaskStatus}
        for t in self._tasks.values():
            counts[t.status] += 1
        return TaskStatistics(
            total=len(self._tasks),
            completed=counts[TaskStatus.COMPLETED],
            in_progress=counts[TaskStatus.IN_PROGRESS],
            pending=counts[TaskStatus.PENDING],
        )
