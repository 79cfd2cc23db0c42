# src/task_tracker/cli/formatting.py

from __future__ import annotations

from collections.abc import Iterable

from ..tasks.task_models import Task
from ..tasks.task_store import TaskStatistics


def format_task(task: Task) -> str:
    return (
        f"ID: {task.id} | {task.title} | Priority: {task.priority} | Status: {task.status}\n"
        f"Description: {task.description}\n"
        f"Tags: [{', '.join(task.tags)}]\n"
    )


def format_task_list(heading: str, tasks: Iterable[Task]) -> str:
    lines = [f"=== {heading} ==="]
    for task in tasks:
        lines.append(format_task(task))
        lines.append("---")
    return "\n".join(lines)


def format_statistics(stats: TaskStatistics) -> str:
    lines = [
        "=== Task Statistics ===",
        f"Total tasks: {stats.total}",
        f"Completed: {stats.completed}",
        f"In progress: {stats.in_progress}",
        f"Pending: {stats.pending}",
    ]
    rate = stats.completion_rate
    if rate is not None:
        lines.append(f"Completion rate: {rate:.1f}%")
    return "\n".join(lines)
