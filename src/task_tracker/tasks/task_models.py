# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from .errors import InvalidInput


class Priority(StrEnum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"

    @classmethod
    def parse(cls, raw: str) -> Priority:
        """
        Parse a user token (case-insensitive).

        Accepts full names and single-letter synonyms: l/m/h/c.
        """
        token = (raw or "").strip().lower()
        for p in cls:
            if token in (p.value.lower(), p.value[0].lower()):
                return p
        raise InvalidInput()


class TaskStatus(StrEnum):
    """Workflow stage. Any status may follow any other."""

    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"

    @classmethod
    def parse(cls, raw: str) -> TaskStatus:
        # Command tokens are exact and case-sensitive.
        try:
            return _STATUS_TOKENS[raw]
        except KeyError:
            raise InvalidInput() from None


_STATUS_TOKENS: dict[str, TaskStatus] = {
    "pending": TaskStatus.PENDING,
    "progress": TaskStatus.IN_PROGRESS,
    "completed": TaskStatus.COMPLETED,
}


@dataclass(slots=True)
class Task:
    id: int
    title: str
    description: str
    priority: Priority
    status: TaskStatus = TaskStatus.PENDING
    tags: list[str] = field(default_factory=list)

    def add_tag(self, tag: str) -> bool:
        """Append `tag` unless already present. Returns True if it was added."""
        if tag in self.tags:
            return False
        self.tags.append(tag)
        return True

    def update_status(self, status: TaskStatus) -> None:
        self.status = status

    def matches_filter(self, keyword: str) -> bool:
        needle = keyword.lower()
        return (
            needle in self.title.lower()
            or needle in self.description.lower()
            or any(needle in tag.lower() for tag in self.tags)
        )
