# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.ports import Emitter, Prompt
from ..core.state import AppState
from ..tasks.errors import TaskError
from ..tasks.task_models import Priority, TaskStatus
from .formatting import format_statistics, format_task, format_task_list

CommandHandler = Callable[[AppState, list[str], Prompt | None, Emitter | None], str]

logger = logging.getLogger(__name__)

UNKNOWN_COMMAND = "Unknown command. Type 'help' for available commands."
INVALID_ID = "Invalid task ID. Please provide a number."
STATUS_OPTIONS = "Status options: pending, progress, completed"
INVALID_STATUS = "Invalid status. Use: pending, progress, or completed"
INVALID_PRIORITY = "Invalid priority. Use: low, medium, high, or critical"


class CommandRegistry:
    """Whitespace-tokenized command registry used by the console connector."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, tuple[str, str]] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        usage: str | None = None,
        aliases: list[str] | None = None,
    ) -> None:
        # Names are case-sensitive: "List" is not "list".
        self._handlers[name] = handler
        self._help[name] = (usage or name, help_text)
        for alias in aliases or []:
            self._handlers[alias] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        ask: Prompt | None = None,
        emit: Emitter | None = None,
    ) -> str | None:
        """
        Handle a line like "update 3 completed".
        Returns the reply text, or None for a blank line.
        """
        parts = line.split()
        if not parts:
            return None

        name, args = parts[0], parts[1:]
        handler = self._handlers.get(name)
        if handler is None:
            logger.debug("Unknown command %r", name)
            return UNKNOWN_COMMAND

        return handler(state, args, ask, emit)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for usage, help_text in self._help.values():
            lines.append(f"  {usage:<22} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(raw: str) -> int | None:
    if raw.isascii() and raw.isdigit():
        return int(raw)
    return None


def cmd_help(
    state: AppState,
    args: list[str],
    ask: Prompt | None,
    emit: Emitter | None = None,
) -> str:
    return registry.build_help() + f"\n  {'quit/exit':<22} - Exit the application"


def cmd_add(
    state: AppState,
    args: list[str],
    ask: Prompt | None,
    emit: Emitter | None = None,
) -> str:
    """
    Interactive add: prompts for title, description and priority.

    An unparseable priority falls back to Medium with a warning; it never fails the add.
    """
    if ask is None:
        return "The add command needs an interactive console."

    out = print if emit is None else emit
    out("=== Add New Task ===")
    title = ask("Enter task title: ")
    description = ask("Enter task description: ")
    out("Select priority (low/medium/high/critical): ")
    raw_priority = ask("Priority: ")

    try:
        priority = Priority.parse(raw_priority)
    except TaskError:
        out("Invalid priority. Using 'Medium' as default.")
        priority = Priority.MEDIUM

    try:
        task_id = state.task_store.add_task(title, description, priority)
    except TaskError as e:
        return f"Error adding task: {e.message}"
    return f"Task added successfully with ID: {task_id}"


def cmd_list(
    state: AppState,
    args: list[str],
    ask: Prompt | None,
    emit: Emitter | None = None,
) -> str:
    tasks = state.task_store.list_tasks()
    if not tasks:
        return "No tasks found."
    return format_task_list("All Tasks", tasks)


def cmd_show(
    state: AppState,
    args: list[str],
    ask: Prompt | None,
    emit: Emitter | None = None,
) -> str:
    if not args:
        return "Usage: show <task_id>"
    task_id = _parse_id(args[0])
    if task_id is None:
        return INVALID_ID

    try:
        task = state.task_store.get_task(task_id)
    except TaskError as e:
        return f"Error: {e.message}"
    return "=== Task Details ===\n" + format_task(task)


def cmd_update(
    state: AppState,
    args: list[str],
    ask: Prompt | None,
    emit: Emitter | None = None,
) -> str:
    if len(args) < 2:
        return f"Usage: update <task_id> <status>\n{STATUS_OPTIONS}"
    task_id = _parse_id(args[0])
    if task_id is None:
        return INVALID_ID
    try:
        status = TaskStatus.parse(args[1])
    except TaskError:
        return INVALID_STATUS

    try:
        state.task_store.update_task_status(task_id, status)
    except TaskError as e:
        return f"Error: {e.message}"
    return "Task status updated successfully."


def cmd_tag(
    state: AppState,
    args: list[str],
    ask: Prompt | None,
    emit: Emitter | None = None,
) -> str:
    if len(args) < 2:
        return "Usage: tag <task_id> <tag>"
    task_id = _parse_id(args[0])
    if task_id is None:
        return INVALID_ID

    tag = " ".join(args[1:])
    try:
        state.task_store.add_tag(task_id, tag)
    except TaskError as e:
        return f"Error: {e.message}"
    return "Tag added successfully."


def cmd_delete(
    state: AppState,
    args: list[str],
    ask: Prompt | None,
    emit: Emitter | None = None,
) -> str:
    if not args:
        return "Usage: delete <task_id>"
    task_id = _parse_id(args[0])
    if task_id is None:
        return INVALID_ID

    try:
        state.task_store.delete_task(task_id)
    except TaskError as e:
        return f"Error: {e.message}"
    return "Task deleted successfully."


def cmd_filter(
    state: AppState,
    args: list[str],
    ask: Prompt | None,
    emit: Emitter | None = None,
) -> str:
    if not args:
        return "Usage: filter <keyword>"

    keyword = " ".join(args)
    tasks = state.task_store.filter_tasks(keyword)
    if not tasks:
        return f"No tasks found matching '{keyword}'."
    return format_task_list("Filtered Tasks", tasks)


def cmd_priority(
    state: AppState,
    args: list[str],
    ask: Prompt | None,
    emit: Emitter | None = None,
) -> str:
    """
    priority <level>  -> tasks with exactly that priority

    Unlike interactive add, an unknown level is rejected here.
    """
    if not args:
        return "Usage: priority <level>\nLevels: low, medium, high, critical"
    try:
        priority = Priority.parse(args[0])
    except TaskError:
        return INVALID_PRIORITY

    tasks = state.task_store.tasks_by_priority(priority)
    if not tasks:
        return f"No tasks found with {args[0]} priority."
    return format_task_list(f"{args[0].upper()} Priority Tasks", tasks)


def cmd_status(
    state: AppState,
    args: list[str],
    ask: Prompt | None,
    emit: Emitter | None = None,
) -> str:
    if not args:
        return f"Usage: status <status>\n{STATUS_OPTIONS}"
    try:
        status = TaskStatus.parse(args[0])
    except TaskError:
        return INVALID_STATUS

    tasks = state.task_store.tasks_by_status(status)
    if not tasks:
        return f"No tasks found with {args[0]} status."
    return format_task_list(f"{args[0].upper()} Tasks", tasks)


def cmd_stats(
    state: AppState,
    args: list[str],
    ask: Prompt | None,
    emit: Emitter | None = None,
) -> str:
    return format_statistics(state.task_store.get_statistics())


registry.register("add", cmd_add, help_text="Add a new task (interactive)")
registry.register("list", cmd_list, help_text="List all tasks")
registry.register("show", cmd_show, help_text="Show details of a specific task", usage="show <id>")
registry.register(
    "update",
    cmd_update,
    help_text="Update task status (pending/progress/completed)",
    usage="update <id> <status>",
)
registry.register("tag", cmd_tag, help_text="Add a tag to a task", usage="tag <id> <tag>")
registry.register("delete", cmd_delete, help_text="Delete a task", usage="delete <id>")
registry.register("filter", cmd_filter, help_text="Filter tasks by keyword", usage="filter <keyword>")
registry.register(
    "priority",
    cmd_priority,
    help_text="Filter tasks by priority (low/medium/high/critical)",
    usage="priority <level>",
)
registry.register(
    "status",
    cmd_status,
    help_text="Filter tasks by status (pending/progress/completed)",
    usage="status <status>",
)
registry.register("stats", cmd_stats, help_text="Show task statistics")
registry.register("help", cmd_help, help_text="Show this help message")
