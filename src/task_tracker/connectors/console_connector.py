# src/task_tracker/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("quit", "exit")


def run_console_loop(
    state: AppState,
    *,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """
    Read one command per line, dispatch it, print the reply.

    Each command runs to completion before the next line is read.
    Ends on quit/exit, EOF or Ctrl+C.
    """
    settings = getattr(state, "settings", None)
    app_name = str(getattr(settings, "app_name", "Personal Task Manager"))
    prompt = str(getattr(settings, "prompt", "> "))

    logger.info("Console connector started.")
    write(f"=== {app_name} ===")
    write("Welcome! Type 'help' for available commands.\n")

    def ask(text: str) -> str:
        return read_line(text).strip()

    while True:
        try:
            user_input = read_line(prompt).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not user_input:
            continue

        if user_input in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            write("Goodbye!")
            break

        try:
            reply = command_registry.handle(state, user_input, ask=ask, emit=write)
        except (EOFError, KeyboardInterrupt):
            # Input closed in the middle of an interactive prompt.
            logger.info("Console input closed during a command, exiting.")
            break
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is not None:
            write(reply)

    logger.info("Console connector finished.")
