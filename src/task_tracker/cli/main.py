# src/task_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    log_dir = settings.log_dir if settings.log_file_enabled else None
    setup_logging(console_level=console_level, log_dir=log_dir)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)
    try:
        run_console_loop(state)
    finally:
        # Nothing to persist: tasks live only for the process lifetime.
        logger.info("Bye. tasks_in_memory=%s", state.task_store.count_tasks())


if __name__ == "__main__":
    main()
