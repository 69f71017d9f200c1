# src/todo_desk/cli/main.py

"""
CLI entrypoint.

Initializes logging, opens the task store, then runs the console REPL
until /exit or EOF. A store that cannot be opened ends the process.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..tasks.task_models import StorageError

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.WARNING)
    if not isinstance(console_level, int):
        console_level = logging.WARNING
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
    except (StorageError, OSError) as e:
        logger.error("Failed to connect to DB: %s", e)
        print(f"Failed to connect to DB: {e}", file=sys.stderr)
        raise SystemExit(1) from e

    try:
        run_console_loop(state)
    finally:
        state.task_store.close()
        logger.info("Bye.")


if __name__ == "__main__":
    main()
