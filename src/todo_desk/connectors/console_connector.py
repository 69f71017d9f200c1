# src/todo_desk/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

EXIT_COMMANDS = ("/exit", "/quit")


def make_confirm(read: InputFn, write: OutputFn) -> Callable[[str], bool]:
    """Yes/no prompt on the console. Anything but y/yes counts as no."""

    def confirm(question: str) -> bool:
        try:
            answer = read(f"{question} [y/N]: ")
        except (EOFError, KeyboardInterrupt):
            write("")
            return False
        return answer.strip().lower() in ("y", "yes")

    return confirm


def run_console_loop(
    state: AppState,
    *,
    read: InputFn = input,
    write: OutputFn = print,
) -> None:
    logger.info("Console connector started.")
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "todo-desk"))
    confirm = make_confirm(read, write)

    write(f"{app_name}: type a task to add it. Use /help for commands, /exit to quit.\n")

    # Initial render, same as after every change.
    write(command_registry.handle(state, "/list") or "")

    while True:
        try:
            user_input = read(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not user_input:
            continue

        if user_input.lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        line = user_input if user_input.startswith("/") else f"/add {user_input}"

        try:
            reply = command_registry.handle(state, line, confirm=confirm)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply:
            write(reply)

    logger.info("Console connector finished.")
