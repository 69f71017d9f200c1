# src/todo_desk/cli/commands.py

from __future__ import annotations

import inspect
import logging
import re
from collections.abc import Callable
from typing import cast

from ..core.ports import Confirm
from ..core.state import AppState
from ..tasks.task_api import clean_description, is_listed, parse_task_id, refresh_tasks
from ..tasks.task_models import StorageError
from .render import render_tasks

CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], Confirm | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Slash-command registry used by the console connector (/add, /list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._raw: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        *,
        raw_args: bool = False,
    ) -> None:
        """
        raw_args=True hands the handler the untouched remainder of the line
        as a single argument instead of whitespace-split words.
        """
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in [key, *(a.lower() for a in aliases)]:
            self._handlers[alias] = handler
            if raw_args:
                self._raw.add(alias)

    def handle(
        self,
        state: AppState,
        line: str,
        confirm: Confirm | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = re.split(r"\s+", line[1:].strip(), maxsplit=1)
        name = parts[0].lower()
        rest = parts[1] if len(parts) > 1 else ""
        if not name:
            return "Empty command. Use /help to list available commands."

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        args = [rest] if name in self._raw else rest.split()

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, confirm)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        lines.append("Text without a leading slash is added as a new task.")
        return "\n".join(lines)


registry = CommandRegistry()


def _listing(state: AppState) -> str:
    try:
        tasks = refresh_tasks(state)
    except StorageError as e:
        logger.warning("Loading tasks failed: %s", e)
        return f"Error loading tasks: {e}"
    return render_tasks(tasks, color=state.color)


def _selected_id(state: AppState, args: list[str], missing: str) -> tuple[int | None, str | None]:
    """Validate the id argument against the last rendered list."""
    if not args:
        return None, missing
    task_id = parse_task_id(args[0])
    if task_id is None:
        return None, "Task id must be a number."
    if not is_listed(state, task_id):
        return None, f"No task with id {task_id} in the list. Use /list to refresh."
    return task_id, None


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return _listing(state)


def cmd_add(state: AppState, args: list[str]) -> str:
    text = clean_description(args[0] if args else None)
    if text is None:
        return "Please enter a task."

    try:
        task = state.task_store.create(text)
    except StorageError as e:
        logger.warning("Adding task failed: %s", e)
        return f"Error adding task: {e}"

    logger.info("Task added id=%s", task.id)
    return _listing(state)


def cmd_done(state: AppState, args: list[str]) -> str:
    task_id, problem = _selected_id(state, args, "Select a task to mark as complete.")
    if task_id is None:
        return problem or ""

    try:
        state.task_store.complete(task_id)
    except StorageError as e:
        logger.warning("Completing task %s failed: %s", task_id, e)
        return f"Error updating task: {e}"

    logger.info("Task completed id=%s", task_id)
    return _listing(state)


def cmd_delete(state: AppState, args: list[str], confirm: Confirm | None = None) -> str:
    """
    /delete <id>  -> asks "Delete this task?" and removes the task on yes.

    Without a confirm callback the delete is refused, unless confirmation
    was switched off in settings.
    """
    task_id, problem = _selected_id(state, args, "Select a task to delete.")
    if task_id is None:
        return problem or ""

    if state.confirm_delete and (confirm is None or not confirm("Delete this task?")):
        return "Delete cancelled."

    try:
        state.task_store.delete(task_id)
    except StorageError as e:
        logger.warning("Deleting task %s failed: %s", task_id, e)
        return f"Error deleting task: {e}"

    logger.info("Task deleted id=%s", task_id)
    return _listing(state)


def cmd_status(state: AppState, args: list[str]) -> str:
    settings = state.settings
    storage = str(getattr(settings, "storage", "sqlite"))
    where = getattr(settings, "db_path", None) if storage == "sqlite" else "(in memory)"
    try:
        total: object = state.task_store.count_tasks()
    except StorageError as e:
        total = f"unavailable ({e})"
    return (
        "Status:\n"
        f"  Storage: {storage}\n"
        f"  Database: {where}\n"
        f"  Tasks: {total}\n"
        f"  Confirm delete: {'ON' if state.confirm_delete else 'OFF'}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show all tasks, newest first.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <text>.", raw_args=True)
registry.register(
    "done", cmd_done, help_text="Mark a task as complete: /done <id>.", aliases=["complete"]
)
registry.register(
    "delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["del", "rm"]
)
registry.register("status", cmd_status, help_text="Show storage settings and task count.")
