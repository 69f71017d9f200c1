# src/todo_desk/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- opens the configured task store and wires it into AppState.

Opening the store may raise StorageError; the caller decides whether that is fatal.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import TaskRepo
from ..core.state import AppState
from ..tasks.memory_store import InMemoryTaskStore
from ..tasks.task_store import TaskStore
from .render import color_enabled

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    if settings.storage == "sqlite":
        settings.db_path.parent.mkdir(parents=True, exist_ok=True)


def open_task_store(settings) -> TaskRepo:
    if settings.storage == "memory":
        logger.info("Using in-memory task store; nothing will be saved.")
        return InMemoryTaskStore()
    return TaskStore(settings.db_path)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    return AppState(
        settings=settings,
        task_store=open_task_store(settings),
        color=color_enabled(settings.color),
        confirm_delete=settings.confirm_delete,
    )
