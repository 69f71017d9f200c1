# src/todo_desk/tasks/task_api.py

from __future__ import annotations

import logging

from ..core.state import AppState
from .task_models import Task

logger = logging.getLogger(__name__)


def clean_description(raw: str | None) -> str | None:
    """Trimmed description, or None when nothing is left to store."""
    text = (raw or "").strip()
    return text or None


def parse_task_id(raw: str | None) -> int | None:
    if raw is None:
        return None
    s = raw.strip().lstrip("#")
    if not (s.isascii() and s.isdigit()):
        return None
    return int(s)


def refresh_tasks(state: AppState) -> list[Task]:
    """
    Re-read the full list and remember which ids are on screen.

    state.last_listed is only replaced after a successful read, so a failed
    refresh keeps the previous selection intact.
    """
    tasks = state.task_store.list()
    state.last_listed = [t.id for t in tasks]
    logger.debug("Listed %d tasks", len(tasks))
    return tasks


def is_listed(state: AppState, task_id: int) -> bool:
    return task_id in state.last_listed
