# src/todo_desk/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from .ports import TaskRepo


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    task_store: TaskRepo
    color: bool = False
    confirm_delete: bool = True

    # Ids shown by the last successful render; commands only accept these.
    last_listed: list[int] = field(default_factory=list)
