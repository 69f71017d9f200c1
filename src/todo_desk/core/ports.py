# src/todo_desk/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the command layer.

Handlers depend on Protocols instead of concrete stores, so the SQLite
and in-memory bindings are interchangeable and tests can plug in fakes.
"""

from typing import Callable, Protocol

from ..tasks.task_models import Task

Confirm = Callable[[str], bool]
# Yes/no prompt supplied by the connector: returns True when the user agrees.


class TaskRepo(Protocol):
    """Persistent task collection: create, list (newest first), complete, delete."""

    def create(self, description: str) -> Task: ...
    def list(self) -> list[Task]: ...
    def complete(self, task_id: int) -> None: ...
    def delete(self, task_id: int) -> None: ...

    def count_tasks(self) -> int: ...
    def close(self) -> None: ...
