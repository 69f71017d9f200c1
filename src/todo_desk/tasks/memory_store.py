# src/todo_desk/tasks/memory_store.py

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import replace
from types import TracebackType

from .task_models import StorageError, Task, TaskStatus

logger = logging.getLogger(__name__)


class InMemoryTaskStore:
    """
    Dict-backed task store with the same contract as TaskStore.

    Nothing is persisted; ids come from a counter that only moves forward,
    so deleted ids are never handed out again.
    """

    def __init__(self, *, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._tasks: dict[int, Task] = {}
        self._next_id = 1
        self._closed = False
        logger.info("InMemoryTaskStore ready")

    def close(self) -> None:
        self._closed = True

    def __enter__(self) -> InMemoryTaskStore:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _check_open(self) -> None:
        if self._closed:
            raise StorageError("task store is closed")

    def count_tasks(self) -> int:
        self._check_open()
        return len(self._tasks)

    def create(self, description: str) -> Task:
        text = (description or "").strip()
        if not text:
            raise ValueError("description is required")
        self._check_open()

        task = Task(
            id=self._next_id,
            description=text,
            status=TaskStatus.PENDING,
            created_at=float(self._clock()),
        )
        self._next_id += 1
        self._tasks[task.id] = task
        logger.debug("Task added id=%s", task.id)
        return task

    def list(self) -> list[Task]:
        self._check_open()
        # newest first
        return sorted(self._tasks.values(), key=lambda t: (t.created_at, t.id), reverse=True)

    def complete(self, task_id: int) -> None:
        self._check_open()
        task = self._tasks.get(int(task_id))
        if task is None:
            return
        self._tasks[task.id] = replace(task, status=TaskStatus.COMPLETED)

    def delete(self, task_id: int) -> None:
        self._check_open()
        self._tasks.pop(int(task_id), None)
