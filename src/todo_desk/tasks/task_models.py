# src/todo_desk/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TaskStatus(StrEnum):
    """
    Task completion status.

    Values are the strings persisted in the `status` column.
    The only transition is PENDING -> COMPLETED.
    """

    PENDING = "Pending"
    COMPLETED = "Completed"

    @classmethod
    def from_db(cls, raw: str | None) -> TaskStatus:
        if not raw:
            return cls.PENDING
        for status in cls:
            if status.value.lower() == raw.strip().lower():
                return status
        return cls.PENDING


class StorageError(RuntimeError):
    """Failure in the persistence layer (connect, read or write)."""


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    description: str
    status: TaskStatus
    created_at: float  # unix timestamp

    @property
    def is_completed(self) -> bool:
        return self.status is TaskStatus.COMPLETED
