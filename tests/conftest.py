# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_desk.core.state import AppState
from todo_desk.tasks.task_store import TaskStore

from .fakes import FakeClock


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the command layer.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="WARNING",
        storage="sqlite",
        data_dir=tmp_path,
        db_path=tmp_path / "todo_db.sqlite3",
        color="never",
        confirm_delete=True,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def task_store(settings: SimpleNamespace, clock: FakeClock) -> Iterator[TaskStore]:
    store = TaskStore(settings.db_path, clock=clock)
    yield store
    store.close()


@pytest.fixture()
def state(settings: SimpleNamespace, task_store: TaskStore) -> AppState:
    """
    AppState wired with a real SQLite store in tmp_path.

    NOTE: the store is real because what the commands show must match what
    actually landed in the table.
    """
    return AppState(
        settings=settings,
        task_store=task_store,
        color=False,
        confirm_delete=True,
    )
