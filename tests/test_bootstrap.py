# tests/test_bootstrap.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_desk.cli import main as main_module
from todo_desk.cli.bootstrap import create_initial_state
from todo_desk.tasks.memory_store import InMemoryTaskStore
from todo_desk.tasks.task_store import TaskStore


@pytest.fixture(autouse=True)
def restore_root_logging() -> Iterator[None]:
    """main() reconfigures the root logger; put pytest's handlers back afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def test_sqlite_state(settings: SimpleNamespace) -> None:
    settings.db_path = settings.data_dir / "nested" / "todo_db.sqlite3"

    state = create_initial_state(settings=settings)
    try:
        assert isinstance(state.task_store, TaskStore)
        assert settings.db_path.exists()
        assert state.color is False
        assert state.confirm_delete is True
    finally:
        state.task_store.close()


def test_memory_state(settings: SimpleNamespace) -> None:
    settings.storage = "memory"
    settings.confirm_delete = False

    state = create_initial_state(settings=settings)

    assert isinstance(state.task_store, InMemoryTaskStore)
    assert state.confirm_delete is False
    assert not settings.db_path.exists()


def _settings_for(tmp_path: Path, db_path: Path) -> SimpleNamespace:
    return SimpleNamespace(
        app_name="todo-test",
        log_level="WARNING",
        storage="sqlite",
        data_dir=tmp_path,
        db_path=db_path,
        color="never",
        confirm_delete=True,
    )


def test_main_exits_when_database_cannot_be_opened(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    blocker = tmp_path / "dbdir"
    blocker.mkdir()
    monkeypatch.setattr(main_module, "get_settings", lambda: _settings_for(tmp_path, blocker))

    with pytest.raises(SystemExit) as excinfo:
        main_module.main()

    assert excinfo.value.code == 1
    assert "Failed to connect to DB:" in capsys.readouterr().err


def test_main_runs_console_and_closes_store(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    settings = _settings_for(tmp_path, tmp_path / "todo_db.sqlite3")
    monkeypatch.setattr(main_module, "get_settings", lambda: settings)

    seen = {}

    def fake_loop(state) -> None:
        state.task_store.create("from main")
        seen["store"] = state.task_store

    monkeypatch.setattr(main_module, "run_console_loop", fake_loop)

    main_module.main()

    with TaskStore(settings.db_path) as reopened:
        assert [t.description for t in reopened.list()] == ["from main"]
    assert seen["store"]._conn is None
    assert (tmp_path / "todo-desk.log").exists()
