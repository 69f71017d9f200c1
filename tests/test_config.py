# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_desk.config import Settings

_VARS = (
    "TODO_APP_NAME",
    "TODO_LOG_LEVEL",
    "TODO_STORAGE",
    "TODO_DATA_DIR",
    "TODO_DB_PATH",
    "TODO_COLOR",
    "TODO_CONFIRM_DELETE",
    "NO_COLOR",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()

    assert s.app_name == "todo-desk"
    assert s.log_level == "WARNING"
    assert s.storage == "sqlite"
    assert s.data_dir == Path(".local/todo-desk")
    assert s.db_path == Path(".local/todo-desk") / "todo_db.sqlite3"
    assert s.color == "auto"
    assert s.confirm_delete is True


def test_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TODO_STORAGE", "MEMORY")
    monkeypatch.setenv("TODO_LOG_LEVEL", "debug")
    monkeypatch.setenv("TODO_CONFIRM_DELETE", "no")
    monkeypatch.setenv("TODO_COLOR", "always")

    s = Settings.from_env()

    assert s.data_dir == tmp_path
    assert s.db_path == tmp_path / "todo_db.sqlite3"
    assert s.storage == "memory"
    assert s.log_level == "DEBUG"
    assert s.confirm_delete is False
    assert s.color == "always"


def test_bad_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_STORAGE", "mysql")
    monkeypatch.setenv("TODO_COLOR", "rainbow")
    monkeypatch.setenv("TODO_DB_PATH", "  ")

    s = Settings.from_env()

    assert s.storage == "sqlite"
    assert s.color == "auto"
    assert s.db_path == s.data_dir / "todo_db.sqlite3"


def test_no_color_disables_auto(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    assert Settings.from_env().color == "never"

    monkeypatch.setenv("TODO_COLOR", "always")
    assert Settings.from_env().color == "always"
