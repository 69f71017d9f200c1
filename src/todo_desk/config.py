# src/todo_desk/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a working default; nothing is required at import time.
- Bad values fall back to defaults instead of crashing startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

STORAGE_BACKENDS = ("sqlite", "memory")
COLOR_MODES = ("auto", "always", "never")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = (os.getenv(name) or "").strip().lower()
    return raw if raw in choices else default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Storage ----
    storage: str
    data_dir: Path
    db_path: Path

    # ---- Console ----
    color: str
    confirm_delete: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo-desk").strip() or "todo-desk"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"

        storage = _env_choice(_k("STORAGE"), STORAGE_BACKENDS, "sqlite")
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo-desk"))
        db_path = _env_path(_k("DB_PATH"), data_dir / "todo_db.sqlite3")

        # NO_COLOR (https://no-color.org) wins over the auto default.
        color_default = "never" if os.getenv("NO_COLOR") is not None else "auto"
        color = _env_choice(_k("COLOR"), COLOR_MODES, color_default)
        confirm_delete = _env_bool(_k("CONFIRM_DELETE"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            storage=storage,
            data_dir=data_dir,
            db_path=db_path,
            color=color,
            confirm_delete=confirm_delete,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Load .env (without overriding real env vars) and build Settings once."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
