# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Keep your .env local; it is read with override=False, so real env vars always win.

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo-desk).",
    "TODO_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Storage
    "TODO_STORAGE": "sqlite (default) or memory (nothing is saved).",
    "TODO_DATA_DIR": "Local data directory for the database and log (default: .local/todo-desk).",
    "TODO_DB_PATH": "SQLite database path (default: <data_dir>/todo_db.sqlite3).",
    # Console
    "TODO_COLOR": "auto (default, color only on a TTY), always or never. NO_COLOR forces never.",
    "TODO_CONFIRM_DELETE": "Ask before deleting a task (default: true).",
}

EXAMPLE_DOTENV = """\
TODO_LOG_LEVEL=INFO
TODO_DATA_DIR=.local/todo-desk
TODO_COLOR=auto
"""
