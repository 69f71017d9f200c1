# src/todo_desk/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import time
from collections.abc import Callable, Iterator
from pathlib import Path
from types import TracebackType

from .task_models import StorageError, Task, TaskStatus

logger = logging.getLogger(__name__)

_MEMORY_DB = ":memory:"
_SQLITE_INT_MIN = -(2**63)
_SQLITE_INT_MAX = 2**63 - 1


def _fits_sqlite_int(value: int) -> bool:
    """No row can carry an id outside SQLite's 64-bit INTEGER range."""
    return _SQLITE_INT_MIN <= int(value) <= _SQLITE_INT_MAX


class TaskStore:
    """
    SQLite task store.

    The schema is intentionally simple and migration-safe:
    - create table if missing
    - use PRAGMA table_info to detect missing columns
    - add columns with ALTER TABLE only when needed

    Connection handling:
    - one connection is opened in __init__ and held until close()
    - every operation uses its own cursor, closed on all exit paths
    - writes commit on success and roll back on failure
    - driver errors (sqlite3.Error and bind failures) become StorageError, no retries
    """

    def __init__(
        self,
        db_path: str | Path = "todo_db.sqlite3",
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._db_path = Path(db_path)
        self._clock = clock
        self._conn: sqlite3.Connection | None = None

        try:
            if str(db_path) != _MEMORY_DB:
                self._db_path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = self._connect()
            self._ensure_schema()
            total = self.count_tasks()
        except (sqlite3.Error, OSError, StorageError) as exc:
            self.close()
            if isinstance(exc, StorageError):
                raise
            raise StorageError(f"cannot open {self._db_path}: {exc}") from exc

        logger.info("TaskStore ready db=%s total=%s", self._db_path, total)

    def close(self) -> None:
        """Release the connection. Safe to call more than once."""
        conn, self._conn = self._conn, None
        if conn is None:
            return
        conn.close()
        logger.info("TaskStore closed db=%s", self._db_path)

    def __enter__(self) -> TaskStore:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def db_path(self) -> Path:
        return self._db_path

    # ---- low-level helpers ----

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        return conn

    def _require_conn(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StorageError("task store is closed")
        return self._conn

    @contextlib.contextmanager
    def _cursor(self, action: str, *, write: bool = False) -> Iterator[sqlite3.Cursor]:
        conn = self._require_conn()
        cur: sqlite3.Cursor | None = None
        try:
            cur = conn.cursor()
            yield cur
            if write:
                conn.commit()
        except (sqlite3.Error, UnicodeEncodeError, OverflowError) as exc:
            # Bind-time rejections: lone surrogates, out-of-range ints.
            if write:
                with contextlib.suppress(sqlite3.Error):
                    conn.rollback()
            logger.warning("TaskStore %s failed: %s", action, exc)
            raise StorageError(str(exc) or exc.__class__.__name__) from exc
        finally:
            if cur is not None:
                with contextlib.suppress(sqlite3.Error):
                    cur.close()

    def _ensure_schema(self) -> None:
        conn = self._require_conn()
        cur = conn.cursor()
        try:
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS todos (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    task TEXT NOT NULL,
                    status TEXT NOT NULL DEFAULT 'Pending',
                    created_at REAL NOT NULL
                )
                """
            )

            # Migrations (safe): add missing columns.
            cur.execute("PRAGMA table_info(todos)")
            cols = {row["name"] for row in cur.fetchall()}

            def add_col(name: str, decl: str) -> None:
                if name in cols:
                    return
                cur.execute(f"ALTER TABLE todos ADD COLUMN {name} {decl}")
                logger.info("TaskStore migration: added column %s", name)

            add_col("status", "TEXT NOT NULL DEFAULT 'Pending'")
            add_col("created_at", "REAL NOT NULL DEFAULT 0")

            cur.execute("CREATE INDEX IF NOT EXISTS idx_todos_created ON todos(created_at, id)")

            conn.commit()
        finally:
            cur.close()

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            description=str(row["task"] or ""),
            status=TaskStatus.from_db(row["status"]),
            created_at=float(row["created_at"] or 0.0),
        )

    # ---- public API ----

    def count_tasks(self) -> int:
        with self._cursor("count") as cur:
            cur.execute("SELECT COUNT(*) FROM todos")
            (n,) = cur.fetchone()
            return int(n)

    def create(self, description: str) -> Task:
        text = (description or "").strip()
        if not text:
            raise ValueError("description is required")

        now = float(self._clock())
        with self._cursor("create", write=True) as cur:
            cur.execute(
                "INSERT INTO todos(task, status, created_at) VALUES (?, ?, ?)",
                (text, TaskStatus.PENDING.value, now),
            )
            rowid = cur.lastrowid

        if rowid is None:
            raise StorageError("SQLite did not return lastrowid for todos insert")

        task = Task(id=int(rowid), description=text, status=TaskStatus.PENDING, created_at=now)
        logger.debug("Task added id=%s created_at=%s", task.id, task.created_at)
        return task

    def list(self) -> list[Task]:
        """All tasks, newest first. Equal timestamps keep the later insert first."""
        with self._cursor("list") as cur:
            cur.execute(
                """
                SELECT id, task, status, created_at
                FROM todos
                ORDER BY created_at DESC, id DESC
                """
            )
            return [self._row_to_task(r) for r in cur.fetchall()]

    def complete(self, task_id: int) -> None:
        if not _fits_sqlite_int(task_id):
            return
        with self._cursor("complete", write=True) as cur:
            cur.execute(
                "UPDATE todos SET status = ? WHERE id = ?",
                (TaskStatus.COMPLETED.value, int(task_id)),
            )
            logger.debug("Task completed id=%s rows=%s", task_id, cur.rowcount)

    def delete(self, task_id: int) -> None:
        if not _fits_sqlite_int(task_id):
            return
        with self._cursor("delete", write=True) as cur:
            cur.execute("DELETE FROM todos WHERE id = ?", (int(task_id),))
            logger.debug("Task deleted id=%s rows=%s", task_id, cur.rowcount)
