# src/todo_desk/cli/render.py

"""Plain-text task table.

Columns: ID | Task | Status | Date & Time. Status is colored with ANSI codes
(Completed green, Pending orange) only when the caller asks for color.
"""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Sequence
from datetime import datetime

from ..tasks.task_models import Task, TaskStatus

RESET = "\033[0m"
BOLD = "\033[1m"

STATUS_COLOR = {
    TaskStatus.COMPLETED: "\033[38;2;0;128;0m",
    TaskStatus.PENDING: "\033[38;2;255;140;0m",
}

HEADERS = ("ID", "Task", "Status", "Date & Time")
MAX_TASK_WIDTH = 60
SEP = " | "
ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def color_enabled(mode: str) -> bool:
    """Resolve the auto/always/never setting against the current stdout."""
    if mode == "always":
        return True
    if mode == "never" or os.getenv("NO_COLOR") is not None:
        return False
    try:
        return sys.stdout.isatty()
    except Exception:
        return False


def format_timestamp(ts: float) -> str:
    return datetime.fromtimestamp(ts).strftime("%Y-%m-%d %H:%M:%S")


def _truncate(text: str, width: int) -> str:
    if len(text) <= width:
        return text
    return text[: width - 3] + "..."


def _pad(cell: str, width: int) -> str:
    visible = len(ANSI_RE.sub("", cell))
    return cell + " " * max(0, width - visible)


def render_tasks(tasks: Sequence[Task], *, color: bool = False) -> str:
    if not tasks:
        return "No tasks yet."

    rows = [
        (
            str(t.id),
            _truncate(t.description, MAX_TASK_WIDTH),
            t.status.value,
            format_timestamp(t.created_at),
        )
        for t in tasks
    ]
    widths = [max(len(h), *(len(r[i]) for r in rows)) for i, h in enumerate(HEADERS)]

    def line(cells: Sequence[str]) -> str:
        return SEP.join(_pad(c, w) for c, w in zip(cells, widths)).rstrip()

    header = line(HEADERS)
    if color:
        header = BOLD + header + RESET
    out = [header, "-+-".join("-" * w for w in widths)]

    for task, row in zip(tasks, rows):
        cells = list(row)
        if color:
            cells[2] = STATUS_COLOR[task.status] + cells[2] + RESET
        out.append(line(cells))

    return "\n".join(out)
