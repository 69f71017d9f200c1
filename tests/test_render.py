# tests/test_render.py

from __future__ import annotations

from datetime import datetime

from todo_desk.cli.render import ANSI_RE, format_timestamp, render_tasks
from todo_desk.tasks.task_models import Task, TaskStatus


def _task(id: int, text: str, status: TaskStatus = TaskStatus.PENDING) -> Task:
    return Task(id=id, description=text, status=status, created_at=1_700_000_000.0 + id)


def test_empty_list() -> None:
    assert render_tasks([]) == "No tasks yet."


def test_columns_and_rows() -> None:
    out = render_tasks([_task(2, "B", TaskStatus.COMPLETED), _task(1, "A")])
    lines = out.splitlines()

    assert [c.strip() for c in lines[0].split(" | ")] == ["ID", "Task", "Status", "Date & Time"]
    assert [c.strip() for c in lines[2].split(" | ")][:3] == ["2", "B", "Completed"]
    assert [c.strip() for c in lines[3].split(" | ")][:3] == ["1", "A", "Pending"]
    assert lines[3].endswith(format_timestamp(1_700_000_001.0))


def test_timestamp_format() -> None:
    ts = datetime(2024, 3, 5, 14, 7, 9).timestamp()
    assert format_timestamp(ts) == "2024-03-05 14:07:09"


def test_long_descriptions_are_truncated() -> None:
    out = render_tasks([_task(1, "x" * 200)])
    row = out.splitlines()[2]
    assert "x" * 57 + "..." in row
    assert "x" * 61 not in row


def test_color_only_on_status_and_header() -> None:
    plain = render_tasks([_task(1, "A")])
    colored = render_tasks([_task(1, "A"), _task(2, "B", TaskStatus.COMPLETED)], color=True)

    assert ANSI_RE.search(plain) is None
    assert "\033[38;2;255;140;0mPending" in colored
    assert "\033[38;2;0;128;0mCompleted" in colored
    # Alignment ignores escape codes.
    widths = {len(ANSI_RE.sub("", line)) for line in colored.splitlines()[2:]}
    assert len(widths) == 1
