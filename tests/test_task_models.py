# tests/test_task_models.py

from __future__ import annotations

from datetime import datetime

import pytest

from rei.tasks.task_models import Deadline, Event, Task, TaskKind, Todo


def test_mark_done_and_undone_are_idempotent() -> None:
    task = Todo("read book")
    assert task.done is False

    task.mark_done()
    task.mark_done()
    assert task.done is True

    task.mark_undone()
    task.mark_undone()
    assert task.done is False


def test_display_strings() -> None:
    todo = Todo("read book")
    deadline = Deadline("submit report", datetime(2024, 3, 1, 18, 0))
    event = Event("trip", datetime(2024, 3, 1, 9, 0), datetime(2024, 3, 2, 9, 0), done=True)

    assert str(todo) == "[T][ ] read book"
    assert deadline.display_string() == "[D][ ] submit report (by: Mar 01 2024 18:00)"
    assert str(event) == "[E][X] trip (from: Mar 01 2024 09:00 to: Mar 02 2024 09:00)"


def test_file_strings_use_iso_dates() -> None:
    todo = Todo("read book", done=True)
    deadline = Deadline("submit report", datetime(2024, 3, 1, 18, 0))
    event = Event("trip", datetime(2024, 3, 1, 9, 0), datetime(2024, 3, 2, 9, 30))

    assert todo.file_string() == "T | 1 | read book"
    assert deadline.file_string() == "D | 0 | submit report | 2024-03-01T18:00"
    assert event.file_string() == "E | 0 | trip | 2024-03-01T09:00 | 2024-03-02T09:30"


def test_kind_tags() -> None:
    assert Todo("a").kind == TaskKind.TODO == "T"
    assert Deadline("a", datetime(2024, 1, 1)).kind == "D"
    assert Event("a", datetime(2024, 1, 1), datetime(2024, 1, 1)).kind == "E"


def test_matches_is_case_insensitive() -> None:
    task = Todo("Read Book")
    assert task.matches("book")
    assert task.matches("BOOK")
    assert not task.matches("milk")


def test_empty_description_rejected() -> None:
    with pytest.raises(ValueError):
        Todo("   ")


def test_base_task_is_abstract() -> None:
    with pytest.raises(TypeError):
        Task("plain")


@pytest.mark.parametrize("brk", ["\n", "\r", "\x85", "\u2028"])
def test_multi_line_description_rejected(brk: str) -> None:
    with pytest.raises(ValueError):
        Todo(f"a{brk}b")


def test_file_string_keeps_seconds_when_present() -> None:
    task = Deadline("x", datetime(2024, 3, 1, 18, 0, 30))
    assert task.file_string() == "D | 0 | x | 2024-03-01T18:00:30"
