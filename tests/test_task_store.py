# tests/test_task_store.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from rei.errors import CorruptDataError, StorageError
from rei.tasks.task_list import TaskList
from rei.tasks.task_models import Deadline, Event, Todo
from rei.tasks.task_store import TaskStore


def test_load_creates_missing_file_and_dirs(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "dir" / "Rei.txt"
    store = TaskStore(path)

    assert store.load() == []
    assert path.exists()
    assert path.read_text("utf-8") == ""


def test_save_then_load_round_trip(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "Rei.txt")
    tasks = TaskList(
        [
            Todo("read book", done=True),
            Deadline("submit report", datetime(2024, 3, 1, 18, 0)),
            Event("trip", datetime(2024, 3, 1, 9, 0), datetime(2024, 3, 2, 9, 0), done=True),
            Todo("pipes | inside | text"),
        ]
    )

    store.save(tasks)
    loaded = store.load()

    assert loaded == tasks.all()
    assert [type(t) for t in loaded] == [Todo, Deadline, Event, Todo]


def test_save_writes_one_line_per_task(tmp_path: Path) -> None:
    path = tmp_path / "Rei.txt"
    store = TaskStore(path)
    store.save(TaskList([Todo("a"), Deadline("b", datetime(2024, 3, 1, 18, 0))]))

    assert path.read_text("utf-8") == "T | 0 | a\nD | 0 | b | 2024-03-01T18:00\n"
    assert not (tmp_path / "Rei.txt.tmp").exists()


def test_save_overwrites_previous_content(tmp_path: Path) -> None:
    path = tmp_path / "Rei.txt"
    store = TaskStore(path)
    store.save(TaskList([Todo("a"), Todo("b")]))
    store.save(TaskList([Todo("c")]))

    assert path.read_text("utf-8") == "T | 0 | c\n"


def test_load_accepts_seconds_and_blank_lines(tmp_path: Path) -> None:
    path = tmp_path / "Rei.txt"
    path.write_text("D | 1 | old | 2023-12-31T23:59:00\n\n", "utf-8")

    (task,) = TaskStore(path).load()
    assert isinstance(task, Deadline)
    assert task.done is True
    assert task.due == datetime(2023, 12, 31, 23, 59)


@pytest.mark.parametrize(
    "line",
    [
        "X | 0 | mystery",
        "T | 2 | bad flag",
        "T | 0",
        "D | 0 | no date",
        "D | 0 | bad date | yesterday",
        "E | 0 | trip | 2024-03-01T09:00",
        "E | 0 | backwards | 2024-03-02T09:00 | 2024-03-01T09:00",
        "T | 0 |    ",
    ],
)
def test_corrupt_lines_fail(tmp_path: Path, line: str) -> None:
    path = tmp_path / "Rei.txt"
    path.write_text("T | 0 | fine\n" + line + "\n", "utf-8")

    with pytest.raises(CorruptDataError, match="line 2"):
        TaskStore(path).load()


def test_unreadable_path_is_storage_error(tmp_path: Path) -> None:
    # A directory where the file should be cannot be read as text.
    path = tmp_path / "Rei.txt"
    path.mkdir()

    with pytest.raises(StorageError):
        TaskStore(path).load()
    with pytest.raises(StorageError):
        TaskStore(path).save(TaskList([Todo("a")]))


@pytest.mark.parametrize("brk", ["\r", "\x0b", "\x0c", "\x1c", "\x85", "\u2028", "\u2029"])
def test_only_newline_ends_a_line_on_load(tmp_path: Path, brk: str) -> None:
    path = tmp_path / "Rei.txt"
    path.write_bytes(f"T | 0 | fine\nT | 0 | a{brk}b\n".encode("utf-8"))

    with pytest.raises(CorruptDataError, match=r"line 2\): description spans several lines"):
        TaskStore(path).load()


def test_crlf_files_still_load(tmp_path: Path) -> None:
    path = tmp_path / "Rei.txt"
    path.write_bytes(b"T | 0 | a\r\nT | 1 | b\r\n")

    loaded = TaskStore(path).load()
    assert [t.file_string() for t in loaded] == ["T | 0 | a", "T | 1 | b"]


def test_seconds_survive_a_load_save_cycle(tmp_path: Path) -> None:
    path = tmp_path / "Rei.txt"
    path.write_text(
        "D | 0 | hand edited | 2023-12-31T23:59:30\n"
        "E | 0 | trip | 2024-03-01T09:00 | 2024-03-01T09:00:15\n",
        "utf-8",
    )
    store = TaskStore(path)

    store.save(TaskList(store.load()))

    assert path.read_text("utf-8") == (
        "D | 0 | hand edited | 2023-12-31T23:59:30\n"
        "E | 0 | trip | 2024-03-01T09:00 | 2024-03-01T09:00:15\n"
    )
