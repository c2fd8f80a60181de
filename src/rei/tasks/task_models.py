# src/rei/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import ClassVar

DISPLAY_DATE_FORMAT = "%b %d %Y %H:%M"
FIELD_SEP = " | "

# Every character str.splitlines() treats as a line boundary.
LINE_BREAK_RE = re.compile(r"[\n\r\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029]")


class TaskKind(StrEnum):
    """One-letter tag used as the file-format discriminator."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


def format_display_date(value: datetime) -> str:
    return value.strftime(DISPLAY_DATE_FORMAT)


def has_line_break(text: str) -> bool:
    return LINE_BREAK_RE.search(text) is not None


def format_file_date(value: datetime) -> str:
    # Minute precision matches the input grammar; finer values are kept as read.
    if value.second or value.microsecond:
        return value.isoformat()
    return value.isoformat(timespec="minutes")


@dataclass(slots=True)
class Task:
    """
    Base task entity.

    Subclasses add their date fields and describe them via `_details()` (display)
    and `_file_fields()` (persistence). The description is set once at creation.
    """

    kind: ClassVar[TaskKind]

    description: str
    done: bool = field(default=False, kw_only=True)

    def __post_init__(self) -> None:
        if type(self) is Task:
            raise TypeError("Task is abstract; use Todo, Deadline or Event")
        if not self.description or not self.description.strip():
            raise ValueError("description is required")
        if has_line_break(self.description):
            raise ValueError("description must be a single line")

    def mark_done(self) -> None:
        self.done = True

    def mark_undone(self) -> None:
        self.done = False

    @property
    def status_icon(self) -> str:
        return "[X]" if self.done else "[ ]"

    @property
    def done_flag(self) -> str:
        return "1" if self.done else "0"

    def matches(self, keyword: str) -> bool:
        return keyword.lower() in self.description.lower()

    def display_string(self) -> str:
        return f"[{self.kind.value}]{self.status_icon} {self.description}{self._details()}"

    def file_string(self) -> str:
        fields = [self.kind.value, self.done_flag, self.description, *self._file_fields()]
        return FIELD_SEP.join(fields)

    def _details(self) -> str:
        return ""

    def _file_fields(self) -> list[str]:
        return []

    def __str__(self) -> str:
        return self.display_string()


@dataclass(slots=True)
class Todo(Task):
    kind: ClassVar[TaskKind] = TaskKind.TODO


@dataclass(slots=True)
class Deadline(Task):
    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    due: datetime

    def _details(self) -> str:
        return f" (by: {format_display_date(self.due)})"

    def _file_fields(self) -> list[str]:
        return [format_file_date(self.due)]


@dataclass(slots=True)
class Event(Task):
    """
    Time-ranged task.

    `start <= end` is checked by the parser (user input) and by the store (reload),
    not here.
    """

    kind: ClassVar[TaskKind] = TaskKind.EVENT

    start: datetime
    end: datetime

    def _details(self) -> str:
        return f" (from: {format_display_date(self.start)} to: {format_display_date(self.end)})"

    def _file_fields(self) -> list[str]:
        return [format_file_date(self.start), format_file_date(self.end)]
