# src/rei/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from datetime import datetime
from pathlib import Path

from ..errors import CorruptDataError, StorageError
from .task_list import TaskList
from .task_models import FIELD_SEP, Deadline, Event, Task, TaskKind, Todo, has_line_break

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Plain-text task file, one task per line:

        T | <0|1> | <description>
        D | <0|1> | <description> | <due>
        E | <0|1> | <description> | <start> | <end>

    Dates are ISO-8601 local datetimes. Date fields are taken from the right end
    of the line, so a description containing " | " still round-trips.

    Saving rewrites the whole file through a temporary sibling + os.replace.
    """

    def __init__(self, file_path: str | Path) -> None:
        self._path = Path(file_path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- public API ----

    def load(self) -> list[Task]:
        """
        Read all tasks from disk.

        A missing file (and its parent directory) is created and yields an empty list.
        """
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            if not self._path.exists():
                self._path.touch()
                logger.info("Created empty task file %s", self._path)
                return []
            # newline="" keeps \r and friends inside a line instead of splitting on them.
            with open(self._path, encoding="utf-8", newline="") as f:
                text = f.read()
        except OSError as e:
            logger.exception("Failed to load tasks from %s", self._path)
            raise StorageError("OOPS!!! Unable to load tasks from file.") from e

        tasks: list[Task] = []
        for lineno, line in enumerate(text.split("\n"), start=1):
            line = line.removesuffix("\r")
            if not line.strip():
                continue
            tasks.append(self._decode_line(line, lineno))

        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: TaskList) -> None:
        payload = "".join(task.file_string() + "\n" for task in tasks.all())
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8", newline="\n") as f:
                f.write(payload)
            os.replace(tmp, self._path)
        except OSError as e:
            logger.exception("Failed to save tasks to %s", self._path)
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise StorageError("OOPS!!! Unable to save tasks to file.") from e

        logger.debug("Saved %d tasks to %s", tasks.size(), self._path)

    # ---- decoding ----

    @staticmethod
    def _corrupt(lineno: int, reason: str) -> CorruptDataError:
        return CorruptDataError(f"OOPS!!! Corrupted data file (line {lineno}): {reason}.")

    def _decode_line(self, line: str, lineno: int) -> Task:
        head = line.split(FIELD_SEP, 2)
        if len(head) < 3:
            raise self._corrupt(lineno, "expected at least 3 fields")

        tag, flag, rest = head
        if flag not in ("0", "1"):
            raise self._corrupt(lineno, f"done flag must be 0 or 1, got {flag!r}")

        task: Task
        if tag == TaskKind.TODO:
            task = Todo(self._description(rest, lineno))
        elif tag == TaskKind.DEADLINE:
            parts = rest.rsplit(FIELD_SEP, 1)
            if len(parts) != 2:
                raise self._corrupt(lineno, "deadline needs a due date")
            task = Deadline(self._description(parts[0], lineno), self._date(parts[1], lineno))
        elif tag == TaskKind.EVENT:
            parts = rest.rsplit(FIELD_SEP, 2)
            if len(parts) != 3:
                raise self._corrupt(lineno, "event needs start and end dates")
            start = self._date(parts[1], lineno)
            end = self._date(parts[2], lineno)
            if start > end:
                raise self._corrupt(lineno, "event starts after it ends")
            task = Event(self._description(parts[0], lineno), start, end)
        else:
            raise self._corrupt(lineno, f"unknown task type {tag!r}")

        if flag == "1":
            task.mark_done()
        return task

    def _description(self, raw: str, lineno: int) -> str:
        if not raw.strip():
            raise self._corrupt(lineno, "empty description")
        if has_line_break(raw):
            raise self._corrupt(lineno, "description spans several lines")
        return raw

    def _date(self, raw: str, lineno: int) -> datetime:
        try:
            value = datetime.fromisoformat(raw.strip())
        except ValueError:
            raise self._corrupt(lineno, f"bad date {raw!r}") from None
        if value.tzinfo is not None:
            raise self._corrupt(lineno, f"date must not carry a timezone: {raw!r}")
        return value
