# src/rei/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable

from ..errors import EmptyListError, InvalidIndexError
from .task_models import Task


class TaskList:
    """
    Ordered task collection (insertion order = display order = file order).

    All index arguments are 0-based. This is the only place task numbers are
    range-checked; every indexed operation validates before touching the list.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._tasks):
            raise InvalidIndexError()

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def remove(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks.pop(index)

    def mark_done(self, index: int) -> Task:
        task = self.get(index)
        task.mark_done()
        return task

    def mark_undone(self, index: int) -> Task:
        task = self.get(index)
        task.mark_undone()
        return task

    def size(self) -> int:
        return len(self._tasks)

    def last(self) -> Task:
        if not self._tasks:
            raise EmptyListError()
        return self._tasks[-1]

    def all(self) -> list[Task]:
        return list(self._tasks)

    def find(self, keyword: str) -> list[tuple[int, Task]]:
        """Return (1-based position, task) pairs whose description contains `keyword`."""
        return [(i, t) for i, t in enumerate(self._tasks, start=1) if t.matches(keyword)]
