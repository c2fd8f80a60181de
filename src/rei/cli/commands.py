# src/rei/cli/commands.py

"""
Command variants.

Each command is created once by the parser and executed once against the
task list, a message sink and the task store. Mutating commands save the
whole list before reporting success.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from ..core.ports import MessageSink, TaskRepo
from ..tasks.task_list import TaskList
from ..tasks.task_models import Deadline, Event, Task, Todo

logger = logging.getLogger(__name__)


class Command:
    """Base class; `is_exit` tells the caller to stop reading input."""

    is_exit: ClassVar[bool] = False

    def execute(self, tasks: TaskList, sink: MessageSink, store: TaskRepo) -> None:
        raise NotImplementedError


def _show_block(sink: MessageSink, lines: list[str]) -> None:
    sink.show_line()
    for line in lines:
        sink.show(line)
    sink.show_line()


def _count_line(tasks: TaskList) -> str:
    return f"Now you have {tasks.size()} tasks in the list."


@dataclass(frozen=True, slots=True)
class ByeCommand(Command):
    is_exit: ClassVar[bool] = True

    def execute(self, tasks: TaskList, sink: MessageSink, store: TaskRepo) -> None:
        _show_block(sink, ["Bye. Have a nice day."])


@dataclass(frozen=True, slots=True)
class ListCommand(Command):
    def execute(self, tasks: TaskList, sink: MessageSink, store: TaskRepo) -> None:
        if not tasks.size():
            _show_block(sink, ["Your task list is empty."])
            return
        lines = ["Here are the tasks in your list:"]
        lines += [f"{i}. {task}" for i, task in enumerate(tasks.all(), start=1)]
        _show_block(sink, lines)


@dataclass(frozen=True, slots=True)
class FindCommand(Command):
    keyword: str

    def execute(self, tasks: TaskList, sink: MessageSink, store: TaskRepo) -> None:
        matches = tasks.find(self.keyword)
        if not matches:
            _show_block(sink, [f"No tasks match the keyword: {self.keyword}"])
            return
        # Ordinals are positions in the full list, usable with mark/unmark/delete.
        lines = ["Here are the matching tasks in your list:"]
        lines += [f"{i}. {task}" for i, task in matches]
        _show_block(sink, lines)


class _AddCommand(Command):
    def build_task(self) -> Task:
        raise NotImplementedError

    def execute(self, tasks: TaskList, sink: MessageSink, store: TaskRepo) -> None:
        tasks.add(self.build_task())
        store.save(tasks)
        added = tasks.last()
        logger.debug("Task added kind=%s total=%d", added.kind.value, tasks.size())
        _show_block(sink, ["Got it. I've added this task:", str(added), _count_line(tasks)])


@dataclass(frozen=True, slots=True)
class TodoCommand(_AddCommand):
    description: str

    def build_task(self) -> Task:
        return Todo(self.description)


@dataclass(frozen=True, slots=True)
class DeadlineCommand(_AddCommand):
    description: str
    due: datetime

    def build_task(self) -> Task:
        return Deadline(self.description, self.due)


@dataclass(frozen=True, slots=True)
class EventCommand(_AddCommand):
    description: str
    start: datetime
    end: datetime

    def build_task(self) -> Task:
        return Event(self.description, self.start, self.end)


@dataclass(frozen=True, slots=True)
class MarkCommand(Command):
    index: int

    def execute(self, tasks: TaskList, sink: MessageSink, store: TaskRepo) -> None:
        task = tasks.mark_done(self.index)
        store.save(tasks)
        _show_block(sink, ["Nice! I've marked this task as done:", str(task)])


@dataclass(frozen=True, slots=True)
class UnmarkCommand(Command):
    index: int

    def execute(self, tasks: TaskList, sink: MessageSink, store: TaskRepo) -> None:
        task = tasks.mark_undone(self.index)
        store.save(tasks)
        _show_block(sink, ["OK, I've marked this task as not done yet:", str(task)])


@dataclass(frozen=True, slots=True)
class DeleteCommand(Command):
    index: int

    def execute(self, tasks: TaskList, sink: MessageSink, store: TaskRepo) -> None:
        removed = tasks.remove(self.index)
        store.save(tasks)
        logger.debug("Task removed index=%d total=%d", self.index, tasks.size())
        _show_block(
            sink,
            ["Noted. I've removed this task:", str(removed), _count_line(tasks)],
        )
