# src/rei/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

Commands depend on these Protocols instead of concrete connectors/storage,
so the console, a graphical shell and the tests can all plug in their own.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_list import TaskList
    from ..tasks.task_models import Task


class MessageSink(Protocol):
    """Where commands send user-facing text."""

    def show(self, message: str) -> None: ...
    def show_line(self) -> None: ...
    def show_error(self, message: str) -> None: ...
    def show_welcome(self, app_name: str) -> None: ...


class TaskRepo(Protocol):
    def load(self) -> list[Task]: ...
    def save(self, tasks: TaskList) -> None: ...


def welcome_lines(app_name: str) -> list[str]:
    return [f"Hello! I'm {app_name}.", "What can I do for you?"]
