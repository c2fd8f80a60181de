# src/rei/connectors/oneshot_connector.py

"""
Single-shot connector for a graphical shell.

The shell owns the window; per user message it calls `respond(state, text)`
and renders `Reply.text`. When `Reply.is_exit` is set it should close.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..cli.parser import parse
from ..core.ports import welcome_lines
from ..core.state import AppState
from ..errors import ReiError

logger = logging.getLogger(__name__)


class BufferedSink:
    """MessageSink that collects output until `get_response()` is called."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def show(self, message: str) -> None:
        if self._parts:
            self._parts.append("\n")
        self._parts.append(message)

    def show_line(self) -> None:
        # No visible rules in a chat bubble; only spacing between messages.
        if self._parts:
            self._parts.append("\n")

    def show_error(self, message: str) -> None:
        self.show(f"Error: {message}")

    def show_welcome(self, app_name: str) -> None:
        for line in welcome_lines(app_name):
            self.show(line)

    def get_response(self) -> str:
        """Return everything collected so far and clear the buffer."""
        text = "".join(self._parts)
        self._parts.clear()
        return text


@dataclass(frozen=True, slots=True)
class Reply:
    text: str
    is_exit: bool = False


def welcome_text(state: AppState) -> str:
    sink = BufferedSink()
    sink.show_welcome(state.app_name)
    return sink.get_response()


def respond(state: AppState, line: str) -> Reply:
    if not line or not line.strip():
        return Reply("")

    sink = BufferedSink()
    try:
        command = parse(line)
        command.execute(state.tasks, sink, state.store)
    except ReiError as e:
        logger.info("Command failed: %s", e)
        # Drop any partial output; the shell shows just the error.
        sink.get_response()
        sink.show_error(str(e))
        return Reply(sink.get_response())

    return Reply(sink.get_response().strip("\n"), is_exit=command.is_exit)
