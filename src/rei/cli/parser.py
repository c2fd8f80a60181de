# src/rei/cli/parser.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from datetime import datetime

from ..errors import ParseError
from ..tasks.task_models import has_line_break
from .commands import (
    ByeCommand,
    Command,
    DeadlineCommand,
    DeleteCommand,
    EventCommand,
    FindCommand,
    ListCommand,
    MarkCommand,
    TodoCommand,
    UnmarkCommand,
)

CommandBuilder = Callable[[str], Command]

INPUT_DATE_FORMAT = "%Y-%m-%d %H:%M"
_INPUT_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}")
_INDEX_RE = re.compile(r"[+-]?[0-9]+")
_EVENT_SPLIT_RE = re.compile(r" /from | /to ")

logger = logging.getLogger(__name__)


class CommandParser:
    """
    Keyword-dispatched parser.

    Rules are tried in registration order and the first matching keyword wins;
    its builder then applies the sub-grammar to the whole (stripped) line.
    """

    def __init__(self) -> None:
        self._rules: list[tuple[str, bool, CommandBuilder]] = []

    def register(self, keyword: str, builder: CommandBuilder, *, exact: bool = False) -> None:
        self._rules.append((keyword, exact, builder))

    def parse(self, line: str) -> Command:
        text = line.strip()
        if has_line_break(text):
            # Descriptions are stored one per line in the task file.
            raise ParseError("OOPS!!! A command must fit on a single line.")
        for keyword, exact, builder in self._rules:
            matched = text == keyword if exact else text.startswith(keyword)
            if matched:
                command = builder(text)
                logger.debug("Parsed %r -> %s", text, type(command).__name__)
                return command
        raise ParseError("OOPS!!! I'm sorry, but I don't know what that means :-(")


def parse_datetime(raw: str) -> datetime:
    """Parse `yyyy-MM-dd HH:mm` (exactly that shape) into a naive datetime."""
    value = raw.strip()
    if not _INPUT_DATE_RE.fullmatch(value):
        raise ParseError("OOPS!!! Please use yyyy-MM-dd HH:mm format.")
    try:
        return datetime.strptime(value, INPUT_DATE_FORMAT)
    except ValueError:
        raise ParseError("OOPS!!! Please use yyyy-MM-dd HH:mm format.") from None


def parse_index(raw: str) -> int:
    """1-based task number -> 0-based index. No range check."""
    if not _INDEX_RE.fullmatch(raw):
        raise ParseError("OOPS!!! Task number must be a number.")
    return int(raw) - 1


# ---- sub-grammars ----


def _parse_find(text: str) -> Command:
    keyword = text[len("find ") :].strip()
    if not keyword:
        raise ParseError("Find command requires a keyword.")
    return FindCommand(keyword)


def _parse_todo(text: str) -> Command:
    # "todo" + separator + at least one character
    if len(text) <= 5:
        raise ParseError("OOPS!!! The description of a todo cannot be empty.")
    description = text[5:].strip()
    if not description:
        raise ParseError("OOPS!!! The description of a todo cannot be empty.")
    return TodoCommand(description)


def _parse_deadline(text: str) -> Command:
    if "/by" not in text:
        raise ParseError("OOPS!!! Deadline must have /by.")
    parts = text.split("/by")
    if len(parts) != 2:
        raise ParseError("OOPS!!! Deadline must have exactly one /by.")
    description = parts[0][len("deadline") :].strip()
    if not description:
        raise ParseError("OOPS!!! The description cannot be empty.")
    return DeadlineCommand(description, parse_datetime(parts[1]))


def _parse_event(text: str) -> Command:
    parts = _EVENT_SPLIT_RE.split(text)
    if len(parts) < 3:
        raise ParseError("OOPS!!! An event must have /from and /to.")
    from_at, to_at = text.find(" /from "), text.find(" /to ")
    if len(parts) > 3 or from_at < 0 or to_at < 0 or from_at > to_at:
        raise ParseError("OOPS!!! An event must have exactly one /from followed by one /to.")
    description = parts[0][6:].strip()
    if not description:
        raise ParseError("OOPS!!! The description cannot be empty.")
    start = parse_datetime(parts[1])
    end = parse_datetime(parts[2])
    if start > end:
        raise ParseError("OOPS!!! An event cannot end before it starts.")
    return EventCommand(description, start, end)


def _index_command(prefix: str, factory: Callable[[int], Command]) -> CommandBuilder:
    def build(text: str) -> Command:
        return factory(parse_index(text[len(prefix) :]))

    return build


parser = CommandParser()
parser.register("bye", lambda _text: ByeCommand(), exact=True)
parser.register("list", lambda _text: ListCommand(), exact=True)
parser.register("find ", _parse_find)
parser.register("todo", _parse_todo)
parser.register("deadline", _parse_deadline)
parser.register("event", _parse_event)
parser.register("mark ", _index_command("mark ", MarkCommand))
parser.register("unmark ", _index_command("unmark ", UnmarkCommand))
parser.register("delete ", _index_command("delete ", DeleteCommand))


def parse(line: str) -> Command:
    """Translate one raw input line into exactly one command (or raise ParseError)."""
    return parser.parse(line)
