# src/rei/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.parser import parse
from ..core.ports import MessageSink, welcome_lines
from ..core.state import AppState
from ..errors import ReiError

logger = logging.getLogger(__name__)

LINE = "_" * 60


class ConsoleSink:
    """MessageSink that prints straight to stdout."""

    def show(self, message: str) -> None:
        print(message)

    def show_line(self) -> None:
        print(LINE)

    def show_error(self, message: str) -> None:
        self.show_line()
        self.show(message)
        self.show_line()

    def show_welcome(self, app_name: str) -> None:
        self.show_line()
        for line in welcome_lines(app_name):
            self.show(line)
        self.show_line()


def run_console_loop(
    state: AppState,
    *,
    read_line: Callable[[], str] = input,
    sink: MessageSink | None = None,
) -> None:
    """
    Read-parse-execute loop.

    Stops on a `bye` command, EOF or Ctrl+C. User errors are shown and the loop
    continues; nothing raised by a single command ends the session.
    """
    sink = sink or ConsoleSink()
    logger.info("Console connector started (tasks=%d).", state.tasks.size())
    sink.show_welcome(state.app_name)

    while True:
        try:
            user_input = read_line().strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        try:
            command = parse(user_input)
            command.execute(state.tasks, sink, state.store)
        except ReiError as e:
            logger.info("Command failed: %s", e)
            sink.show_error(str(e))
            continue

        if command.is_exit:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
