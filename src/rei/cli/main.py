# src/rei/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState from the configured task file, then runs
the console loop until `bye` or EOF.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..errors import ReiError
from ..logging_setup import level_from_name, setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    console_level = level_from_name(settings.log_level)
    setup_logging(
        log_dir=settings.log_dir if settings.log_to_file else None,
        console_level=console_level,
    )

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
    except ReiError as e:
        logger.error("Startup failed: %s", e)
        print(e, file=sys.stderr)
        sys.exit(1)

    run_console_loop(state)
    logger.info("Bye.")


if __name__ == "__main__":
    main()
