# src/todo_keeper/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState with the console collaborators, then
runs the console REPL until /exit or EOF.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import (
    ConsoleConfetti,
    ConsoleConfirm,
    ConsoleRenderer,
    run_console_loop,
)
from ..core.state import StartupError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    # Console is the UI: only warnings+ go to stderr unless LOG_LEVEL asks for more.
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    requested = getattr(logging, level_name, logging.INFO)
    console_level = requested if requested == logging.DEBUG else max(requested, logging.WARNING)

    log_dir = getattr(settings, "data_dir", ".local/todo")
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s...", getattr(settings, "app_name", "todo"))

    listeners = [ConsoleConfetti()] if getattr(settings, "celebrate", True) else []
    try:
        state = create_initial_state(
            renderer=ConsoleRenderer(),
            confirm=ConsoleConfirm(),
            settings=settings,
            listeners=listeners,
        )
    except StartupError as e:
        logger.critical("App failed to start: %s", e)
        print(f"App failed to load: {e}", file=sys.stderr)
        return 1

    try:
        run_console_loop(state)
    finally:
        logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
