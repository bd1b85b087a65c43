# src/todo_companion/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading the save file), runs the
console REPL and saves the task list on the way out.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..cli.commands import save_if_dirty
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.state import AppState
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _shutdown(state: AppState) -> None:
    """Final save. Failures are logged, never raised."""
    warning = save_if_dirty(state)
    if warning:
        print(warning)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    log_file = setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s (log file %s)...", settings.app_name, log_file)

    state = create_initial_state(settings=settings)

    try:
        if settings.console_enabled:
            run_console_loop(state)
        else:
            logger.info("Console disabled; nothing to run.")
    finally:
        _shutdown(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
