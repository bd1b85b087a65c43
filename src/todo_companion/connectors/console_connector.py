# src/todo_companion/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

HORIZONTAL_LINE = "-~-~-~-~-~-~-~-~--~-~-~-~-~-~-~-~-"
EXIT_WORDS = ("bye", "exit", "quit")


def echo(message: str, out: Callable[[str], None] = print) -> None:
    """Print a reply between two horizontal lines."""
    out(f"{HORIZONTAL_LINE}\n{message.rstrip()}\n{HORIZONTAL_LINE}")


def greeting(state: AppState) -> str:
    app_name = str(getattr(state.settings, "app_name", "ekud"))
    return (
        f"Hello! I'm {app_name}.\n"
        f"You have {len(state.tasks)} task(s) saved. What can I do for you?\n"
        "Type 'help' for commands, 'bye' to quit."
    )


def dispatch(state: AppState, line: str) -> str | None:
    """Run one line through the command registry, never raising."""
    try:
        return command_registry.handle(state, line)
    except Exception:
        logger.exception("Command handler crashed.")
        return "Internal error while handling a command."


def run_console_loop(
    state: AppState,
    *,
    read: Callable[[str], str] = input,
    out: Callable[[str], None] = print,
) -> None:
    logger.info("Console connector started (save file=%s).", state.store.path)
    echo(greeting(state), out)

    while True:
        try:
            user_input = read("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            out("")
            break

        if not user_input:
            continue

        if user_input.lower() in EXIT_WORDS:
            logger.info("Console exit command received.")
            echo("Bye. Hope to see you again soon!", out)
            break

        response = dispatch(state, user_input)
        if response is not None:
            logger.debug("Handled %r (%d chars)", user_input.split()[0], len(response))
            echo(response, out)

    logger.info("Console connector finished.")
