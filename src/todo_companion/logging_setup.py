# src/todo_companion/logging_setup.py

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from pathlib import Path

APP_LOGGER = "todo_companion"
LOG_FILE_NAME = "todo.log"
LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers that talk on every command; below WARNING they only go to the file.
QUIET_LOGGERS = ("todo_companion.tasks",)

_OWNED_ATTR = "_todo_companion_handler"


class ConsoleFilter(logging.Filter):
    """
    Decide what reaches the chat console.

    App records pass, except loggers under a quiet prefix, which need WARNING.
    Anything else (third-party, py.warnings) needs ERROR.
    """

    def __init__(self, quiet: Iterable[str] = QUIET_LOGGERS) -> None:
        super().__init__()
        self._quiet = tuple(f"{name}." for name in quiet)

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name != APP_LOGGER and not name.startswith(APP_LOGGER + "."):
            return record.levelno >= logging.ERROR
        if name.startswith(self._quiet):
            return record.levelno >= logging.WARNING
        return True


def _own(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _OWNED_ATTR, True)
    return handler


def setup_logging(
    *,
    log_dir: str | Path = ".local/todo",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
    quiet: Iterable[str] = QUIET_LOGGERS,
) -> Path:
    """
    Attach a filtered stderr handler and a full DEBUG file handler to the root
    logger. Returns the log file path.

    Calling it again replaces the handlers it added earlier; handlers
    installed by anything else are left alone.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in [h for h in root.handlers if getattr(h, _OWNED_ATTR, False)]:
        root.removeHandler(h)
        h.close()

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console = _own(logging.StreamHandler(sys.stderr))
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(ConsoleFilter(quiet))

    file_handler = _own(logging.FileHandler(str(log_file), encoding="utf-8"))
    file_handler.setLevel(file_level)
    file_handler.setFormatter(fmt)

    root.addHandler(console)
    root.addHandler(file_handler)
    logging.captureWarnings(True)
    return log_file
