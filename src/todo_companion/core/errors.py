# src/todo_companion/core/errors.py

"""
Error kinds raised by the task engine, the parser and the save-file store.

All of them carry a user-facing message. The command registry catches
TaskError at the dispatch boundary and replies with str(exc), so raising one
of these never leaves the task list half-mutated.
"""

from __future__ import annotations


class TaskError(Exception):
    """Base class for recoverable, user-facing failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class IllegalArgumentError(TaskError):
    """Bad or missing index, non-numeric input, index out of bounds."""


class InvalidCommandError(TaskError):
    """Operation not permitted in the current state (e.g. delete from an empty list)."""


class TaskFormatError(TaskError):
    """User text does not match the expected command/date grammar."""

    def __init__(self, message: str, example: str | None = None) -> None:
        super().__init__(message)
        self.example = example

    def __str__(self) -> str:
        if not self.example:
            return self.message
        return f"{self.message}\n-> For example: {self.example}"


class StorageError(TaskError):
    """Save file could not be created, read, parsed or written."""
