# tests/fakes.py

from __future__ import annotations

from pathlib import Path

from todo_companion.core.errors import StorageError
from todo_companion.tasks.task_list import TaskList


class FakeTaskRepo:
    """
    In-memory TaskRepo.

    - Captures saved rows for assertions
    - Replays preset rows through the trusted loader on load
    """

    def __init__(self, preset: list | None = None) -> None:
        self.preset = list(preset or [])
        self.saved: list[list[str]] = []

    @property
    def path(self) -> Path:
        return Path("<memory>")

    def load_into(self, task_list: TaskList) -> int:
        loader = task_list.trusted_loader()
        for task in self.preset:
            loader.add_task(task)
        return len(self.preset)

    def save(self, task_list: TaskList) -> None:
        self.saved.append(task_list.save_rows())


class BrokenTaskRepo(FakeTaskRepo):
    """Loads some rows, then fails; saving always fails."""

    def load_into(self, task_list: TaskList) -> int:
        super().load_into(task_list)
        raise StorageError("Error with parsing saved tasks file")

    def save(self, task_list: TaskList) -> None:
        raise StorageError("Error with saving tasks: disk full")
