# src/todo_companion/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the host.

The commands and the console depend on Protocols instead of the concrete
flat-file store, so tests can swap in an in-memory repo.
"""

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_list import TaskList


class TaskRepo(Protocol):
    """Where a TaskList is loaded from at startup and saved to afterwards."""

    @property
    def path(self) -> Path: ...

    def load_into(self, task_list: TaskList) -> int: ...
    def save(self, task_list: TaskList) -> None: ...
