# src/todo_companion/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_list import TaskList
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings are kept on the state so commands can read them.
    settings: object

    tasks: TaskList
    store: TaskRepo

    autosave: bool = True
    # Set when a command changed the list and it has not been saved yet.
    dirty: bool = False
