# src/todo_companion/tasks/task_list.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import datetime

from ..core.errors import IllegalArgumentError, InvalidCommandError
from .task_models import Deadline, Event, Priority, Task, ToDo

logger = logging.getLogger(__name__)

EMPTY_LIST_MESSAGE = "Your to-do list is currently empty :o"


class TaskList:
    """
    Ordered, index-addressed task collection.

    Every public method returns the text to show the user. Indices are
    0-based here; the parser converts the user's 1-based numbers. Validation
    always happens before mutation, so a raised error leaves the list as it was.

    Notes:
    - cached_tasks holds the list emptied by the last clear(), or None.
      There is exactly one level of undo.
    - Startup loading goes through TrustedLoader (see trusted_loader()),
      never through the user-facing add/mark methods.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self.cached_tasks: list[Task] | None = None

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __getitem__(self, index: int) -> Task:
        return self._tasks[index]

    @property
    def has_cache(self) -> bool:
        return self.cached_tasks is not None

    # ---- helpers ----

    def _check_index(self, index: int) -> Task:
        if index < 0 or index >= len(self._tasks):
            raise IllegalArgumentError("Task index number is out of bounds :/")
        return self._tasks[index]

    def _append(self, task: Task) -> str:
        self._tasks.append(task)
        logger.debug("Added %s task (total=%d)", task.tag, len(self._tasks))
        return (
            f"Got it! I've added this task:\n{task}\n"
            f"Now you have {len(self._tasks)} task(s) in the list."
        )

    def save_rows(self) -> list[str]:
        return [t.to_save_row() for t in self._tasks]

    def trusted_loader(self) -> TrustedLoader:
        return TrustedLoader(self._tasks)

    # ---- queries ----

    def show_tasks(self) -> str:
        if not self._tasks:
            return EMPTY_LIST_MESSAGE
        lines = ["Here is your to-do list:"]
        for i, task in enumerate(self._tasks, start=1):
            lines.append(f"{i}. {task}")
        return "\n".join(lines)

    def find_tasks(self, keyword: str) -> str:
        matches = [
            (i, task) for i, task in enumerate(self._tasks, start=1) if keyword in task.description
        ]
        if not matches:
            return f"No tasks matching the keyword '{keyword}' were found :("
        lines = ["Here are the matching tasks in your list: :>"]
        for i, task in matches:
            lines.append(f"{i}. {task}")
        return "\n".join(lines)

    # ---- mutations ----

    def add_todo(self, description: str) -> str:
        return self._append(ToDo(description))

    def add_deadline(self, description: str, by: datetime) -> str:
        return self._append(Deadline(description, by))

    def add_event(self, description: str, start: datetime, end: datetime) -> str:
        return self._append(Event(description, start, end))

    def mark_done(self, index: int) -> str:
        task = self._check_index(index)
        task.mark_done()
        logger.debug("Marked task %d done", index)
        return f"The following task is marked done, sheeesh:\n{task}"

    def mark_not_done(self, index: int) -> str:
        task = self._check_index(index)
        task.mark_not_done()
        logger.debug("Marked task %d not done", index)
        return f"The following task is marked as not done yet:\n{task}"

    def change_priority(self, priority: Priority, index: int) -> str:
        task = self._check_index(index)
        task.change_priority(priority)
        logger.debug("Task %d priority -> %s", index, priority)
        return f"The following task's priority is set to '{task.priority}':\n{task}"

    def delete_task(self, index: int) -> str:
        if not self._tasks:
            raise InvalidCommandError("You cannot delete from an empty task list :/")
        task = self._check_index(index)
        del self._tasks[index]
        logger.debug("Deleted task %d (total=%d)", index, len(self._tasks))
        return (
            f"Alright, this task has been removed:\n{task}\n"
            f"Now you have {len(self._tasks)} task(s) in the list."
        )

    def clear(self) -> str:
        self.cached_tasks = self._tasks
        self._tasks = []
        logger.debug("Cleared task list (cached=%d)", len(self.cached_tasks))
        return "Task list has been reset :o"

    def undo_clear(self) -> str:
        if self.cached_tasks is None:
            return "There is no cleared task list to restore :o"
        self._tasks = self.cached_tasks
        self.cached_tasks = None
        logger.debug("Restored cleared task list (total=%d)", len(self._tasks))
        return "Cleared task list has been restored :o"


class TrustedLoader:
    """
    Write access used only while replaying the save file.

    Rows from disk are trusted: no confirmation text, no description checks.
    mark_done_on_start relies on the caller passing an index it just added.
    """

    def __init__(self, tasks: list[Task]) -> None:
        self._tasks = tasks

    def add_task(self, task: Task) -> None:
        self._tasks.append(task)

    def mark_done_on_start(self, index: int) -> None:
        self._tasks[index].mark_done()

    @property
    def size(self) -> int:
        return len(self._tasks)
