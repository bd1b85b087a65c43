# src/todo_companion/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.errors import StorageError, TaskError
from ..core.state import AppState
from ..tasks import parser

CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _Command:
    handler: CommandHandler
    mutates: bool


class CommandRegistry:
    """Keyword command registry used by connectors (list, todo, mark, ...)."""

    def __init__(self) -> None:
        self._commands: dict[str, _Command] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        mutates: bool = False,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        cmd = _Command(handler=handler, mutates=mutates)
        self._commands[key] = cmd
        self._help[key] = help_text
        for alias in aliases:
            self._commands[alias.lower()] = cmd

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a line like "deadline quiz /by 03-10-2023".
        Returns a reply string, or None for a blank line.

        TaskError is turned into its user-facing message here; the task list
        is unchanged in that case.
        """
        keyword, payload = parser.split_command(line)
        if not keyword:
            return None

        cmd = self._commands.get(keyword)
        if cmd is None:
            return f"Unknown command: {keyword}. Use 'help' to list available commands."

        try:
            reply = cmd.handler(state, payload)
        except TaskError as e:
            logger.debug("Command %r rejected: %s", keyword, e.message)
            return str(e)

        if cmd.mutates:
            state.dirty = True
            if state.autosave:
                warning = save_if_dirty(state)
                if warning:
                    reply = f"{reply}\n{warning}"
        return reply

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines)


def save_if_dirty(state: AppState) -> str | None:
    """Persist the list if it changed. Returns a warning for the user on failure."""
    if not state.dirty:
        return None
    try:
        state.store.save(state.tasks)
    except StorageError as e:
        logger.warning("Saving tasks to %s failed: %s", state.store.path, e.message)
        return f"(warning) {e.message}"
    state.dirty = False
    return None


registry = CommandRegistry()


def cmd_help(state: AppState, payload: str) -> str:
    return registry.build_help()


def cmd_list(state: AppState, payload: str) -> str:
    return state.tasks.show_tasks()


def cmd_todo(state: AppState, payload: str) -> str:
    return state.tasks.add_todo(parser.parse_todo(payload))


def cmd_deadline(state: AppState, payload: str) -> str:
    description, by = parser.parse_deadline(payload)
    return state.tasks.add_deadline(description, by)


def cmd_event(state: AppState, payload: str) -> str:
    description, start, end = parser.parse_event(payload)
    return state.tasks.add_event(description, start, end)


def cmd_mark(state: AppState, payload: str) -> str:
    return state.tasks.mark_done(parser.parse_index(payload, len(state.tasks)))


def cmd_unmark(state: AppState, payload: str) -> str:
    return state.tasks.mark_not_done(parser.parse_index(payload, len(state.tasks)))


def cmd_delete(state: AppState, payload: str) -> str:
    """
    delete <n>

    An empty list is reported as an invalid command before the index is read,
    so "delete 1" on an empty list is not an out-of-bounds error.
    """
    if len(state.tasks) == 0:
        return state.tasks.delete_task(0)
    return state.tasks.delete_task(parser.parse_index(payload, len(state.tasks)))


def cmd_find(state: AppState, payload: str) -> str:
    if not payload:
        return "Usage: find <keyword>"
    return state.tasks.find_tasks(payload)


def cmd_priority(state: AppState, payload: str) -> str:
    priority, index = parser.parse_priority(payload, len(state.tasks))
    return state.tasks.change_priority(priority, index)


def cmd_clear(state: AppState, payload: str) -> str:
    return state.tasks.clear()


def cmd_undo(state: AppState, payload: str) -> str:
    return state.tasks.undo_clear()


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show all tasks.", aliases=["ls"])
registry.register(
    "todo", cmd_todo, help_text="Add a to-do: todo <description>.", aliases=["add"], mutates=True
)
registry.register(
    "deadline",
    cmd_deadline,
    help_text="Add a deadline: deadline <description> /by <dd-MM-yyyy [HHmm]>.",
    mutates=True,
)
registry.register(
    "event",
    cmd_event,
    help_text="Add an event: event <description> /from <dd-MM-yyyy [HHmm]> /to <dd-MM-yyyy [HHmm]>.",
    mutates=True,
)
registry.register("mark", cmd_mark, help_text="Mark task <n> as done.", mutates=True)
registry.register("unmark", cmd_unmark, help_text="Mark task <n> as not done.", mutates=True)
registry.register("delete", cmd_delete, help_text="Delete task <n>.", mutates=True)
registry.register("find", cmd_find, help_text="Find tasks whose description contains <keyword>.")
registry.register(
    "priority",
    cmd_priority,
    help_text="Set priority: priority <low|medium|high> <n>.",
    mutates=True,
)
registry.register("clear", cmd_clear, help_text="Empty the list (undo restores it).", mutates=True)
registry.register("undo", cmd_undo, help_text="Restore the list emptied by the last clear.", mutates=True)
