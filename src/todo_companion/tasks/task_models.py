# src/todo_companion/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import ClassVar

# Save rows: "T | 1 | buy milk", "D | 0 | quiz | 03 Oct 2023 6:30 PM", ...
FIELD_SEP = " | "
DONE_FLAG = "1"
NOT_DONE_FLAG = "0"
# Written by the older console build; read as done, never written.
LEGACY_DONE_FLAG = "X"

SAVED_DATETIME_FORMAT = "%d %b %Y %I:%M %p"


class Priority(StrEnum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    @classmethod
    def from_text(cls, raw: str) -> Priority | None:
        """Case-insensitive lookup; accepts full names and single letters."""
        key = (raw or "").strip().upper()
        if not key:
            return None
        for p in cls:
            if p.value == key or p.value[0] == key:
                return p
        return None


def format_saved_datetime(dt: datetime) -> str:
    """
    Render a timestamp as "dd MMM yyyy h:mm a", e.g. "03 Oct 2023 6:30 PM".

    The hour is not zero padded; strftime has no portable flag for that, so
    it is built by hand.
    """
    hour = dt.hour % 12 or 12
    return f"{dt:%d %b %Y} {hour}:{dt:%M %p}"


def parse_saved_datetime(raw: str) -> datetime:
    """Inverse of format_saved_datetime. Raises ValueError on mismatch."""
    return datetime.strptime(raw.strip(), SAVED_DATETIME_FORMAT)


def _flag(is_done: bool) -> str:
    return DONE_FLAG if is_done else NOT_DONE_FLAG


def _status_prefix(tag: str, is_done: bool, priority: Priority) -> str:
    mark = "X" if is_done else " "
    return f"[{tag}][{mark}][{priority.value}]"


@dataclass(slots=True)
class ToDo:
    tag: ClassVar[str] = "T"

    description: str
    is_done: bool = False
    priority: Priority = Priority.MEDIUM

    def mark_done(self) -> None:
        self.is_done = True

    def mark_not_done(self) -> None:
        self.is_done = False

    def change_priority(self, priority: Priority) -> None:
        self.priority = priority

    def describe(self) -> str:
        return f"{_status_prefix(self.tag, self.is_done, self.priority)} {self.description}"

    def to_save_row(self) -> str:
        return FIELD_SEP.join([self.tag, _flag(self.is_done), self.description])

    def __str__(self) -> str:
        return self.describe()


@dataclass(slots=True)
class Deadline:
    tag: ClassVar[str] = "D"

    description: str
    by: datetime
    is_done: bool = False
    priority: Priority = Priority.MEDIUM

    def mark_done(self) -> None:
        self.is_done = True

    def mark_not_done(self) -> None:
        self.is_done = False

    def change_priority(self, priority: Priority) -> None:
        self.priority = priority

    def describe(self) -> str:
        prefix = _status_prefix(self.tag, self.is_done, self.priority)
        return f"{prefix} {self.description} (by: {format_saved_datetime(self.by)})"

    def to_save_row(self) -> str:
        return FIELD_SEP.join(
            [self.tag, _flag(self.is_done), self.description, format_saved_datetime(self.by)]
        )

    def __str__(self) -> str:
        return self.describe()


@dataclass(slots=True)
class Event:
    """Task spanning [start, end]. end >= start is assumed, not checked."""

    tag: ClassVar[str] = "E"

    description: str
    start: datetime
    end: datetime
    is_done: bool = False
    priority: Priority = Priority.MEDIUM

    def mark_done(self) -> None:
        self.is_done = True

    def mark_not_done(self) -> None:
        self.is_done = False

    def change_priority(self, priority: Priority) -> None:
        self.priority = priority

    def describe(self) -> str:
        prefix = _status_prefix(self.tag, self.is_done, self.priority)
        return (
            f"{prefix} {self.description} "
            f"(from: {format_saved_datetime(self.start)} to: {format_saved_datetime(self.end)})"
        )

    def to_save_row(self) -> str:
        return FIELD_SEP.join(
            [
                self.tag,
                _flag(self.is_done),
                self.description,
                format_saved_datetime(self.start),
                format_saved_datetime(self.end),
            ]
        )

    def __str__(self) -> str:
        return self.describe()


Task = ToDo | Deadline | Event
