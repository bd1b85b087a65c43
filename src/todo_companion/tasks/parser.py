# src/todo_companion/tasks/parser.py

"""
Command text parsing.

Turns one raw user line into a keyword plus typed fields. Nothing here touches
the task list; callers pass the current list size where an index needs a
bounds check.
"""

from __future__ import annotations

import re
from datetime import datetime

from ..core.errors import IllegalArgumentError, TaskFormatError
from .task_models import Priority

# Save rows are split on " | "; a pipe anywhere in a description breaks the row.
FORBIDDEN_DESCRIPTION_CHAR = "|"

BY_DELIM = " /by "
FROM_DELIM = " /from "
TO_DELIM = " /to "

DEFAULT_TIME = "2359"
INPUT_DATETIME_FORMAT = "%d-%m-%Y %H%M"
_DATE_RE = re.compile(r"^[0-9]{2}-[0-9]{2}-[0-9]{4}$")
_TIME_RE = re.compile(r"^[0-9]{4}$")
_INDEX_RE = re.compile(r"^[+-]?[0-9]+$")

DEADLINE_EXAMPLE = "deadline finish quiz /by 03-10-2023 1830"
EVENT_EXAMPLE = "event company dinner /from 03-10-2023 1730 /to 03-10-2023 2215"
PRIORITY_EXAMPLE = "priority high 2"


def split_command(line: str) -> tuple[str, str]:
    """
    Split "deadline quiz /by 03-10-2023" into ("deadline", "quiz /by 03-10-2023").
    The keyword is lower-cased; the payload keeps its case.
    """
    parts = (line or "").strip().split(maxsplit=1)
    if not parts:
        return "", ""
    keyword = parts[0].lower()
    payload = parts[1].strip() if len(parts) > 1 else ""
    return keyword, payload


def parse_datetime(text: str) -> datetime:
    """
    Parse "dd-MM-yyyy[ HHmm]". A missing time means 23:59.

    "03-10-2023 1830" -> 2023-10-03 18:30
    "03-10-2023"      -> 2023-10-03 23:59
    """
    parts = (text or "").split()
    if not parts or len(parts) > 2:
        raise TaskFormatError(f"Could not read the date '{text.strip()}' (expected dd-MM-yyyy [HHmm])")

    date_part = parts[0]
    time_part = parts[1] if len(parts) == 2 else DEFAULT_TIME
    if not _DATE_RE.match(date_part) or not _TIME_RE.match(time_part):
        raise TaskFormatError(f"Could not read the date '{text.strip()}' (expected dd-MM-yyyy [HHmm])")

    try:
        return datetime.strptime(f"{date_part} {time_part}", INPUT_DATETIME_FORMAT)
    except ValueError as e:
        raise TaskFormatError(f"'{text.strip()}' is not a valid date/time") from e


def _check_description(description: str, example: str | None = None) -> str:
    if FORBIDDEN_DESCRIPTION_CHAR in description:
        raise TaskFormatError(
            f"Descriptions can't contain '{FORBIDDEN_DESCRIPTION_CHAR}' :(", example
        )
    return description


def parse_todo(payload: str) -> str:
    description = (payload or "").strip()
    if not description:
        raise IllegalArgumentError("Todo task shouldn't be empty :(")
    return _check_description(description)


def parse_deadline(payload: str) -> tuple[str, datetime]:
    """'<description> /by <date>' -> (description, due)."""
    # Delimiters include their leading space, so "deadline /by x" has none.
    text = f" {payload or ''}"
    if BY_DELIM not in text:
        raise TaskFormatError("Deadline formatted wrongly, '/by' is missing", DEADLINE_EXAMPLE)

    description, raw_due = text.split(BY_DELIM, 1)
    description = description.strip()
    raw_due = raw_due.strip()
    if not description or not raw_due:
        raise TaskFormatError("Description/deadline shouldn't be empty :(", DEADLINE_EXAMPLE)
    _check_description(description, DEADLINE_EXAMPLE)

    try:
        due = parse_datetime(raw_due)
    except TaskFormatError as e:
        raise TaskFormatError(f"Deadline formatted wrongly: {e.message}", DEADLINE_EXAMPLE) from e
    return description, due


def parse_event(payload: str) -> tuple[str, datetime, datetime]:
    """'<description> /from <date> /to <date>' -> (description, start, end)."""
    text = f" {payload or ''}"
    if FROM_DELIM not in text:
        raise TaskFormatError("Event formatted wrongly, '/from' is missing", EVENT_EXAMPLE)

    description, timings = text.split(FROM_DELIM, 1)
    timings = f" {timings}"
    if TO_DELIM not in timings:
        raise TaskFormatError("Event formatted wrongly, '/to' is missing", EVENT_EXAMPLE)

    raw_start, raw_end = timings.split(TO_DELIM, 1)
    description = description.strip()
    raw_start = raw_start.strip()
    raw_end = raw_end.strip()
    if not description or not raw_start or not raw_end:
        raise TaskFormatError("Description/start/end shouldn't be empty :(", EVENT_EXAMPLE)
    _check_description(description, EVENT_EXAMPLE)

    try:
        start = parse_datetime(raw_start)
        end = parse_datetime(raw_end)
    except TaskFormatError as e:
        raise TaskFormatError(f"Event formatted wrongly: {e.message}", EVENT_EXAMPLE) from e
    return description, start, end


def parse_index(text: str, size: int) -> int:
    """1-based user index -> 0-based offset within [0, size)."""
    raw = (text or "").strip()
    # int() alone would also take "1_0" and non-ASCII digits.
    if not _INDEX_RE.match(raw):
        raise IllegalArgumentError("Please input a valid index number :o")

    index = int(raw) - 1
    if index < 0 or index >= size:
        raise IllegalArgumentError("Task index number is out of bounds :/")
    return index


def parse_priority(payload: str, size: int) -> tuple[Priority, int]:
    """'<level> <n>' -> (priority, 0-based index)."""
    parts = (payload or "").split()
    if len(parts) != 2:
        raise TaskFormatError("Priority formatted wrongly", PRIORITY_EXAMPLE)

    priority = Priority.from_text(parts[0])
    if priority is None:
        raise TaskFormatError(
            f"Unknown priority '{parts[0]}' (use low, medium or high)", PRIORITY_EXAMPLE
        )
    return priority, parse_index(parts[1], size)
