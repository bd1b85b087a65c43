# src/todo_companion/tasks/task_store.py

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..core.errors import StorageError
from .task_list import TaskList, TrustedLoader
from .task_models import (
    DONE_FLAG,
    FIELD_SEP,
    LEGACY_DONE_FLAG,
    NOT_DONE_FLAG,
    Deadline,
    Event,
    Task,
    ToDo,
    parse_saved_datetime,
)

logger = logging.getLogger(__name__)

# tag -> number of " | " separated fields in a row
_FIELD_COUNTS = {ToDo.tag: 3, Deadline.tag: 4, Event.tag: 5}


class TaskFileStore:
    """
    Flat-file task store.

    Format: one pipe-delimited save row per line, in list order, e.g.

        T | 0 | buy milk
        D | 1 | finish quiz | 03 Oct 2023 6:30 PM
        E | 0 | dinner | 03 Oct 2023 5:30 PM | 03 Oct 2023 10:15 PM

    Loading is not atomic: rows before a bad line stay in the list.
    Saving writes a temp file next to the target and swaps it in.
    """

    def __init__(self, path: str | Path = "tasks.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- row decoding ----

    @staticmethod
    def _row_to_task(fields: list[str], line_no: int) -> tuple[Task, bool]:
        tag = fields[0].strip()
        expected = _FIELD_COUNTS.get(tag)
        if expected is None:
            raise StorageError(f"Error with parsing saved tasks file: unknown task type '{tag}' on line {line_no}")
        if len(fields) != expected:
            raise StorageError(
                f"Error with parsing saved tasks file: expected {expected} fields "
                f"on line {line_no}, got {len(fields)}"
            )

        flag = fields[1].strip()
        if flag in (DONE_FLAG, LEGACY_DONE_FLAG):
            is_done = True
        elif flag == NOT_DONE_FLAG:
            is_done = False
        else:
            raise StorageError(f"Error with parsing saved tasks file: bad done flag '{flag}' on line {line_no}")

        description = fields[2]
        try:
            if tag == ToDo.tag:
                task: Task = ToDo(description)
            elif tag == Deadline.tag:
                task = Deadline(description, parse_saved_datetime(fields[3]))
            else:
                task = Event(
                    description,
                    parse_saved_datetime(fields[3]),
                    parse_saved_datetime(fields[4]),
                )
        except ValueError as e:
            raise StorageError(f"Error with parsing saved tasks file: bad date on line {line_no}") from e
        return task, is_done

    # ---- public API ----

    def load_into(self, task_list: TaskList) -> int:
        """
        Replay the save file into task_list. Returns the number of rows loaded.
        A missing file is created empty.
        """
        if not self._path.exists():
            logger.info("Creating task file %s", self._path)
            try:
                self._path.parent.mkdir(parents=True, exist_ok=True)
                self._path.touch()
            except OSError as e:
                raise StorageError(f"Error with creating task file: {e}") from e
            return 0

        loader: TrustedLoader = task_list.trusted_loader()
        loaded = 0
        try:
            # Binary mode: decode one line at a time so a bad byte names its line.
            with self._path.open("rb") as f:
                for line_no, raw in enumerate(f, start=1):
                    try:
                        line = raw.decode("utf-8").rstrip("\r\n")
                    except UnicodeDecodeError as e:
                        raise StorageError(
                            f"Error with parsing saved tasks file: line {line_no} is not valid UTF-8"
                        ) from e
                    if not line.strip():
                        continue
                    task, is_done = self._row_to_task(line.split(FIELD_SEP), line_no)
                    loader.add_task(task)
                    if is_done:
                        loader.mark_done_on_start(loader.size - 1)
                    loaded += 1
        except OSError as e:
            raise StorageError(f"Error with reading task file: {e}") from e

        if loaded:
            logger.info("Loaded %d saved task(s) from %s", loaded, self._path)
        else:
            logger.info("No saved tasks found in %s", self._path)
        return loaded

    def save(self, task_list: TaskList) -> None:
        rows = task_list.save_rows()
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8", newline="\n") as f:
                for row in rows:
                    f.write(row + "\n")
            os.replace(tmp, self._path)
        except OSError as e:
            raise StorageError(f"Error with saving tasks: {e}") from e
        logger.info("Saved %d task(s) to %s", len(rows), self._path)
