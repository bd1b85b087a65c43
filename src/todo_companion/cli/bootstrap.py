# src/todo_companion/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the flat-file store and the task list into AppState,
- replays the save file into the list.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..config import get_settings
from ..core.errors import StorageError
from ..core.ports import TaskRepo
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskFileStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.save_path.parent.mkdir(parents=True, exist_ok=True)


def _set_aside(path: Path) -> Path | None:
    """Move an unreadable save file to '<name>.bad' so the next save can't overwrite it."""
    if not path.is_file():
        return None
    bad = path.with_suffix(path.suffix + ".bad")
    try:
        os.replace(path, bad)
    except OSError:
        logger.exception("Could not move unreadable save file %s aside", path)
        return None
    return bad


def load_task_list(store: TaskRepo) -> TaskList:
    """
    Load the saved tasks. A broken save file must not stop the app: the
    error is logged, the file is kept as '<name>.bad' and the session starts
    from an empty list.
    """
    tasks = TaskList()
    try:
        store.load_into(tasks)
    except StorageError as e:
        logger.error("Could not load saved tasks from %s: %s", store.path, e.message)
        bad = _set_aside(Path(store.path))
        if bad is not None:
            logger.warning("Kept the unreadable save file as %s", bad)
        return TaskList()
    return tasks


def create_initial_state(*, settings=None, store: TaskRepo | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the store) injectable makes the app easier to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if store is None:
        store = TaskFileStore(settings.save_path)

    return AppState(
        settings=settings,
        tasks=load_task_list(store),
        store=store,
        autosave=bool(getattr(settings, "autosave", True)),
    )
