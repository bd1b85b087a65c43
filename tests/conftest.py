# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_companion.core.state import AppState
from todo_companion.tasks.task_list import TaskList
from todo_companion.tasks.task_store import TaskFileStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any .env file.
    """
    return SimpleNamespace(
        app_name="ekud",
        log_level="INFO",
        data_dir=tmp_path / "data",
        save_path=tmp_path / "data" / "tasks.txt",
        autosave=True,
        console_enabled=True,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskFileStore:
    return TaskFileStore(settings.save_path)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskFileStore) -> AppState:
    """
    AppState with an empty list and a real flat-file store.

    The store is real on purpose: autosave writing the file is part of what
    the command tests check.
    """
    return AppState(settings=settings, tasks=TaskList(), store=store, autosave=True)
