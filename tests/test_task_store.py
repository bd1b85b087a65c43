# tests/test_task_store.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from todo_companion.core.errors import StorageError
from todo_companion.tasks.task_list import TaskList
from todo_companion.tasks.task_models import Deadline, Event, Priority, ToDo
from todo_companion.tasks.task_store import TaskFileStore


def test_missing_file_is_created_empty(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "tasks.txt"
    store = TaskFileStore(path)
    tl = TaskList()

    assert store.load_into(tl) == 0
    assert path.exists()
    assert path.read_text("utf-8") == ""
    assert len(tl) == 0


def test_save_and_reload_round_trip(tmp_path: Path) -> None:
    store = TaskFileStore(tmp_path / "tasks.txt")
    tl = TaskList()
    tl.add_todo("buy milk")
    tl.add_deadline("finish quiz", datetime(2023, 10, 3, 18, 30))
    tl.add_event("dinner", datetime(2023, 10, 3, 0, 15), datetime(2023, 10, 4, 12, 45))
    tl.mark_done(1)
    tl.change_priority(Priority.HIGH, 2)

    store.save(tl)
    assert (tmp_path / "tasks.txt").read_text("utf-8").splitlines() == [
        "T | 0 | buy milk",
        "D | 1 | finish quiz | 03 Oct 2023 6:30 PM",
        "E | 0 | dinner | 03 Oct 2023 12:15 AM | 04 Oct 2023 12:45 PM",
    ]

    reloaded = TaskList()
    assert store.load_into(reloaded) == 3
    assert [type(t) for t in reloaded] == [ToDo, Deadline, Event]
    assert [t.description for t in reloaded] == ["buy milk", "finish quiz", "dinner"]
    assert [t.is_done for t in reloaded] == [False, True, False]
    # priority is not persisted
    assert all(t.priority is Priority.MEDIUM for t in reloaded)
    assert reloaded[1].by == datetime(2023, 10, 3, 18, 30)
    assert reloaded[2].start == datetime(2023, 10, 3, 0, 15)
    assert reloaded[2].end == datetime(2023, 10, 4, 12, 45)


def test_save_empty_list_truncates(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text("T | 0 | old\n", "utf-8")
    TaskFileStore(path).save(TaskList())
    assert path.read_text("utf-8") == ""
    assert not (tmp_path / "tasks.txt.tmp").exists()


def test_legacy_done_marker_loads_as_done_and_is_rewritten(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text("T | X | old style\n\nT | 0 | other\n", "utf-8")
    store = TaskFileStore(path)
    tl = TaskList()

    assert store.load_into(tl) == 2
    assert tl[0].is_done

    store.save(tl)
    assert path.read_text("utf-8") == "T | 1 | old style\nT | 0 | other\n"


@pytest.mark.parametrize(
    "bad_row",
    [
        "T | 0",
        "D | 0 | quiz",
        "E | 0 | dinner | 03 Oct 2023 5:30 PM",
        "Q | 0 | what",
        "T | maybe | x",
        "D | 0 | quiz | 2023-10-03",
    ],
)
def test_malformed_row_fails_whole_load_after_partial_rows(tmp_path: Path, bad_row: str) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text(f"T | 1 | first\n{bad_row}\nT | 0 | never read\n", "utf-8")
    tl = TaskList()

    with pytest.raises(StorageError) as exc:
        TaskFileStore(path).load_into(tl)
    assert "line 2" in str(exc.value)
    # no atomicity: the row before the bad one is already in the list
    assert [t.description for t in tl] == ["first"]


def test_non_utf8_file_is_a_storage_error_naming_the_line(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_bytes(b"T | 0 | tea\nT | 0 | caf\xe9\n")
    tl = TaskList()

    with pytest.raises(StorageError) as exc:
        TaskFileStore(path).load_into(tl)
    assert "line 2 is not valid UTF-8" in str(exc.value)
    assert [t.description for t in tl] == ["tea"]
