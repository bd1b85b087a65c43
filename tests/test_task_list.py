# tests/test_task_list.py

from __future__ import annotations

from datetime import datetime

import pytest

from todo_companion.core.errors import IllegalArgumentError, InvalidCommandError
from todo_companion.tasks.task_list import EMPTY_LIST_MESSAGE, TaskList
from todo_companion.tasks.task_models import Deadline, Event, Priority, ToDo


def _snapshot(tasks: TaskList) -> list[tuple]:
    return [(t.to_save_row(), t.is_done, t.priority) for t in tasks]


@pytest.fixture()
def filled() -> TaskList:
    tl = TaskList()
    tl.add_todo("buy milk")
    tl.add_deadline("finish quiz", datetime(2023, 10, 3, 18, 30))
    tl.add_event("dinner", datetime(2023, 10, 3, 17, 30), datetime(2023, 10, 3, 22, 15))
    return tl


def test_add_returns_confirmation_with_count() -> None:
    tl = TaskList()
    reply = tl.add_todo("buy milk")
    assert "Got it! I've added this task:" in reply
    assert "[T][ ][MEDIUM] buy milk" in reply
    assert "Now you have 1 task(s) in the list." in reply
    assert len(tl) == 1
    assert tl[0].priority is Priority.MEDIUM


def test_show_tasks_numbers_from_one(filled: TaskList) -> None:
    out = filled.show_tasks()
    assert out.splitlines()[0] == "Here is your to-do list:"
    assert "1. [T][ ][MEDIUM] buy milk" in out
    assert "3. [E]" in out
    assert TaskList().show_tasks() == EMPTY_LIST_MESSAGE


def test_mark_then_unmark_restores_state(filled: TaskList) -> None:
    for i in range(len(filled)):
        before = filled[i].is_done
        filled.mark_done(i)
        assert filled[i].is_done
        filled.mark_not_done(i)
        assert filled[i].is_done is False
        if before:
            filled.mark_done(i)
        assert filled[i].is_done == before


@pytest.mark.parametrize("index", [3, 10, -1])
def test_index_checks_cover_full_range(filled: TaskList, index: int) -> None:
    before = _snapshot(filled)
    with pytest.raises(IllegalArgumentError):
        filled.mark_done(index)
    with pytest.raises(IllegalArgumentError):
        filled.mark_not_done(index)
    with pytest.raises(IllegalArgumentError):
        filled.change_priority(Priority.HIGH, index)
    with pytest.raises(IllegalArgumentError):
        filled.delete_task(index)
    assert _snapshot(filled) == before


def test_delete_from_empty_list_is_invalid_command() -> None:
    tl = TaskList()
    with pytest.raises(InvalidCommandError):
        tl.delete_task(0)
    assert len(tl) == 0


def test_delete_removes_and_reports(filled: TaskList) -> None:
    reply = filled.delete_task(0)
    assert "this task has been removed" in reply
    assert "buy milk" in reply
    assert "Now you have 2 task(s)" in reply
    assert [t.tag for t in filled] == ["D", "E"]


def test_change_priority(filled: TaskList) -> None:
    reply = filled.change_priority(Priority.LOW, 1)
    assert "priority is set to 'LOW'" in reply
    assert filled[1].priority is Priority.LOW
    assert filled[0].priority is Priority.MEDIUM


def test_find_tasks(filled: TaskList) -> None:
    out = filled.find_tasks("quiz")
    assert "Here are the matching tasks" in out
    assert "2. [D][ ][MEDIUM] finish quiz" in out
    assert "milk" not in out
    assert "No tasks matching the keyword 'QUIZ'" in filled.find_tasks("QUIZ")
    assert "No tasks matching the keyword 'milk'" in TaskList().find_tasks("milk")


def test_clear_then_undo_restores_exact_sequence(filled: TaskList) -> None:
    filled.mark_done(2)
    filled.change_priority(Priority.HIGH, 0)
    before = _snapshot(filled)

    filled.clear()
    assert len(filled) == 0
    assert filled.has_cache

    filled.undo_clear()
    assert _snapshot(filled) == before
    assert not filled.has_cache

    # second undo is a no-op
    reply = filled.undo_clear()
    assert "no cleared task list" in reply
    assert _snapshot(filled) == before


def test_clear_overwrites_previous_cache(filled: TaskList) -> None:
    filled.clear()
    filled.add_todo("fresh")
    filled.clear()
    filled.undo_clear()
    assert [t.description for t in filled] == ["fresh"]


def test_trusted_loader_bypasses_confirmation() -> None:
    tl = TaskList()
    loader = tl.trusted_loader()
    loader.add_task(ToDo("a"))
    loader.add_task(Deadline("b", datetime(2023, 1, 1, 9, 0)))
    loader.add_task(Event("c", datetime(2023, 1, 1, 9, 0), datetime(2023, 1, 1, 10, 0)))
    loader.mark_done_on_start(1)
    assert loader.size == 3
    assert [t.is_done for t in tl] == [False, True, False]


def test_example_scenario() -> None:
    tl = TaskList()
    tl.add_todo("buy milk")
    assert len(tl) == 1 and not tl[0].is_done
    assert "[T][X]" in tl.mark_done(0)
    tl.delete_task(0)
    with pytest.raises(InvalidCommandError):
        tl.delete_task(0)
    assert "No tasks matching" in tl.find_tasks("milk")
