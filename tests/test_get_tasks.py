# tests/test_get_tasks.py

from __future__ import annotations

from sqlmodel import Session

from task_api.handlers import get_all_tasks, get_tasks, toggle_task_completion
from task_api.schemas import FilterTasksInput, TaskIdInput


def _ids(tasks) -> set[int]:
    return {task.id for task in tasks}


def test_empty_store_returns_empty_list(session: Session) -> None:
    assert get_tasks(session) == []
    assert get_tasks(session, FilterTasksInput()) == []
    assert get_all_tasks(session) == []


def test_filters_are_conjunctive(session: Session, make_task) -> None:
    low = make_task(title="low", priority="low")
    high_open = make_task(title="high open", priority="high")
    high_done = make_task(title="high done", priority="high")
    medium_done = make_task(title="medium done", priority="medium")
    for task in (high_done, medium_done):
        toggle_task_completion(session, TaskIdInput(id=task.id))

    everything = _ids([low, high_open, high_done, medium_done])
    assert _ids(get_tasks(session)) == everything
    assert _ids(get_all_tasks(session)) == everything

    completed = get_tasks(session, FilterTasksInput(is_completed=True))
    assert _ids(completed) == {high_done.id, medium_done.id}
    assert all(task.is_completed for task in completed)

    pending = get_tasks(session, FilterTasksInput(is_completed=False))
    assert _ids(pending) == {low.id, high_open.id}

    high = get_tasks(session, FilterTasksInput(priority="high"))
    assert _ids(high) == {high_open.id, high_done.id}

    both = get_tasks(session, FilterTasksInput(is_completed=True, priority="high"))
    assert _ids(both) == {high_done.id}


def test_filter_without_matches_returns_empty_list(session: Session, make_task) -> None:
    make_task(priority="low")
    assert get_tasks(session, FilterTasksInput(priority="high")) == []
    assert get_tasks(session, FilterTasksInput(is_completed=True)) == []
