# tests/test_projection.py

from __future__ import annotations

from todo_list.connectors.console_render import EMPTY_PLACEHOLDER, render_view
from todo_list.tasks.projection import TaskRow, project
from todo_list.tasks.task_store import TaskStore


def test_empty_store_projects_empty_state(store: TaskStore) -> None:
    view = project(store.tasks())
    assert view.rows == ()
    assert view.is_empty
    assert not view.can_clear_completed

    text = render_view(view, store.stats())
    assert EMPTY_PLACEHOLDER in text
    assert "Total: 0 | Completed: 0 | Pending: 0" in text


def test_rows_follow_store_order(store: TaskStore) -> None:
    store.add("first")
    store.add("second")
    store.add("third")
    store.toggle(2)

    view = project(store.tasks())
    assert view.rows == (
        TaskRow(id=1, text="first", completed=False),
        TaskRow(id=2, text="second", completed=True),
        TaskRow(id=3, text="third", completed=False),
    )
    assert not view.is_empty
    assert view.can_clear_completed


def test_projection_is_rebuilt_not_shared(store: TaskStore) -> None:
    store.add("a")
    before = project(store.tasks())
    store.toggle(1)
    after = project(store.tasks())

    assert before.rows[0].completed is False
    assert after.rows[0].completed is True
    assert project(store.tasks()) == after


def test_render_marks_completed_rows(store: TaskStore) -> None:
    store.add("Buy milk")
    store.add("Walk dog")
    store.toggle(1)

    text = render_view(project(store.tasks()), store.stats())
    assert "[x] 1. Buy milk" in text
    assert "[ ] 2. Walk dog" in text
    assert "Total: 2 | Completed: 1 | Pending: 1" in text
