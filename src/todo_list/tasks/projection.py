# tasks/projection.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .task_models import Task


@dataclass(slots=True, frozen=True)
class TaskRow:
    id: int
    text: str
    completed: bool


@dataclass(slots=True, frozen=True)
class ViewModel:
    """
    Display-ready state derived from the task list.

    Consumers throw the previous ViewModel away and render a fresh one
    after every store mutation.
    """

    rows: tuple[TaskRow, ...]
    is_empty: bool
    can_clear_completed: bool


def project(tasks: Iterable[Task]) -> ViewModel:
    rows = tuple(TaskRow(id=t.id, text=t.text, completed=t.completed) for t in tasks)
    return ViewModel(
        rows=rows,
        is_empty=not rows,
        can_clear_completed=any(r.completed for r in rows),
    )
