# tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True)
class Task:
    """
    A single to-do record.

    Only `completed` changes after creation; everything else is fixed
    once the store has accepted the task.
    """

    id: int
    text: str
    created_at: datetime
    completed: bool = False


@dataclass(slots=True, frozen=True)
class TaskStats:
    total: int
    completed: int
    pending: int
