# tasks/task_store.py

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from .errors import EmptyTextError, NothingToClearError, TaskNotFoundError
from .serialization import export_document
from .task_models import Task, TaskStats
from .timestamps import utc_now

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store.

    Owns the ordered task list and the id counter. Insertion order is the
    display order; ids are allocated as counter + 1 and never reused, even
    after the task holding them is deleted.

    Thread-safety:
    - every public method runs under one re-entrant lock, so a caller never
      observes a half-applied mutation
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._tasks: list[Task] = []
        self._counter = 0
        self._extras: dict[str, Any] = {}

    # ---- low-level helpers ----

    def _find(self, task_id: int) -> Task:
        for task in self._tasks:
            if task.id == task_id:
                return task
        raise TaskNotFoundError(task_id)

    # ---- lifecycle ----

    def load(self, tasks: Iterable[Task], extras: Mapping[str, Any] | None = None) -> None:
        """
        Replace the current contents wholesale.

        The counter becomes max(ids, 0), so the next add() cannot collide
        with anything that was loaded. Callers are expected to pass tasks
        with distinct ids (serialization.parse_document guarantees this).
        """
        items = list(tasks)
        with self._lock:
            self._tasks = items
            self._counter = max((t.id for t in items), default=0)
            self._extras = dict(extras or {})
        logger.debug("TaskStore loaded tasks=%d counter=%d", len(items), self._counter)

    def reset(self) -> None:
        with self._lock:
            self._tasks = []
            self._counter = 0
            self._extras = {}

    # ---- public API ----

    def add(self, text: str) -> Task:
        clean = (text or "").strip()
        if not clean:
            raise EmptyTextError()

        with self._lock:
            task = Task(id=self._counter + 1, text=clean, created_at=utc_now())
            self._tasks.append(task)
            self._counter = task.id
        logger.debug("Task added id=%s", task.id)
        return task

    def toggle(self, task_id: int) -> Task:
        with self._lock:
            task = self._find(task_id)
            task.completed = not task.completed
        logger.debug("Task toggled id=%s completed=%s", task.id, task.completed)
        return task

    def delete(self, task_id: int) -> Task:
        with self._lock:
            task = self._find(task_id)
            self._tasks.remove(task)
        logger.debug("Task deleted id=%s", task_id)
        return task

    def clear_completed(self) -> int:
        with self._lock:
            remaining = [t for t in self._tasks if not t.completed]
            removed = len(self._tasks) - len(remaining)
            if removed == 0:
                raise NothingToClearError()
            self._tasks = remaining
        logger.debug("Cleared completed tasks removed=%d", removed)
        return removed

    def stats(self) -> TaskStats:
        with self._lock:
            total = len(self._tasks)
            completed = sum(1 for t in self._tasks if t.completed)
        return TaskStats(total=total, completed=completed, pending=total - completed)

    def export(self, now: datetime | None = None) -> dict[str, Any]:
        with self._lock:
            return export_document(self._tasks, now or utc_now())

    # ---- read helpers ----

    def tasks(self) -> list[Task]:
        with self._lock:
            return list(self._tasks)

    def get(self, task_id: int) -> Task | None:
        with self._lock:
            try:
                return self._find(task_id)
            except TaskNotFoundError:
                return None

    @property
    def next_id(self) -> int:
        with self._lock:
            return self._counter + 1

    @property
    def extras(self) -> dict[str, Any]:
        """Top-level source fields kept verbatim for other components."""
        with self._lock:
            return dict(self._extras)

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)
