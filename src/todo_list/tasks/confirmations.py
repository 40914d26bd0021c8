# tasks/confirmations.py

from __future__ import annotations

"""
Two-phase confirmation for destructive operations.

request_*() validates the request and returns a PendingAction with a
single-use token; nothing is removed until confirm(token) is called.
The caller decides how to ask (blocking prompt, web dialog, ...).
"""

import logging
import threading
import uuid
from dataclasses import dataclass
from enum import StrEnum
from typing import cast

from .errors import NothingToClearError, TaskNotFoundError, UnknownConfirmationError
from .task_models import Task
from .task_store import TaskStore

logger = logging.getLogger(__name__)


class ActionKind(StrEnum):
    DELETE = "delete"
    CLEAR_COMPLETED = "clear_completed"


@dataclass(slots=True, frozen=True)
class PendingAction:
    token: str
    kind: ActionKind
    message: str
    task_id: int | None = None


class ConfirmationGate:
    def __init__(self, store: TaskStore) -> None:
        self._store = store
        self._pending: dict[str, PendingAction] = {}
        self._lock = threading.Lock()

    def _register(self, action: PendingAction) -> PendingAction:
        with self._lock:
            self._pending[action.token] = action
        logger.debug("Pending action kind=%s token=%s", action.kind, action.token)
        return action

    def _take(self, token: str) -> PendingAction:
        with self._lock:
            action = self._pending.pop(token, None)
        if action is None:
            raise UnknownConfirmationError(token)
        return action

    def request_delete(self, task_id: int) -> PendingAction:
        task = self._store.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return self._register(
            PendingAction(
                token=uuid.uuid4().hex,
                kind=ActionKind.DELETE,
                message="Are you sure you want to delete this task?",
                task_id=task.id,
            )
        )

    def request_clear_completed(self) -> PendingAction:
        count = self._store.stats().completed
        if count == 0:
            raise NothingToClearError()
        return self._register(
            PendingAction(
                token=uuid.uuid4().hex,
                kind=ActionKind.CLEAR_COMPLETED,
                message=f"Are you sure you want to delete {count} completed task(s)?",
            )
        )

    def confirm(self, token: str) -> Task | int:
        """
        Commit a pending action.

        Returns the removed Task for deletes and the removed count for
        clear-completed. Store errors (the task vanished, nothing left to
        clear) propagate unchanged; the token is consumed either way.
        """
        action = self._take(token)
        if action.kind is ActionKind.DELETE:
            return self._store.delete(cast(int, action.task_id))
        return self._store.clear_completed()

    def cancel(self, token: str) -> bool:
        with self._lock:
            return self._pending.pop(token, None) is not None

    def pending(self) -> list[PendingAction]:
        with self._lock:
            return list(self._pending.values())
