# src/todo_list/tasks/task_api.py

from __future__ import annotations

import logging
from pathlib import Path
from typing import cast

from ..core.state import AppState
from .errors import EmptyTextError, NothingToClearError, TaskNotFoundError
from .serialization import export_filename
from .task_models import Task
from .timestamps import utc_now

logger = logging.getLogger(__name__)

MSG_EMPTY_TEXT = "Please enter a task!"
MSG_TASK_ADDED = "Task added successfully!"
MSG_NOTHING_TO_CLEAR = "No completed tasks to clear!"


def add_task(state: AppState, text: str) -> Task | None:
    """
    Add a task, telling the user when the text is blank.
    Returns the new Task, or None if nothing was added.
    """
    try:
        task = state.store.add(text)
    except EmptyTextError:
        state.notifier.notify(MSG_EMPTY_TEXT)
        return None

    if getattr(state.settings, "notify_on_add", True):
        state.notifier.notify(MSG_TASK_ADDED)
    return task


def toggle_task(state: AppState, task_id: int) -> Task | None:
    try:
        return state.store.toggle(task_id)
    except TaskNotFoundError:
        logger.info("Toggle ignored: no task id=%s", task_id)
        return None


def delete_task(state: AppState, task_id: int) -> bool:
    """
    request -> confirm -> commit.
    Returns True only if the task was actually removed.
    """
    try:
        pending = state.gate.request_delete(task_id)
    except TaskNotFoundError:
        logger.info("Delete ignored: no task id=%s", task_id)
        return False

    if not state.confirmer.confirm(pending.message):
        state.gate.cancel(pending.token)
        logger.debug("Delete cancelled id=%s", task_id)
        return False

    try:
        state.gate.confirm(pending.token)
    except TaskNotFoundError:
        logger.info("Task id=%s disappeared before delete was confirmed", task_id)
        return False
    return True


def clear_completed(state: AppState) -> int:
    """Returns how many tasks were removed (0 when nothing happened)."""
    try:
        pending = state.gate.request_clear_completed()
    except NothingToClearError:
        state.notifier.notify(MSG_NOTHING_TO_CLEAR)
        return 0

    if not state.confirmer.confirm(pending.message):
        state.gate.cancel(pending.token)
        return 0

    try:
        removed = state.gate.confirm(pending.token)
    except NothingToClearError:
        state.notifier.notify(MSG_NOTHING_TO_CLEAR)
        return 0
    return cast(int, removed)


def export_tasks(state: AppState) -> Path:
    now = utc_now()
    document = state.store.export(now)
    path = state.export_sink.save(document, export_filename(now))
    logger.info("Tasks exported as JSON to %s", path)
    return path
