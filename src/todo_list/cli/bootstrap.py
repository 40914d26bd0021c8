# src/todo_list/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the store, the confirmation gate and the console/file
  collaborators into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_connector import ConsoleConfirmer, ConsoleNotifier
from ..connectors.file_export import FileExportSink
from ..core.state import AppState
from ..tasks.confirmations import ConfirmationGate
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    The store starts empty; the caller runs the initial load afterwards.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore()
    state = AppState(
        settings=settings,
        store=store,
        gate=ConfirmationGate(store),
        confirmer=ConsoleConfirmer(assume_yes=not settings.confirm_destructive),
        notifier=ConsoleNotifier(),
        export_sink=FileExportSink(settings.export_dir),
    )
    return state
