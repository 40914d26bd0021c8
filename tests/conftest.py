# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_list.core.state import AppState
from todo_list.tasks.confirmations import ConfirmationGate
from todo_list.tasks.task_store import TaskStore

from .fakes import FakeConfirmer, FakeExportSink, FakeNotifier


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the task API.

    A SimpleNamespace keeps tests independent of the process environment.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="DEBUG",
        tasks_source=str(tmp_path / "data.json"),
        data_dir=tmp_path,
        export_dir=tmp_path / "exports",
        confirm_destructive=True,
        notify_on_add=True,
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """AppState wired with deterministic fakes for every collaborator."""
    return AppState(
        settings=settings,
        store=store,
        gate=ConfirmationGate(store),
        confirmer=FakeConfirmer(),
        notifier=FakeNotifier(),
        export_sink=FakeExportSink(),
    )
