# src/todo_list/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.confirmations import ConfirmationGate
from ..tasks.task_store import TaskStore
from .ports import Confirmer, ExportSink, Notifier


@dataclass
class AppState:
    # Settings are kept on the state for easy access in other modules.
    settings: object

    store: TaskStore
    gate: ConfirmationGate

    confirmer: Confirmer
    notifier: Notifier
    export_sink: ExportSink
