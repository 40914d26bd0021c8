# src/todo_list/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task API.

The core depends on Protocols instead of concrete implementations.
This keeps front ends (console, web, tests) swappable.
"""

from pathlib import Path
from typing import Any, Protocol


class Confirmer(Protocol):
    """Ask the user a yes/no question before a destructive commit."""
    def confirm(self, message: str) -> bool: ...


class Notifier(Protocol):
    """User-facing notices (validation failures, "nothing to clear", ...)."""
    def notify(self, message: str) -> None: ...


class ExportSink(Protocol):
    """
    Download/save surface for exported documents.

    Receives the export document and a suggested filename; returns where
    the document ended up.
    """

    def save(self, document: dict[str, Any], filename: str) -> Path: ...
