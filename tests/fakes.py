# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(slots=True)
class FakeConfirmer:
    """Answers every question with `answer` and records what was asked."""

    answer: bool = True
    asked: list[str] = field(default_factory=list)

    def confirm(self, message: str) -> bool:
        self.asked.append(message)
        return self.answer


@dataclass(slots=True)
class FakeNotifier:
    messages: list[str] = field(default_factory=list)

    def notify(self, message: str) -> None:
        self.messages.append(message)


@dataclass(slots=True)
class FakeExportSink:
    saved: list[tuple[dict[str, Any], str]] = field(default_factory=list)

    def save(self, document: dict[str, Any], filename: str) -> Path:
        self.saved.append((document, filename))
        return Path("/exports") / filename
