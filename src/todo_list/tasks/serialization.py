# tasks/serialization.py

"""
JSON document shapes.

Source document (consumed):
    {"tasks": [{"id", "text", "completed", "createdAt"}, ...],
     "categories": ..., "priorities": ..., "settings": ...}

Export document (produced):
    {"tasks": [...], "exportedAt", "totalTasks", "completedTasks"}
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .errors import LoadError
from .task_models import Task
from .timestamps import format_timestamp, parse_timestamp, utc_now

logger = logging.getLogger(__name__)

PASSTHROUGH_FIELDS = ("categories", "priorities", "settings")


@dataclass(slots=True)
class ParsedDocument:
    tasks: list[Task]
    extras: dict[str, Any] = field(default_factory=dict)
    skipped: int = 0


def task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "text": task.text,
        "completed": task.completed,
        "createdAt": format_timestamp(task.created_at),
    }


def export_document(tasks: Iterable[Task], now: datetime) -> dict[str, Any]:
    items = [task_to_dict(t) for t in tasks]
    return {
        "tasks": items,
        "exportedAt": format_timestamp(now),
        "totalTasks": len(items),
        "completedTasks": sum(1 for t in items if t["completed"]),
    }


def export_filename(now: datetime) -> str:
    return f"todo-tasks-{format_timestamp(now).split('T')[0]}.json"


def _task_from_dict(raw: Any, loaded_at: datetime) -> Task | None:
    """
    Rebuild one task from its JSON form.

    Returns None for elements that cannot become a valid Task (bad id,
    empty text). A bad or missing createdAt does not drop the task: it is
    stamped with the load time instead.
    """
    if not isinstance(raw, dict):
        logger.warning("Skipping task element of type %s", type(raw).__name__)
        return None

    tid = raw.get("id")
    if isinstance(tid, bool) or not isinstance(tid, int) or tid <= 0:
        logger.warning("Skipping task with invalid id=%r", tid)
        return None

    text = raw.get("text")
    text = text.strip() if isinstance(text, str) else ""
    if not text:
        logger.warning("Skipping task id=%s with empty text", tid)
        return None

    try:
        created_at = parse_timestamp(raw.get("createdAt"))
    except ValueError:
        logger.warning(
            "Task id=%s has unusable createdAt=%r; using load time",
            tid,
            raw.get("createdAt"),
        )
        created_at = loaded_at

    return Task(id=tid, text=text, completed=raw.get("completed") is True, created_at=created_at)


def parse_document(data: Any, *, loaded_at: datetime | None = None) -> ParsedDocument:
    if not isinstance(data, dict):
        raise LoadError(f"document must be a JSON object, got {type(data).__name__}")

    raw_tasks = data.get("tasks")
    if not isinstance(raw_tasks, list):
        raise LoadError("document has no 'tasks' list")

    loaded_at = loaded_at or utc_now()
    tasks: list[Task] = []
    seen: set[int] = set()
    skipped = 0

    for raw in raw_tasks:
        task = _task_from_dict(raw, loaded_at)
        if task is None:
            skipped += 1
            continue
        if task.id in seen:
            logger.warning("Skipping duplicate task id=%s", task.id)
            skipped += 1
            continue
        seen.add(task.id)
        tasks.append(task)

    extras = {k: data[k] for k in PASSTHROUGH_FIELDS if k in data}
    return ParsedDocument(tasks=tasks, extras=extras, skipped=skipped)
