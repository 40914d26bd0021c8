# src/todo_list/connectors/console_render.py

from __future__ import annotations

from ..tasks.projection import ViewModel
from ..tasks.task_models import TaskStats

EMPTY_PLACEHOLDER = "No tasks yet. Type something to add your first task!"


def render_stats(stats: TaskStats) -> str:
    return f"Total: {stats.total} | Completed: {stats.completed} | Pending: {stats.pending}"


def render_view(view: ViewModel, stats: TaskStats) -> str:
    lines: list[str] = []
    if view.is_empty:
        lines.append(f"  {EMPTY_PLACEHOLDER}")
    else:
        for row in view.rows:
            mark = "x" if row.completed else " "
            lines.append(f"  [{mark}] {row.id}. {row.text}")
    lines.append("")
    lines.append(render_stats(stats))
    if not view.can_clear_completed:
        lines.append("(/clear unavailable: no completed tasks)")
    return "\n".join(lines)
