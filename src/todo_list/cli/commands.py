# src/todo_list/cli/commands.py

from __future__ import annotations

import asyncio
import contextlib
import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..connectors.console_render import render_stats, render_view
from ..core.state import AppState
from ..tasks import task_api
from ..tasks.loader import load_tasks
from ..tasks.projection import project

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._redraw: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        redraw: bool = False,
    ) -> None:
        aliases = aliases or []
        keys = [name.lower(), *(a.lower() for a in aliases)]
        self._help[keys[0]] = help_text
        for key in keys:
            self._handlers[key] = handler
            if redraw:
                self._redraw.add(key)

    @staticmethod
    def _name(line: str) -> str | None:
        if not line.startswith("/"):
            return None
        parts = line[1:].split()
        return parts[0].lower() if parts else None

    def redraws(self, line: str) -> bool:
        """True if the list should be re-rendered after running `line`."""
        name = self._name(line)
        return name is not None and name in self._redraw

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        lines.append("Anything not starting with '/' is added as a new task.")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(args: list[str]) -> int | None:
    if len(args) != 1:
        return None
    raw = args[0].rstrip(".")
    if not (raw.isascii() and raw.isdigit()):
        return None
    return int(raw)


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_view(project(state.store.tasks()), state.store.stats())


def cmd_stats(state: AppState, args: list[str]) -> str:
    return render_stats(state.store.stats())


def cmd_add(state: AppState, args: list[str]) -> str:
    task = task_api.add_task(state, " ".join(args))
    return "" if task is None else f"Added #{task.id}."


def cmd_toggle(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /toggle <id>"
    task = task_api.toggle_task(state, task_id)
    if task is None:
        return f"Task id {task_id} not found."
    return f"Task {task.id} marked {'done' if task.completed else 'not done'}."


def cmd_rm(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /rm <id>"
    if state.store.get(task_id) is None:
        return f"Task id {task_id} not found."
    if task_api.delete_task(state, task_id):
        return f"Task {task_id} removed."
    return "Delete cancelled."


def cmd_clear(state: AppState, args: list[str]) -> str:
    had_completed = state.store.stats().completed > 0
    removed = task_api.clear_completed(state)
    if removed:
        return f"Removed {removed} completed task(s)."
    # Nothing to clear was already reported through the notifier.
    return "Clear cancelled." if had_completed else ""


def cmd_export(state: AppState, args: list[str]) -> str:
    try:
        path = task_api.export_tasks(state)
    except OSError:
        logger.exception("Export failed.")
        return "Export failed (see log)."
    return f"Tasks exported to {path}"


def cmd_reload(
    state: AppState,
    args: list[str],
    emit: CommandEmitter | None = None,
) -> str:
    """
    /reload           -> reload from the configured source
    /reload <source>  -> reload from a path or URL
    """
    source = args[0] if args else str(getattr(state.settings, "tasks_source", "data.json"))
    if emit:
        with contextlib.suppress(Exception):
            emit(f"Loading tasks from {source}...")

    result = asyncio.run(load_tasks(state.store, source))
    if not result.ok:
        return f"Could not load tasks ({result.error}). Starting with empty task list."
    suffix = f" ({result.skipped} skipped)" if result.skipped else ""
    return f"Loaded {result.loaded} tasks{suffix}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("stats", cmd_stats, help_text="Show total/completed/pending counters.")
registry.register("add", cmd_add, help_text="Add a task: /add <text>.", redraw=True)
registry.register(
    "toggle",
    cmd_toggle,
    help_text="Mark a task done/not done: /toggle <id>.",
    aliases=["done", "x"],
    redraw=True,
)
registry.register(
    "rm", cmd_rm, help_text="Delete a task (asks first): /rm <id>.", aliases=["delete"], redraw=True
)
registry.register("clear", cmd_clear, help_text="Delete all completed tasks (asks first).", redraw=True)
registry.register("export", cmd_export, help_text="Export tasks as JSON into the export dir.")
registry.register(
    "reload", cmd_reload, help_text="Reload tasks: /reload [path-or-url].", redraw=True
)
