# src/todo_list/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks import task_api
from ..tasks.projection import project
from .console_render import render_view

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


class ConsoleNotifier:
    def notify(self, message: str) -> None:
        _print_ts(f"[!] {message}")


class ConsoleConfirmer:
    """
    Blocking y/N prompt.
    With assume_yes=True every question is answered "yes" without asking.
    """

    def __init__(self, assume_yes: bool = False) -> None:
        self.assume_yes = assume_yes

    def confirm(self, message: str) -> bool:
        if self.assume_yes:
            return True
        try:
            answer = input(f"{message} [y/N] ").strip().lower()
        except (EOFError, KeyboardInterrupt):
            print()
            return False
        return answer in ("y", "yes")


def _redraw(state: AppState) -> None:
    # Always rebuilt from the current store; never patched.
    print(render_view(project(state.store.tasks()), state.store.stats()))


def run_console_loop(state: AppState) -> None:
    logger.info("Console started (tasks=%d).", len(state.store))
    _print_ts("[CONSOLE] Type a task and press Enter to add it. Use /help for commands. Use /exit to quit.\n")
    _redraw(state)

    def emit(text: str) -> None:
        print(f"[{_ts_local()}] {text}", flush=True)

    while True:
        try:
            user_input = input("\n> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        if not user_input.startswith("/"):
            # Plain text behaves like the input box: Enter adds a task.
            if task_api.add_task(state, user_input) is not None:
                _redraw(state)
            continue

        try:
            cmd_response = command_registry.handle(state, user_input, emit=emit)
        except Exception:
            logger.exception("Command handler crashed.")
            cmd_response = "Internal error while handling a command."

        if cmd_response:
            _print_ts(cmd_response)
        if command_registry.redraws(user_input):
            _redraw(state)

    logger.info("Console finished.")
