# src/todo_list/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a usable default; nothing is required at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Data source / paths ----
    tasks_source: str
    data_dir: Path
    export_dir: Path

    # ---- Behaviour ----
    confirm_destructive: bool
    notify_on_add: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo")
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        # A path or an http(s) URL.
        tasks_source = _env(_k("TASKS_SOURCE"), "data.json").strip() or "data.json"

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo"))
        export_dir = _env_path(_k("EXPORT_DIR"), data_dir / "exports")

        confirm_destructive = _env_bool(_k("CONFIRM_DESTRUCTIVE"), True)
        notify_on_add = _env_bool(_k("NOTIFY_ON_ADD"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            tasks_source=tasks_source,
            data_dir=data_dir,
            export_dir=export_dir,
            confirm_destructive=confirm_destructive,
            notify_on_add=notify_on_add,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
