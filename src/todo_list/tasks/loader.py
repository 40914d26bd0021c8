# tasks/loader.py

from __future__ import annotations

"""
Initial load of the task document.

This is the only suspend point of the app:
- http(s) sources are fetched with aiohttp,
- anything else is treated as a local file path and read in a worker thread.

Any failure is logged and leaves the store empty; nothing propagates.
"""

import asyncio
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import aiohttp

from .errors import LoadError
from .serialization import parse_document
from .task_store import TaskStore

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class LoadResult:
    ok: bool
    loaded: int = 0
    skipped: int = 0
    error: LoadError | None = None


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


async def _fetch_url(url: str) -> Any:
    try:
        async with aiohttp.ClientSession() as session:
            async with session.get(url) as resp:
                if resp.status < 200 or resp.status >= 300:
                    raise LoadError(f"HTTP error! status: {resp.status}", source=url)
                body = await resp.text()
    except (aiohttp.ClientError, asyncio.TimeoutError, UnicodeDecodeError) as e:
        raise LoadError(f"request failed: {e}", source=url) from e

    try:
        return json.loads(body)
    except (ValueError, RecursionError) as e:
        # Oversized int literals raise a plain ValueError, deep nesting a RecursionError.
        raise LoadError(f"malformed JSON: {e}", source=url) from e


def _read_file(path: Path) -> Any:
    try:
        raw = path.read_text("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"cannot read file: {e}", source=str(path)) from e

    try:
        return json.loads(raw)
    except (ValueError, RecursionError) as e:
        raise LoadError(f"malformed JSON: {e}", source=str(path)) from e


async def fetch_document(source: str | Path) -> Any:
    src = str(source)
    if is_url(src):
        return await _fetch_url(src)
    return await asyncio.to_thread(_read_file, Path(src).expanduser())


async def load_tasks(store: TaskStore, source: str | Path) -> LoadResult:
    """
    Fetch `source`, parse it and replace the store contents.

    On failure the store is reset to empty (counter 0) and the error is
    returned inside the LoadResult instead of being raised.
    """
    try:
        data = await fetch_document(source)
        parsed = parse_document(data)
    except LoadError as e:
        if e.source is None:
            e.source = str(source)
        logger.warning("Error loading tasks from %s: %s", source, e)
        logger.info("Starting with empty task list")
        store.reset()
        return LoadResult(ok=False, error=e)

    store.load(parsed.tasks, parsed.extras)
    logger.log(
        logging.WARNING if parsed.skipped else logging.INFO,
        "Loaded %d tasks from %s (skipped=%d)",
        len(parsed.tasks),
        source,
        parsed.skipped,
    )
    return LoadResult(ok=True, loaded=len(parsed.tasks), skipped=parsed.skipped)
