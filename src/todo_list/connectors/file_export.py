# src/todo_list/connectors/file_export.py

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class FileExportSink:
    """Writes export documents as pretty-printed JSON files into one directory."""

    def __init__(self, directory: str | Path) -> None:
        self._dir = Path(directory)

    def save(self, document: dict[str, Any], filename: str) -> Path:
        self._dir.mkdir(parents=True, exist_ok=True)
        path = self._dir / filename
        tmp = path.with_suffix(".tmp")
        tmp.write_text(json.dumps(document, ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, path)
        logger.debug("Export written to %s (%d tasks)", path, len(document.get("tasks", [])))
        return path
