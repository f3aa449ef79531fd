"""File-based persistence for route planning run artifacts."""

from __future__ import annotations

import json
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from ..config import settings

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_-]+")


def safe_prefix(label: str) -> str:
    cleaned = _UNSAFE_CHARS.sub("_", label.strip()).strip("_")
    return cleaned or "run"


class FileStorage:
    """Stores JSON summaries and CSV stop lists under ``<root>/outputs``."""

    def __init__(self, root: Path | None = None) -> None:
        self.root = (root or settings.data_root).resolve()
        self.output_root = self.root / "outputs"
        self.output_root.mkdir(parents=True, exist_ok=True)

    def make_run_directory(self, prefix: str = "routes") -> Path:
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
        path = self.output_root / f"{safe_prefix(prefix)}_{timestamp}"
        path.mkdir(parents=True, exist_ok=False)
        return path

    def write_json(self, path: Path, data: Any, *, indent: int = 2) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as handle:
            json.dump(data, handle, ensure_ascii=False, indent=indent, default=str)

    def write_csv(self, path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(content)

    def save_run(self, prefix: str, summary: Any, stops_csv: str) -> Path:
        """Write ``summary.json`` and ``stops.csv`` into a fresh run directory."""
        run_dir = self.make_run_directory(prefix=prefix)
        self.write_json(run_dir / "summary.json", summary)
        self.write_csv(run_dir / "stops.csv", stops_csv)
        return run_dir
