"""File access for import and export documents."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Protocol


class FileAdapter(Protocol):
    """Reads import files and writes export files."""

    def read_text(self, path: str | Path) -> str: ...

    def write_bytes(self, path: str | Path, data: bytes) -> Path: ...


class LocalFileAdapter:
    """FileAdapter backed by the local filesystem."""

    def read_text(self, path: str | Path) -> str:
        return Path(path).expanduser().read_text(encoding="utf-8")

    def write_bytes(self, path: str | Path, data: bytes) -> Path:
        target = Path(path).expanduser()
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
        return target


def export_filename(when: datetime) -> str:
    """
    Name for an export file written at ``when``.

    Output: "todo-tasks-2024-01-31.json"
    """
    return f"todo-tasks-{when.date().isoformat()}.json"
