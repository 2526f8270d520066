"""Key-value blob storage used to persist store snapshots."""

from __future__ import annotations

import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class StorageQuotaExceeded(Exception):
    """The storage backend refused a write because it is full."""


class StorageAdapter(Protocol):
    """Minimal key-value store: text blobs under string keys."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStorage:
    """
    In-process storage.

    Args:
        quota: Optional limit on the total number of stored characters.
            Writes that would exceed it raise StorageQuotaExceeded.
    """

    def __init__(self, quota: int | None = None) -> None:
        self._data: dict[str, str] = {}
        self._quota = quota

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if self._quota is not None:
            used = sum(len(v) for k, v in self._data.items() if k != key)
            if used + len(value) > self._quota:
                raise StorageQuotaExceeded(f"Storing {len(value)} characters under '{key}' exceeds quota {self._quota}")
        self._data[key] = value


class JsonFileStorage:
    """
    File-backed storage: each key is one ``<key>.json`` file in a directory.

    Writes go to a temporary file first and are moved into place, so a crash
    mid-write leaves the previous snapshot intact.
    """

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory).expanduser()

    @property
    def directory(self) -> Path:
        return self._directory

    def _path_for(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self._directory / f"{key}.json"

    def get(self, key: str) -> str | None:
        path = self._path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        path = self._path_for(key)
        self._directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Wrote %d characters to %s", len(value), path)
