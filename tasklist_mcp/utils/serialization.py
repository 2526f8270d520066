"""Encoding and decoding of stored snapshots and export documents."""

from __future__ import annotations

import json
from datetime import date, datetime, timezone

import pydantic

from tasklist_mcp.errors import InvalidFormatError, PersistenceError
from tasklist_mcp.models.task import (
    EXPORT_VERSION,
    ExportDocument,
    ImportDocument,
    StoredSnapshot,
    Task,
)


def _iso_timestamp(when: datetime) -> str:
    """
    Format a datetime as an ISO-8601 UTC timestamp with millisecond precision.

    Output: "2024-01-01T09:30:00.000Z"
    """
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    return when.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _format_task_date(task_date: str) -> str | None:
    """
    Human-readable form of an ISO date, or None when it is not one.

    Output: "January 1, 2024"
    """
    try:
        d = date.fromisoformat(task_date.strip())
    except ValueError:
        return None
    return f"{d:%B} {d.day}, {d.year}"


def _encode_snapshot(tasks: list[Task], next_id: int, saved_at: datetime) -> str:
    """Serialize store state for the storage adapter."""
    snapshot = StoredSnapshot(tasks=tasks, task_id_counter=next_id, last_saved=_iso_timestamp(saved_at))
    return snapshot.model_dump_json(by_alias=True)


def _decode_snapshot(raw: str) -> StoredSnapshot:
    """
    Parse a stored snapshot.

    Raises:
        PersistenceError: if the blob is not a valid snapshot
    """
    try:
        return StoredSnapshot.model_validate_json(raw)
    except pydantic.ValidationError as e:
        raise PersistenceError(f"Stored data is corrupt: {e.error_count()} problem(s) found") from e


def _encode_export(tasks: list[Task], exported_at: datetime) -> str:
    """Serialize tasks as a pretty-printed, versioned export document."""
    document = ExportDocument(tasks=tasks, export_date=_iso_timestamp(exported_at), version=EXPORT_VERSION)
    return json.dumps(document.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False)


def _decode_import(blob: str | bytes) -> list[Task]:
    """
    Parse an import document into tasks.

    Any JSON object with a ``tasks`` array of task records is accepted, so
    export files from older versions (or hand-written ones) import too.

    Raises:
        InvalidFormatError: if the blob is not JSON or has no valid tasks array
    """
    try:
        document = ImportDocument.model_validate_json(blob)
    except pydantic.ValidationError as e:
        raise InvalidFormatError(f"Invalid file format: {e.error_count()} problem(s) found") from e
    return document.tasks
