"""In-memory task list with write-through persistence."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any

from tasklist_mcp.adapters.files import FileAdapter, LocalFileAdapter, export_filename
from tasklist_mcp.adapters.storage import StorageAdapter
from tasklist_mcp.enums import ImportMode, TaskFilter, ValidationReason
from tasklist_mcp.errors import InvalidFormatError, NotFoundError, PersistenceError, ValidationError
from tasklist_mcp.models.task import Task, TaskStats
from tasklist_mcp.utils.serialization import (
    _decode_import,
    _decode_snapshot,
    _encode_export,
    _encode_snapshot,
    _format_task_date,
    _iso_timestamp,
)

logger = logging.getLogger(__name__)

STORAGE_KEY = "todoApp"
MAX_TEXT_LENGTH = 100


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TaskStore:
    """
    Owns the task list, the id counter and the active filter.

    Every mutation is applied in memory first and then written to the storage
    adapter as a full snapshot. Storage failures never undo a mutation: they are
    logged, kept in ``last_error`` and returned from save()/load().

    The list is newest-first. Ids come from a counter that only moves forward,
    including across imports.

    Args:
        storage: Key-value adapter the snapshot is written to
        files: Adapter used by export_to_file/import_from_file
        storage_key: Key the snapshot lives under
        export_dir: Default directory for export_to_file
        clock: Source of "now", used for createdAt/completedAt/lastSaved
    """

    def __init__(
        self,
        storage: StorageAdapter,
        files: FileAdapter | None = None,
        *,
        storage_key: str = STORAGE_KEY,
        export_dir: str | Path = ".",
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._storage = storage
        self._files: FileAdapter = files if files is not None else LocalFileAdapter()
        self._storage_key = storage_key
        self._export_dir = Path(export_dir)
        self._clock = clock

        self._tasks: list[Task] = []
        self._next_id = 1
        self._filter = TaskFilter.ALL
        self.last_error: PersistenceError | None = None

        self.load()
        logger.info("TaskStore ready key=%s total=%d next_id=%d", storage_key, len(self._tasks), self._next_id)

    # ---- state accessors ----

    # Tasks handed out are copies; changes go through the mutation methods.

    @property
    def tasks(self) -> list[Task]:
        return [t.model_copy() for t in self._tasks]

    @property
    def next_id(self) -> int:
        return self._next_id

    @property
    def active_filter(self) -> TaskFilter:
        return self._filter

    def get_task(self, task_id: int) -> Task:
        return self._find(task_id).model_copy()

    def _find(self, task_id: int) -> Task:
        for task in self._tasks:
            if task.id == task_id:
                return task
        raise NotFoundError(task_id)

    # ---- mutations ----

    def add_task(self, text: str, task_date: str | date | None) -> Task:
        """
        Create a task and put it at the top of the list.

        Raises:
            ValidationError: empty or over-long text, missing date, or a task
                with the same text (case-insensitive) already exists
        """
        text = (text or "").strip()
        if isinstance(task_date, date):
            task_date = task_date.isoformat()
        task_date = (task_date or "").strip()

        if not text:
            raise ValidationError(ValidationReason.EMPTY_TEXT)
        if not task_date:
            raise ValidationError(ValidationReason.MISSING_DATE)
        if len(text) > MAX_TEXT_LENGTH:
            raise ValidationError(ValidationReason.TOO_LONG)
        key = text.lower()
        if any(t.key == key for t in self._tasks):
            raise ValidationError(ValidationReason.DUPLICATE)

        task = Task(
            id=self._next_id,
            text=text,
            completed=False,
            created_at=_iso_timestamp(self._clock()),
            task_date=task_date,
            formatted_task_date=_format_task_date(task_date),
        )
        self._next_id += 1
        self._tasks.insert(0, task)
        logger.debug("Task added id=%s date=%s", task.id, task.task_date)
        self.save()
        return task.model_copy()

    def toggle_task(self, task_id: int) -> Task:
        """Flip a task between pending and completed."""
        task = self._find(task_id)
        task.completed = not task.completed
        task.completed_at = _iso_timestamp(self._clock()) if task.completed else None
        logger.debug("Task toggled id=%s completed=%s", task.id, task.completed)
        self.save()
        return task.model_copy()

    def delete_task(self, task_id: int, confirmed: bool = True) -> None:
        """
        Remove a task.

        The caller asks for confirmation; an unconfirmed call only checks that
        the task exists.
        """
        task = self._find(task_id)
        if not confirmed:
            return
        self._tasks.remove(task)
        logger.debug("Task deleted id=%s", task_id)
        self.save()

    def clear_completed(self) -> int:
        """Remove every completed task and return how many were removed."""
        remaining = [t for t in self._tasks if not t.completed]
        removed = len(self._tasks) - len(remaining)
        if removed:
            self._tasks = remaining
            logger.debug("Cleared %d completed task(s)", removed)
            self.save()
        return removed

    # ---- filtering ----

    def set_filter(self, task_filter: TaskFilter | str) -> None:
        self._filter = TaskFilter(task_filter)

    def get_filtered(self, task_filter: TaskFilter | str | None = None) -> list[Task]:
        """Tasks matching the given filter (default: the active one), in list order."""
        task_filter = self._filter if task_filter is None else TaskFilter(task_filter)
        if task_filter == TaskFilter.COMPLETED:
            return [t.model_copy() for t in self._tasks if t.completed]
        if task_filter == TaskFilter.PENDING:
            return [t.model_copy() for t in self._tasks if not t.completed]
        return self.tasks

    def get_stats(self) -> TaskStats:
        total = len(self._tasks)
        completed = sum(1 for t in self._tasks if t.completed)
        return TaskStats(total=total, completed=completed, pending=total - completed)

    # ---- import / export ----

    def export_snapshot(self) -> str:
        """Versioned export document for the current list, as JSON text."""
        return _encode_export(self._tasks, self._clock())

    def export_to_file(self, directory: str | Path | None = None) -> Path:
        """Write the export document to ``todo-tasks-<date>.json`` and return its path."""
        target_dir = Path(directory) if directory is not None else self._export_dir
        path = target_dir / export_filename(self._clock())
        written = self._files.write_bytes(path, self.export_snapshot().encode("utf-8"))
        logger.info("Exported %d task(s) to %s", len(self._tasks), written)
        return written

    def import_snapshot(self, blob: str | bytes, mode: ImportMode | str = ImportMode.MERGE) -> int:
        """
        Bring tasks in from an export document.

        REPLACE keeps the imported ids. MERGE skips records whose text matches an
        existing task, gives the rest fresh ids and appends them.

        Returns:
            Number of tasks actually added to the list

        Raises:
            InvalidFormatError: if the document is not a list of task records
        """
        mode = ImportMode(mode)
        imported = self._stamp_completions(_decode_import(blob))
        next_id = self._next_id

        if mode == ImportMode.REPLACE:
            tasks = imported
            count = len(imported)
        else:
            existing = {t.key for t in self._tasks}
            merged: list[Task] = []
            for record in imported:
                if record.key in existing:
                    continue
                merged.append(record.model_copy(update={"id": next_id}))
                next_id += 1
            tasks = self._tasks + merged
            count = len(merged)

        if tasks:
            next_id = max(next_id, max(t.id for t in tasks) + 1)

        self._tasks = tasks
        self._next_id = next_id
        logger.info("Imported %d task(s) mode=%s", count, mode.value)
        self.save()
        return count

    def import_from_file(self, path: str | Path, mode: ImportMode | str = ImportMode.MERGE) -> int:
        try:
            blob = self._files.read_text(path)
        except UnicodeDecodeError as e:
            raise InvalidFormatError(f"Invalid file format: not UTF-8 text ({e.reason})") from e
        return self.import_snapshot(blob, mode)

    def _stamp_completions(self, tasks: list[Task]) -> list[Task]:
        """Give completed records that arrived without a completion time one."""
        stamp = _iso_timestamp(self._clock())
        for task in tasks:
            if task.completed and task.completed_at is None:
                task.completed_at = stamp
        return tasks

    # ---- persistence ----

    def save(self) -> PersistenceError | None:
        """
        Write the current state to storage.

        Returns:
            None on success, or the PersistenceError describing the failure
        """
        try:
            payload = _encode_snapshot(self._tasks, self._next_id, self._clock())
            self._storage.set(self._storage_key, payload)
        except Exception as e:
            error = PersistenceError(f"Error saving data: {type(e).__name__}: {e}")
            logger.warning("%s", error)
            self.last_error = error
            return error
        self.last_error = None
        return None

    def load(self) -> PersistenceError | None:
        """
        Replace in-memory state with what storage holds.

        Nothing stored leaves the current state alone. Unreadable or corrupt
        data resets to an empty list and is reported, not raised.

        Returns:
            None on success, or the PersistenceError describing the failure
        """
        try:
            raw = self._storage.get(self._storage_key)
        except Exception as e:
            return self._reset(PersistenceError(f"Error loading saved data: {type(e).__name__}: {e}"))
        if raw is None:
            return None

        try:
            snapshot = _decode_snapshot(raw)
        except PersistenceError as e:
            return self._reset(e)

        self._tasks = self._stamp_completions(snapshot.tasks)
        self._next_id = snapshot.task_id_counter
        if self._tasks:
            self._next_id = max(self._next_id, max(t.id for t in self._tasks) + 1)
        self.last_error = None
        return None

    def _reset(self, error: PersistenceError) -> PersistenceError:
        logger.warning("%s; starting with an empty list", error)
        self._tasks = []
        self._next_id = 1
        self.last_error = error
        return error

    def refresh(self) -> PersistenceError | None:
        """Reload from storage when the app becomes active again (last write wins)."""
        logger.debug("Refreshing from storage key=%s", self._storage_key)
        return self.load()

    def describe(self) -> dict[str, Any]:
        """Introspection data for debugging."""
        return {
            "storage_key": self._storage_key,
            "total": len(self._tasks),
            "next_id": self._next_id,
            "active_filter": self._filter.value,
            "last_error": str(self.last_error) if self.last_error else None,
        }
