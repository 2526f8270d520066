"""Enums for the task list MCP server."""

from enum import Enum


class ResponseFormat(str, Enum):
    """Output format for tool responses."""

    CONCISE = "concise"  # One line per task
    MARKDOWN = "markdown"  # Human-readable (default)
    JSON = "json"  # Machine-readable with all fields


class TaskFilter(str, Enum):
    """Which tasks a listing shows."""

    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"


class ImportMode(str, Enum):
    """How imported tasks combine with the current list."""

    REPLACE = "replace"
    MERGE = "merge"


class ValidationReason(str, Enum):
    """Why a new task was rejected."""

    EMPTY_TEXT = "empty_text"
    TOO_LONG = "too_long"
    MISSING_DATE = "missing_date"
    DUPLICATE = "duplicate"
