"""Utility functions for the task list MCP server."""

from tasklist_mcp.utils.formatters import (
    _format_stats_markdown,
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
)
from tasklist_mcp.utils.serialization import (
    _decode_import,
    _decode_snapshot,
    _encode_export,
    _encode_snapshot,
    _format_task_date,
    _iso_timestamp,
)

__all__ = [
    "_iso_timestamp",
    "_format_task_date",
    "_encode_snapshot",
    "_decode_snapshot",
    "_encode_export",
    "_decode_import",
    "_format_task_concise",
    "_format_task_markdown",
    "_format_tasks_concise",
    "_format_tasks_markdown",
    "_format_stats_markdown",
]
