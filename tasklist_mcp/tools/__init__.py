"""MCP tool definitions for the task list."""

from tasklist_mcp.tools.core import (
    register_tools,
    tasklist_add,
    tasklist_clear_completed,
    tasklist_delete,
    tasklist_export,
    tasklist_get,
    tasklist_import,
    tasklist_list,
    tasklist_refresh,
    tasklist_set_filter,
    tasklist_stats,
    tasklist_toggle,
)

__all__ = [
    "register_tools",
    "tasklist_add",
    "tasklist_toggle",
    "tasklist_delete",
    "tasklist_clear_completed",
    "tasklist_set_filter",
    "tasklist_list",
    "tasklist_get",
    "tasklist_stats",
    "tasklist_export",
    "tasklist_import",
    "tasklist_refresh",
]
