"""Pydantic models for the task list MCP server."""

from tasklist_mcp.models.inputs import (
    AddTaskInput,
    ClearCompletedInput,
    DeleteTaskInput,
    ExportTasksInput,
    GetTaskInput,
    ImportTasksInput,
    ListTasksInput,
    RefreshInput,
    SetFilterInput,
    StatsInput,
    ToggleTaskInput,
)
from tasklist_mcp.models.task import (
    EXPORT_VERSION,
    ExportDocument,
    ImportDocument,
    StoredSnapshot,
    Task,
    TaskStats,
)

__all__ = [
    # Task models
    "Task",
    "TaskStats",
    "StoredSnapshot",
    "ExportDocument",
    "ImportDocument",
    "EXPORT_VERSION",
    # Tool input models
    "AddTaskInput",
    "ToggleTaskInput",
    "DeleteTaskInput",
    "ClearCompletedInput",
    "SetFilterInput",
    "ListTasksInput",
    "GetTaskInput",
    "StatsInput",
    "ExportTasksInput",
    "ImportTasksInput",
    "RefreshInput",
]
