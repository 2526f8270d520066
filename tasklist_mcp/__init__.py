"""
MCP Server for a personal task list.

This server keeps a newest-first list of short dated tasks, persists it to
local storage after every change, and supports filtering plus JSON import and
export.
"""

# Re-export enums
from tasklist_mcp.enums import ImportMode, ResponseFormat, TaskFilter, ValidationReason

# Re-export errors
from tasklist_mcp.errors import (
    InvalidFormatError,
    NotFoundError,
    PersistenceError,
    TaskStoreError,
    ValidationError,
)

# Re-export models
from tasklist_mcp.models import (
    AddTaskInput,
    ClearCompletedInput,
    DeleteTaskInput,
    ExportDocument,
    ExportTasksInput,
    GetTaskInput,
    ImportTasksInput,
    ListTasksInput,
    RefreshInput,
    SetFilterInput,
    StatsInput,
    StoredSnapshot,
    Task,
    TaskStats,
    ToggleTaskInput,
)

# Re-export adapters
from tasklist_mcp.adapters import (
    FileAdapter,
    JsonFileStorage,
    LocalFileAdapter,
    MemoryStorage,
    StorageAdapter,
    StorageQuotaExceeded,
)

# Re-export the store and server factories
from tasklist_mcp.server import build_store, create_server
from tasklist_mcp.store import TaskStore

# Re-export tools
from tasklist_mcp.tools import (
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
    # Enums
    "ImportMode",
    "ResponseFormat",
    "TaskFilter",
    "ValidationReason",
    # Errors
    "TaskStoreError",
    "ValidationError",
    "NotFoundError",
    "InvalidFormatError",
    "PersistenceError",
    # Task models
    "Task",
    "TaskStats",
    "StoredSnapshot",
    "ExportDocument",
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
    # Adapters
    "StorageAdapter",
    "MemoryStorage",
    "JsonFileStorage",
    "StorageQuotaExceeded",
    "FileAdapter",
    "LocalFileAdapter",
    # Store and server
    "TaskStore",
    "build_store",
    "create_server",
    # Tools
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
