"""Input models for the task list MCP tools."""

from pydantic import BaseModel, ConfigDict, Field

from tasklist_mcp.enums import ImportMode, ResponseFormat, TaskFilter

# ============================================================================
# Mutation Tool Input Models
# ============================================================================


class AddTaskInput(BaseModel):
    """Input model for adding a new task."""

    model_config = ConfigDict(str_strip_whitespace=True)

    # Length and emptiness are checked by the store so the caller gets its messages.
    text: str = Field(..., description="Task text (1-100 characters, must be unique)")
    date: str = Field(..., description="Date the task is planned for, e.g. '2024-12-31'")


class ToggleTaskInput(BaseModel):
    """Input model for toggling a task between pending and completed."""

    task_id: int = Field(..., description="ID of the task to toggle", ge=1)


class DeleteTaskInput(BaseModel):
    """Input model for deleting a task."""

    task_id: int = Field(..., description="ID of the task to delete", ge=1)
    confirm: bool = Field(
        default=True,
        description="Set to false to preview the deletion without removing anything",
    )


class ClearCompletedInput(BaseModel):
    """Input model for removing every completed task."""

    confirm: bool = Field(
        default=True,
        description="Set to false to only report how many tasks would be removed",
    )


class SetFilterInput(BaseModel):
    """Input model for changing the active filter."""

    filter: TaskFilter = Field(..., description="Filter to apply: all, completed, or pending")


class ImportTasksInput(BaseModel):
    """Input model for importing tasks from an export document."""

    model_config = ConfigDict(str_strip_whitespace=True)

    path: str | None = Field(default=None, description="Path of an export file to read")
    content: str | None = Field(default=None, description="Export document as JSON text (used when no path is given)")
    mode: ImportMode = Field(
        default=ImportMode.MERGE,
        description="'replace' supersedes the current list, 'merge' keeps it and skips duplicate texts",
    )


class ExportTasksInput(BaseModel):
    """Input model for exporting tasks."""

    model_config = ConfigDict(str_strip_whitespace=True)

    directory: str | None = Field(
        default=None,
        description="Directory to write the export file to; omit to return the document inline",
    )


class RefreshInput(BaseModel):
    """Input model for reloading the list from storage."""

    model_config = ConfigDict(str_strip_whitespace=True)
    # No parameters needed - refresh always reloads the whole list


# ============================================================================
# Query Tool Input Models
# ============================================================================


class ListTasksInput(BaseModel):
    """Input model for listing tasks."""

    filter: TaskFilter | None = Field(
        default=None,
        description="Filter to use for this call; omit to use the active filter",
    )
    limit: int | None = Field(default=50, description="Maximum number of tasks to return", ge=1, le=500)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown', 'concise', or 'json'",
    )


class GetTaskInput(BaseModel):
    """Input model for getting a single task."""

    task_id: int = Field(..., description="ID of the task to retrieve", ge=1)
    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown', 'concise', or 'json'",
    )


class StatsInput(BaseModel):
    """Input model for task statistics."""

    response_format: ResponseFormat = Field(
        default=ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )
