"""Core MCP tool definitions for the task list."""

import json

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from tasklist_mcp.enums import ImportMode, ResponseFormat, TaskFilter
from tasklist_mcp.errors import TaskStoreError
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
from tasklist_mcp.store import TaskStore
from tasklist_mcp.utils.formatters import (
    _format_stats_markdown,
    _format_task_concise,
    _format_task_markdown,
    _format_tasks_concise,
    _format_tasks_markdown,
)


def _with_storage_warning(store: TaskStore, message: str) -> str:
    """Append the last persistence problem, if any, to a tool result."""
    if store.last_error is None:
        return message
    return f"{message}\nWarning: {store.last_error} Changes are kept for this session only."


async def tasklist_add(params: AddTaskInput, store: TaskStore) -> str:
    """
    Create a new task at the top of the list.

    USE THIS WHEN:
    - Adding a new task to track

    DO NOT USE WHEN:
    - Marking a task done → use tasklist_toggle instead
    - Adding many tasks from a file → use tasklist_import instead

    RULES: text is trimmed, must be 1-100 characters and must not match an
    existing task's text (case-insensitive). A date is required.

    Args:
        params: AddTaskInput containing text and date
        store: Task store the tool is bound to

    Returns:
        Confirmation message with the created task, or an error message

    Examples:
        - Simple task: params with text="Buy milk", date="2024-01-01"
    """
    try:
        task = store.add_task(params.text, params.date)
    except TaskStoreError as e:
        return f"Error: {e}"
    return _with_storage_warning(store, f"Task added successfully!\n{_format_task_concise(task)}")


async def tasklist_toggle(params: ToggleTaskInput, store: TaskStore) -> str:
    """
    Toggle a task between pending and completed.

    Toggling a completed task marks it pending again and clears its completion
    time.

    Args:
        params: ToggleTaskInput containing the task_id
        store: Task store the tool is bound to

    Returns:
        Confirmation message with the task's new state
    """
    try:
        task = store.toggle_task(params.task_id)
    except TaskStoreError as e:
        return f"Error: {e}\nTip: Use tasklist_list to find valid task IDs."
    state = "completed" if task.completed else "marked as pending"
    return _with_storage_warning(store, f"Task {task.id} {state}!\n{_format_task_concise(task)}")


async def tasklist_delete(params: DeleteTaskInput, store: TaskStore) -> str:
    """
    Delete a task permanently.

    Deletion cannot be undone. Pass confirm=false to check which task would be
    removed without removing it.

    Args:
        params: DeleteTaskInput containing task_id and confirm
        store: Task store the tool is bound to

    Returns:
        Confirmation message
    """
    try:
        task = store.get_task(params.task_id)
        store.delete_task(params.task_id, confirmed=params.confirm)
    except TaskStoreError as e:
        return f"Error: {e}"
    if not params.confirm:
        return f"Task {task.id} would be deleted (not confirmed).\n{_format_task_concise(task)}"
    return _with_storage_warning(store, f"Task {task.id} deleted!")


async def tasklist_clear_completed(params: ClearCompletedInput, store: TaskStore) -> str:
    """
    Remove every completed task.

    Args:
        params: ClearCompletedInput with the confirm flag
        store: Task store the tool is bound to

    Returns:
        How many tasks were (or would be) removed
    """
    pending_removal = store.get_stats().completed
    if pending_removal == 0:
        return "No completed tasks to clear!"
    if not params.confirm:
        return f"{pending_removal} completed task(s) would be deleted (not confirmed)."
    removed = store.clear_completed()
    return _with_storage_warning(store, f"{removed} completed task(s) deleted!")


async def tasklist_set_filter(params: SetFilterInput, store: TaskStore) -> str:
    """
    Change the active filter used by tasklist_list.

    The filter lasts for the current session only.

    Args:
        params: SetFilterInput with the filter to apply
        store: Task store the tool is bound to

    Returns:
        Confirmation with the number of tasks now shown
    """
    store.set_filter(params.filter)
    shown = len(store.get_filtered())
    return f"Filter set to '{params.filter.value}'. {shown} task(s) shown."


async def tasklist_list(params: ListTasksInput, store: TaskStore) -> str:
    """
    List tasks, newest first.

    USE THIS WHEN:
    - Looking at all tasks, or only completed / pending ones
    - Finding task IDs for toggle or delete

    DO NOT USE WHEN:
    - You have a specific task ID → use tasklist_get instead
    - You only need counts → use tasklist_stats instead

    Args:
        params: ListTasksInput containing filter, limit, and response_format
        store: Task store the tool is bound to

    Returns:
        Formatted list of tasks (markdown, concise, or JSON)

    Examples:
        - Active filter: params with default values
        - Pending only: params with filter="pending"
    """
    task_filter = params.filter or store.active_filter
    tasks = store.get_filtered(task_filter)
    total_count = len(tasks)

    if params.limit and len(tasks) > params.limit:
        tasks = tasks[: params.limit]

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(
            {
                "filter": task_filter.value,
                "total": total_count,
                "count": len(tasks),
                "tasks": [t.model_dump(by_alias=True) for t in tasks],
            },
            indent=2,
        )

    if params.response_format == ResponseFormat.CONCISE:
        return _format_tasks_concise(tasks, task_filter.value)

    title = "Tasks"
    if task_filter != TaskFilter.ALL:
        title += f" ({task_filter.value})"
    return _format_tasks_markdown(tasks, title)


async def tasklist_get(params: GetTaskInput, store: TaskStore) -> str:
    """
    Retrieve full details for a single task by ID.

    Args:
        params: GetTaskInput containing task_id and response_format
        store: Task store the tool is bound to

    Returns:
        Detailed task information (markdown, concise, or JSON)
    """
    try:
        task = store.get_task(params.task_id)
    except TaskStoreError as e:
        return f"Error: {e}\nTip: Use tasklist_list to find valid task IDs."

    if params.response_format == ResponseFormat.JSON:
        return json.dumps(task.model_dump(by_alias=True), indent=2)

    if params.response_format == ResponseFormat.CONCISE:
        return _format_task_concise(task)

    return _format_task_markdown(task)


async def tasklist_stats(params: StatsInput, store: TaskStore) -> str:
    """
    Count total, completed and pending tasks.

    Args:
        params: StatsInput with response_format
        store: Task store the tool is bound to

    Returns:
        Task counts (markdown or JSON)
    """
    stats = store.get_stats()
    if params.response_format == ResponseFormat.JSON:
        return json.dumps(stats.model_dump(), indent=2)
    return _format_stats_markdown(stats)


async def tasklist_export(params: ExportTasksInput, store: TaskStore) -> str:
    """
    Export all tasks as a versioned JSON document.

    With a directory the document is written to todo-tasks-<date>.json there;
    without one it is returned inline.

    Args:
        params: ExportTasksInput with the optional directory
        store: Task store the tool is bound to

    Returns:
        The export document, or the path it was written to
    """
    if params.directory is None:
        return store.export_snapshot()

    try:
        path = store.export_to_file(params.directory)
    except OSError as e:
        return f"Error: Could not write export file - {type(e).__name__}: {e}"
    return f"Tasks exported successfully!\n{path}"


async def tasklist_import(params: ImportTasksInput, store: TaskStore) -> str:
    """
    Import tasks from an export document.

    MODES:
    - merge (default): keep current tasks, skip imported tasks whose text
      already exists, give the rest new IDs
    - replace: discard current tasks and use the imported ones as-is

    Args:
        params: ImportTasksInput with path or content, and mode
        store: Task store the tool is bound to

    Returns:
        How many tasks were imported, or an error message

    Examples:
        - From a file: params with path="todo-tasks-2024-01-01.json"
        - Replace everything: params with path="backup.json", mode="replace"
    """
    try:
        if params.path:
            count = store.import_from_file(params.path, params.mode)
        elif params.content:
            count = store.import_snapshot(params.content, params.mode)
        else:
            return "Error: Provide either a file path or the document content to import."
    except TaskStoreError as e:
        return f"Error importing tasks: {e}"
    except OSError as e:
        return f"Error: Could not read import file - {type(e).__name__}: {e}"

    message = f"{count} task(s) imported successfully!"
    if params.mode == ImportMode.REPLACE:
        message += " Previous tasks were replaced."
    return _with_storage_warning(store, message)


async def tasklist_refresh(params: RefreshInput, store: TaskStore) -> str:
    """
    Reload tasks from storage.

    Use this when another session may have changed the saved list. Whatever
    was saved last wins; unsaved in-memory changes are discarded.

    Args:
        params: RefreshInput (no fields)
        store: Task store the tool is bound to

    Returns:
        Number of tasks after reloading
    """
    error = store.refresh()
    message = f"Reloaded {len(store.tasks)} task(s) from storage."
    if error is not None:
        message += f"\nWarning: {error}"
    return message


def register_tools(server: FastMCP, store: TaskStore) -> None:
    """Register every task list tool on ``server``, bound to ``store``."""

    @server.tool(
        name="tasklist_add",
        description=tasklist_add.__doc__,
        annotations=ToolAnnotations(
            title="Add Task",
            readOnlyHint=False,
            destructiveHint=False,
            idempotentHint=False,
            openWorldHint=False,
        ),
    )
    async def add(params: AddTaskInput) -> str:
        return await tasklist_add(params, store)

    @server.tool(
        name="tasklist_toggle",
        description=tasklist_toggle.__doc__,
        annotations=ToolAnnotations(
            title="Toggle Task",
            readOnlyHint=False,
            destructiveHint=False,
            idempotentHint=False,
            openWorldHint=False,
        ),
    )
    async def toggle(params: ToggleTaskInput) -> str:
        return await tasklist_toggle(params, store)

    @server.tool(
        name="tasklist_delete",
        description=tasklist_delete.__doc__,
        annotations=ToolAnnotations(
            title="Delete Task",
            readOnlyHint=False,
            destructiveHint=True,
            idempotentHint=True,
            openWorldHint=False,
        ),
    )
    async def delete(params: DeleteTaskInput) -> str:
        return await tasklist_delete(params, store)

    @server.tool(
        name="tasklist_clear_completed",
        description=tasklist_clear_completed.__doc__,
        annotations=ToolAnnotations(
            title="Clear Completed Tasks",
            readOnlyHint=False,
            destructiveHint=True,
            idempotentHint=True,
            openWorldHint=False,
        ),
    )
    async def clear_completed(params: ClearCompletedInput) -> str:
        return await tasklist_clear_completed(params, store)

    @server.tool(
        name="tasklist_set_filter",
        description=tasklist_set_filter.__doc__,
        annotations=ToolAnnotations(
            title="Set Filter",
            readOnlyHint=False,
            destructiveHint=False,
            idempotentHint=True,
            openWorldHint=False,
        ),
    )
    async def set_filter(params: SetFilterInput) -> str:
        return await tasklist_set_filter(params, store)

    @server.tool(
        name="tasklist_list",
        description=tasklist_list.__doc__,
        annotations=ToolAnnotations(
            title="List Tasks",
            readOnlyHint=True,
            destructiveHint=False,
            idempotentHint=True,
            openWorldHint=False,
        ),
    )
    async def list_tasks(params: ListTasksInput) -> str:
        return await tasklist_list(params, store)

    @server.tool(
        name="tasklist_get",
        description=tasklist_get.__doc__,
        annotations=ToolAnnotations(
            title="Get Task Details",
            readOnlyHint=True,
            destructiveHint=False,
            idempotentHint=True,
            openWorldHint=False,
        ),
    )
    async def get(params: GetTaskInput) -> str:
        return await tasklist_get(params, store)

    @server.tool(
        name="tasklist_stats",
        description=tasklist_stats.__doc__,
        annotations=ToolAnnotations(
            title="Task Statistics",
            readOnlyHint=True,
            destructiveHint=False,
            idempotentHint=True,
            openWorldHint=False,
        ),
    )
    async def stats(params: StatsInput) -> str:
        return await tasklist_stats(params, store)

    @server.tool(
        name="tasklist_export",
        description=tasklist_export.__doc__,
        annotations=ToolAnnotations(
            title="Export Tasks",
            readOnlyHint=True,
            destructiveHint=False,
            idempotentHint=True,
            openWorldHint=False,
        ),
    )
    async def export(params: ExportTasksInput) -> str:
        return await tasklist_export(params, store)

    @server.tool(
        name="tasklist_import",
        description=tasklist_import.__doc__,
        annotations=ToolAnnotations(
            title="Import Tasks",
            readOnlyHint=False,
            destructiveHint=True,
            idempotentHint=False,
            openWorldHint=False,
        ),
    )
    async def import_tasks(params: ImportTasksInput) -> str:
        return await tasklist_import(params, store)

    @server.tool(
        name="tasklist_refresh",
        description=tasklist_refresh.__doc__,
        annotations=ToolAnnotations(
            title="Reload Tasks",
            readOnlyHint=False,
            destructiveHint=False,
            idempotentHint=True,
            openWorldHint=False,
        ),
    )
    async def refresh(params: RefreshInput) -> str:
        return await tasklist_refresh(params, store)
