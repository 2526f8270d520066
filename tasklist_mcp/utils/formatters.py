"""Formatting utilities for task output."""

from tasklist_mcp.models.task import Task, TaskStats


def _task_date_label(task: Task) -> str | None:
    return task.formatted_task_date or task.task_date


def _format_task_concise(task: Task) -> str:
    """
    Format a single task in one line.

    Output: "#5: [x] Buy milk (January 1, 2024)"
    """
    mark = "x" if task.completed else " "
    text = task.text[:50]
    label = _task_date_label(task)
    if label:
        return f"#{task.id}: [{mark}] {text} ({label})"
    return f"#{task.id}: [{mark}] {text}"


def _format_tasks_concise(tasks: list[Task], title: str | None = None) -> str:
    """
    Format a list of tasks one per line.

    Output:
    2 task(s) | pending
    #2: [ ] Walk dog (January 2, 2024)
    #1: [ ] Buy milk (January 1, 2024)
    """
    if not tasks:
        return "0 tasks"

    header = f"{len(tasks)} task(s)"
    if title:
        header = f"{len(tasks)} task(s) | {title}"

    lines = [header]
    for task in tasks:
        lines.append(_format_task_concise(task))

    return "\n".join(lines)


def _format_task_markdown(task: Task) -> str:
    """Format a single task as markdown."""
    icon = "✅" if task.completed else "⬜"
    lines = [f"### {icon} [{task.id}] {task.text}"]

    details = []
    label = _task_date_label(task)
    if label:
        details.append(f"**Date**: {label}")
    details.append(f"**Status**: {'Completed' if task.completed else 'Pending'}")
    if task.created_at:
        details.append(f"**Created**: {task.created_at[:10]}")
    if task.completed_at:
        details.append(f"**Completed**: {task.completed_at[:10]}")

    lines.append(" | ".join(details))
    return "\n".join(lines)


def _format_tasks_markdown(tasks: list[Task], title: str = "Tasks") -> str:
    """Format a list of tasks as markdown."""
    if not tasks:
        return f"# {title}\n\nNo tasks found."

    lines = [f"# {title}", f"*{len(tasks)} task(s)*", ""]

    for task in tasks:
        lines.append(_format_task_markdown(task))
        lines.append("")

    return "\n".join(lines)


def _format_stats_markdown(stats: TaskStats) -> str:
    return "\n".join(
        [
            "# Task Summary",
            "",
            f"- **Total**: {stats.total}",
            f"- **Completed**: {stats.completed}",
            f"- **Pending**: {stats.pending}",
        ]
    )
