"""Error taxonomy for the task store.

Every error is recoverable. Operations that raise leave the store exactly as
it was before the call.
"""

from tasklist_mcp.enums import ValidationReason

_VALIDATION_MESSAGES = {
    ValidationReason.EMPTY_TEXT: "Please enter a task!",
    ValidationReason.TOO_LONG: "Task is too long! Maximum 100 characters.",
    ValidationReason.MISSING_DATE: "Please select a date!",
    ValidationReason.DUPLICATE: "This task already exists!",
}


class TaskStoreError(Exception):
    """Base class for task store failures."""


class ValidationError(TaskStoreError):
    """Bad user input for a new task."""

    def __init__(self, reason: ValidationReason, message: str | None = None) -> None:
        self.reason = reason
        super().__init__(message or _VALIDATION_MESSAGES[reason])


class NotFoundError(TaskStoreError):
    """An operation referenced an unknown task id."""

    def __init__(self, task_id: int) -> None:
        self.task_id = task_id
        super().__init__(f"Task {task_id} not found.")


class InvalidFormatError(TaskStoreError):
    """An import document is not a list of task records."""


class PersistenceError(TaskStoreError):
    """Storage could not be read or written.

    The store never raises this out of save() or load(); it is returned and
    logged so callers can surface it as a warning.
    """
