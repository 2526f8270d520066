"""Core task models for the task list."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

EXPORT_VERSION = "1.0"


class Task(BaseModel):
    """A single to-do item.

    Serialized with camelCase keys (``createdAt``, ``taskDate``...) so stored
    snapshots and export files stay compatible with the browser widget's
    format. Either the wire names or the field names are accepted on input.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int
    text: str = Field(..., min_length=1)
    completed: bool = False
    created_at: str | None = Field(default=None, alias="createdAt")
    task_date: str | None = Field(default=None, alias="taskDate")
    formatted_task_date: str | None = Field(default=None, alias="formattedTaskDate")
    completed_at: str | None = Field(default=None, alias="completedAt")

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Task text cannot be empty")
        return v

    @model_validator(mode="after")
    def drop_stray_completion(self) -> Task:
        # A pending task never carries a completion timestamp.
        if not self.completed:
            self.completed_at = None
        return self

    @property
    def key(self) -> str:
        """Normalized text used for duplicate detection."""
        return self.text.strip().lower()


class TaskStats(BaseModel):
    """Derived counts over the whole task list."""

    total: int = 0
    completed: int = 0
    pending: int = 0


class StoredSnapshot(BaseModel):
    """What the store writes to its storage key after every mutation."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    tasks: list[Task] = Field(default_factory=list)
    task_id_counter: int = Field(default=1, alias="taskIdCounter")
    last_saved: str | None = Field(default=None, alias="lastSaved")

    @field_validator("task_id_counter", mode="before")
    @classmethod
    def default_counter(cls, v: object) -> object:
        return v or 1


class ExportDocument(BaseModel):
    """Self-describing, versioned export file."""

    model_config = ConfigDict(populate_by_name=True)

    tasks: list[Task] = Field(default_factory=list)
    export_date: str = Field(..., alias="exportDate")
    version: str = EXPORT_VERSION


class ImportDocument(BaseModel):
    """Minimal shape an import file must have: a list of task records."""

    model_config = ConfigDict(extra="ignore")

    tasks: list[Task]
