"""Task schemas for API request/response."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.tasktracker.core.progress import is_overdue
from src.tasktracker.models import Task
from src.tasktracker.models.base import utc_now


class TaskCreate(BaseModel):
    """Schema for creating a task."""

    title: str = Field(min_length=3, max_length=200)
    description: str | None = Field(default=None, max_length=5000)
    due_date: date | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Task title cannot be empty or whitespace only")
        return v


class TaskUpdate(BaseModel):
    """Schema for updating a task. Omitted or null fields are left unchanged.

    ``completed`` goes through the completion state machine rather than
    being written directly.
    """

    title: str | None = Field(default=None, min_length=3, max_length=200)
    description: str | None = Field(default=None, max_length=5000)
    due_date: date | None = None
    completed: bool | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str | None) -> str | None:
        if v is not None:
            v = v.strip()
            if not v:
                raise ValueError("Task title cannot be empty or whitespace only")
        return v


class TaskRead(BaseModel):
    """Schema for reading a task, including the derived overdue flag."""

    id: UUID
    title: str
    description: str | None
    completed: bool
    due_date: date | None
    overdue: bool
    project_id: UUID
    completed_at: datetime | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, task: Task, today: date | None = None) -> "TaskRead":
        if today is None:
            today = utc_now().date()
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            completed=task.completed,
            due_date=task.due_date,
            overdue=is_overdue(task.due_date, task.completed, today),
            project_id=task.project_id,
            completed_at=task.completed_at,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )
