"""Task model and its completion state machine."""

from datetime import date, datetime
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.tasktracker.models.base import utc_now


class Task(SQLModel, table=True):
    """Task entity belonging to one project.

    ``completed_at`` is set exactly when ``completed`` is True. Only
    ``mark_completed`` and ``mark_incomplete`` change either field.
    """

    __tablename__ = "tasks"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=200)
    description: str | None = Field(default=None)
    completed: bool = Field(default=False, index=True)
    due_date: date | None = Field(default=None, index=True)
    completed_at: datetime | None = Field(default=None)
    project_id: UUID = Field(foreign_key="projects.id", ondelete="CASCADE", index=True)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def mark_completed(self, now: datetime | None = None) -> None:
        """Complete the task. Re-marking a completed task refreshes completed_at."""
        self.completed = True
        self.completed_at = now or utc_now()

    def mark_incomplete(self) -> None:
        """Reopen the task and clear completed_at. No-op if already open."""
        self.completed = False
        self.completed_at = None
