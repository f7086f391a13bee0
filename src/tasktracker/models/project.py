"""Project model - owned by exactly one user."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.tasktracker.models.base import utc_now


class Project(SQLModel, table=True):
    """Project entity.

    Ownership is the ``owner_id`` column only; there is no relationship
    attribute back to the user or forward to the tasks.
    """

    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: str = Field(max_length=200)
    description: str | None = Field(default=None)
    owner_id: UUID = Field(foreign_key="users.id", ondelete="CASCADE", index=True)
    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)
