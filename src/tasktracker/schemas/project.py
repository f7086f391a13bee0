"""Project schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.tasktracker.core.progress import ProgressSummary
from src.tasktracker.models import Project


class ProjectCreate(BaseModel):
    """Schema for creating a project."""

    title: str = Field(min_length=3, max_length=200)
    description: str | None = Field(default=None, max_length=5000)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Project title cannot be empty or whitespace only")
        return v


class ProjectUpdate(BaseModel):
    """Schema for updating a project. Omitted or null fields are left unchanged."""

    title: str | None = Field(default=None, min_length=3, max_length=200)
    description: str | None = Field(default=None, max_length=5000)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str | None) -> str | None:
        if v is not None:
            v = v.strip()
            if not v:
                raise ValueError("Project title cannot be empty or whitespace only")
        return v


class ProjectRead(BaseModel):
    """Schema for reading a project together with its task counts."""

    id: UUID
    title: str
    description: str | None
    owner_id: UUID
    total_tasks: int
    completed_tasks: int
    progress_percentage: float
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, project: Project, summary: ProgressSummary) -> "ProjectRead":
        return cls(
            id=project.id,
            title=project.title,
            description=project.description,
            owner_id=project.owner_id,
            total_tasks=summary.total,
            completed_tasks=summary.completed,
            progress_percentage=summary.percentage,
            created_at=project.created_at,
            updated_at=project.updated_at,
        )


class ProjectProgressRead(BaseModel):
    """Completion statistics for one project."""

    project_id: UUID
    project_title: str
    total_tasks: int
    completed_tasks: int
    incomplete_tasks: int
    progress_percentage: float

    @classmethod
    def from_model(cls, project: Project, summary: ProgressSummary) -> "ProjectProgressRead":
        return cls(
            project_id=project.id,
            project_title=project.title,
            total_tasks=summary.total,
            completed_tasks=summary.completed,
            incomplete_tasks=summary.incomplete,
            progress_percentage=summary.percentage,
        )
