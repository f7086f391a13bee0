"""Project service - lifecycle of a user's projects."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.tasktracker.core.db import atomic
from src.tasktracker.core.logging import get_logger
from src.tasktracker.core.progress import ProgressSummary, progress_summary
from src.tasktracker.models import Project
from src.tasktracker.models.base import utc_now
from src.tasktracker.repositories import ProjectRepository, TaskRepository
from src.tasktracker.schemas.project import ProjectCreate, ProjectUpdate
from src.tasktracker.services.ownership import OwnershipGuard

logger = get_logger(__name__)


class ProjectService:
    """Project operations, always scoped to an explicit owner id."""

    def __init__(
        self,
        project_repo: ProjectRepository,
        task_repo: TaskRepository,
        session: AsyncSession,
        guard: OwnershipGuard,
    ):
        self.project_repo = project_repo
        self.task_repo = task_repo
        self.session = session
        self.guard = guard

    async def create(self, owner_id: UUID, data: ProjectCreate) -> Project:
        """Create a project owned by ``owner_id``."""
        project = Project(
            title=data.title,
            description=data.description,
            owner_id=owner_id,
        )
        async with atomic(self.session):
            self.project_repo.add(project)

        logger.info("Project created", project_id=str(project.id))
        return project

    async def list_projects(self, owner_id: UUID) -> list[Project]:
        """All projects of ``owner_id``, newest first."""
        return await self.project_repo.list_by_owner(owner_id)

    async def list_with_progress(self, owner_id: UUID) -> list[tuple[Project, ProgressSummary]]:
        """All projects of ``owner_id`` with their task counts, newest first."""
        projects = await self.project_repo.list_by_owner(owner_id)
        counts = await self.task_repo.counts_by_projects([p.id for p in projects])
        return [(p, progress_summary(*counts.get(p.id, (0, 0)))) for p in projects]

    async def get(self, project_id: UUID, owner_id: UUID) -> Project:
        """Get a project owned by ``owner_id``.

        Raises:
            ProjectNotAccessibleError: missing or owned by someone else.
        """
        return await self.guard.assert_project_ownership(project_id, owner_id)

    async def get_with_progress(
        self, project_id: UUID, owner_id: UUID
    ) -> tuple[Project, ProgressSummary]:
        project = await self.guard.assert_project_ownership(project_id, owner_id)
        return project, await self._summary(project.id)

    async def progress(self, project_id: UUID, owner_id: UUID) -> ProgressSummary:
        """Completion statistics for one of the owner's projects."""
        await self.guard.assert_project_ownership(project_id, owner_id)
        return await self._summary(project_id)

    async def update(self, project_id: UUID, owner_id: UUID, data: ProjectUpdate) -> Project:
        """Apply a partial update. Omitted or null fields keep their value."""
        async with atomic(self.session):
            project = await self.guard.assert_project_ownership(
                project_id, owner_id, for_update=True
            )
            for field, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
                setattr(project, field, value)
            project.updated_at = utc_now()

        logger.info("Project updated", project_id=str(project_id))
        return project

    async def delete(self, project_id: UUID, owner_id: UUID) -> None:
        """Delete a project and all of its tasks in one transaction."""
        async with atomic(self.session):
            project = await self.guard.assert_project_ownership(
                project_id, owner_id, for_update=True
            )
            deleted_tasks = await self.task_repo.delete_all_by_project(project.id)
            await self.project_repo.delete(project)

        logger.info(
            "Project deleted",
            project_id=str(project_id),
            deleted_tasks=deleted_tasks,
        )

    async def _summary(self, project_id: UUID) -> ProgressSummary:
        total = await self.task_repo.count_by_project(project_id)
        completed = await self.task_repo.count_completed_by_project(project_id)
        return progress_summary(total, completed)
