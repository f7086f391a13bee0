"""Repository for Project entity (owner-scoped)."""

from uuid import UUID

from sqlmodel import col, select

from src.tasktracker.models import Project
from src.tasktracker.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project entity.

    Every lookup that serves a user request is scoped by ``owner_id``.
    """

    model = Project

    async def list_by_owner(self, owner_id: UUID) -> list[Project]:
        """List an owner's projects, newest first."""
        result = await self.session.execute(
            select(Project)
            .where(Project.owner_id == owner_id)
            .order_by(col(Project.created_at).desc(), col(Project.id).desc())
        )
        return list(result.scalars().all())

    async def get_by_id_and_owner(
        self,
        project_id: UUID,
        owner_id: UUID,
        for_update: bool = False,
    ) -> Project | None:
        """Get a project only if it belongs to ``owner_id``.

        Args:
            for_update: Lock the row until the surrounding transaction ends.
        """
        query = select(Project).where(
            Project.id == project_id,
            Project.owner_id == owner_id,
        )
        if for_update:
            query = query.with_for_update()
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def exists_for_owner(self, project_id: UUID, owner_id: UUID) -> bool:
        """Check whether ``owner_id`` owns a project with this id."""
        project = await self.get_by_id_and_owner(project_id, owner_id)
        return project is not None
