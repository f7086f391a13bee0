"""Repository for Task entity (project-scoped)."""

from uuid import UUID

from sqlalchemy import case, delete, func
from sqlalchemy import select as sa_select
from sqlmodel import col, select

from src.tasktracker.models import Task
from src.tasktracker.repositories.base import BaseRepository


class TaskRepository(BaseRepository[Task]):
    """Repository for Task entity.

    Tasks are always addressed through their project; there is no lookup by
    task id alone on the request path.
    """

    model = Task

    async def list_by_project(self, project_id: UUID) -> list[Task]:
        """List a project's tasks, newest first."""
        result = await self.session.execute(
            select(Task)
            .where(Task.project_id == project_id)
            .order_by(col(Task.created_at).desc(), col(Task.id).desc())
        )
        return list(result.scalars().all())

    async def get_by_id_and_project(
        self,
        task_id: UUID,
        project_id: UUID,
        for_update: bool = False,
    ) -> Task | None:
        """Get a task only if it belongs to ``project_id``."""
        query = select(Task).where(Task.id == task_id, Task.project_id == project_id)
        if for_update:
            query = query.with_for_update()
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def count_by_project(self, project_id: UUID) -> int:
        """Count all tasks in a project."""
        result = await self.session.execute(
            sa_select(func.count()).select_from(Task).where(Task.project_id == project_id)
        )
        return result.scalar_one()

    async def count_completed_by_project(self, project_id: UUID) -> int:
        """Count completed tasks in a project."""
        result = await self.session.execute(
            sa_select(func.count())
            .select_from(Task)
            .where(Task.project_id == project_id, col(Task.completed).is_(True))
        )
        return result.scalar_one()

    async def counts_by_projects(self, project_ids: list[UUID]) -> dict[UUID, tuple[int, int]]:
        """Return ``{project_id: (total, completed)}`` in a single query.

        Projects without tasks are absent from the result.
        """
        if not project_ids:
            return {}
        completed = func.sum(case((col(Task.completed).is_(True), 1), else_=0))
        result = await self.session.execute(
            sa_select(col(Task.project_id), func.count(), completed)
            .where(col(Task.project_id).in_(project_ids))
            .group_by(col(Task.project_id))
        )
        return {row[0]: (int(row[1]), int(row[2] or 0)) for row in result.all()}

    async def delete_all_by_project(self, project_id: UUID) -> int:
        """Delete every task of a project (no commit). Returns rows deleted."""
        result = await self.session.execute(
            delete(Task).where(col(Task.project_id) == project_id)
        )
        return result.rowcount or 0
