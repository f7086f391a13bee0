"""Task service - lifecycle of the tasks inside a project."""

from collections.abc import Callable
from datetime import datetime
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.tasktracker.core.db import atomic
from src.tasktracker.core.logging import get_logger
from src.tasktracker.models import Task
from src.tasktracker.models.base import utc_now
from src.tasktracker.repositories import TaskRepository
from src.tasktracker.schemas.task import TaskCreate, TaskUpdate
from src.tasktracker.services.ownership import OwnershipGuard

logger = get_logger(__name__)


class TaskService:
    """Task operations.

    Every call names the project and the owner explicitly; the ownership
    guard runs first, inside the same transaction as any write.
    """

    def __init__(
        self,
        task_repo: TaskRepository,
        session: AsyncSession,
        guard: OwnershipGuard,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.task_repo = task_repo
        self.session = session
        self.guard = guard
        self._clock = clock

    async def create(self, project_id: UUID, owner_id: UUID, data: TaskCreate) -> Task:
        """Create an open task in one of the owner's projects."""
        async with atomic(self.session):
            # Lock the project so a concurrent delete cannot orphan the task
            await self.guard.assert_project_ownership(project_id, owner_id, for_update=True)
            now = self._clock()
            task = Task(
                title=data.title,
                description=data.description,
                due_date=data.due_date,
                project_id=project_id,
                created_at=now,
                updated_at=now,
            )
            self.task_repo.add(task)

        logger.info("Task created", task_id=str(task.id), project_id=str(project_id))
        return task

    async def list_tasks(self, project_id: UUID, owner_id: UUID) -> list[Task]:
        """All tasks of the project, newest first."""
        await self.guard.assert_project_ownership(project_id, owner_id)
        return await self.task_repo.list_by_project(project_id)

    async def get(self, project_id: UUID, task_id: UUID, owner_id: UUID) -> Task:
        return await self.guard.assert_task_access(project_id, task_id, owner_id)

    async def update(
        self,
        project_id: UUID,
        task_id: UUID,
        owner_id: UUID,
        data: TaskUpdate,
    ) -> Task:
        """Apply a partial update.

        Omitted or null fields keep their value. A present ``completed``
        flag is applied through mark_completed / mark_incomplete.
        """
        async with atomic(self.session):
            task = await self.guard.assert_task_access(
                project_id, task_id, owner_id, for_update=True
            )
            now = self._clock()
            changes = data.model_dump(exclude_unset=True, exclude_none=True)
            completed = changes.pop("completed", None)

            for field, value in changes.items():
                setattr(task, field, value)

            if completed is True:
                task.mark_completed(now)
            elif completed is False:
                task.mark_incomplete()

            task.updated_at = now

        logger.info("Task updated", task_id=str(task_id), project_id=str(project_id))
        return task

    async def mark_completed(self, project_id: UUID, task_id: UUID, owner_id: UUID) -> Task:
        """Complete a task. Completing it again refreshes completed_at."""
        async with atomic(self.session):
            task = await self.guard.assert_task_access(
                project_id, task_id, owner_id, for_update=True
            )
            now = self._clock()
            task.mark_completed(now)
            task.updated_at = now

        logger.info("Task completed", task_id=str(task_id), project_id=str(project_id))
        return task

    async def mark_incomplete(self, project_id: UUID, task_id: UUID, owner_id: UUID) -> Task:
        async with atomic(self.session):
            task = await self.guard.assert_task_access(
                project_id, task_id, owner_id, for_update=True
            )
            task.mark_incomplete()
            task.updated_at = self._clock()

        logger.info("Task reopened", task_id=str(task_id), project_id=str(project_id))
        return task

    async def delete(self, project_id: UUID, task_id: UUID, owner_id: UUID) -> None:
        async with atomic(self.session):
            task = await self.guard.assert_task_access(
                project_id, task_id, owner_id, for_update=True
            )
            await self.task_repo.delete(task)

        logger.info("Task deleted", task_id=str(task_id), project_id=str(project_id))
