"""Ownership guard - the single authorization chokepoint for projects and tasks."""

from uuid import UUID

from src.tasktracker.core.exceptions import NotFoundError, ProjectNotAccessibleError
from src.tasktracker.core.logging import get_logger
from src.tasktracker.models import Project, Task
from src.tasktracker.repositories import ProjectRepository, TaskRepository

logger = get_logger(__name__)


class OwnershipGuard:
    """Checks that the principal owns a project, and that a task lives in it.

    Must be called with repositories bound to the same session as the
    mutation it protects, inside that mutation's ``atomic`` block.
    """

    def __init__(self, project_repo: ProjectRepository, task_repo: TaskRepository):
        self.project_repo = project_repo
        self.task_repo = task_repo

    async def assert_project_ownership(
        self,
        project_id: UUID,
        user_id: UUID,
        for_update: bool = False,
    ) -> Project:
        """Return the project if ``user_id`` owns it.

        Existence and ownership are checked in one query, so a missing
        project and someone else's project raise the same error.

        Raises:
            ProjectNotAccessibleError: no project with this id and owner.
        """
        project = await self.project_repo.get_by_id_and_owner(
            project_id, user_id, for_update=for_update
        )
        if project is None:
            logger.info(
                "Project access denied",
                project_id=str(project_id),
                user_id=str(user_id),
            )
            raise ProjectNotAccessibleError()
        return project

    async def assert_task_access(
        self,
        project_id: UUID,
        task_id: UUID,
        user_id: UUID,
        for_update: bool = False,
    ) -> Task:
        """Return the task if it belongs to ``project_id`` and the user owns that project.

        A task that exists under a different project (even one owned by the
        same user) is not found on this path.

        Raises:
            ProjectNotAccessibleError: the project check failed.
            NotFoundError: no task with this id in the project.
        """
        await self.assert_project_ownership(project_id, user_id, for_update=for_update)
        task = await self.task_repo.get_by_id_and_project(
            task_id, project_id, for_update=for_update
        )
        if task is None:
            raise NotFoundError(f"Task {task_id} not found")
        return task
