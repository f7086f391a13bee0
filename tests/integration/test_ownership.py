"""Tests for owner-scoped access to projects and tasks."""

from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from src.tasktracker.core.exceptions import (
    AuthorizationError,
    NotFoundError,
    ProjectNotAccessibleError,
)
from src.tasktracker.models import Project, User
from src.tasktracker.schemas import ProjectUpdate, TaskCreate, TaskUpdate
from src.tasktracker.services import OwnershipGuard, ProjectService, TaskService
from tests.factories import ProjectFactory, TaskFactory

pytestmark = pytest.mark.integration


class TestProjectOwnership:
    async def test_owner_passes(self, guard: OwnershipGuard, alice: User, alice_project: Project):
        project = await guard.assert_project_ownership(alice_project.id, alice.id)
        assert project.id == alice_project.id

    async def test_other_user_denied(
        self, guard: OwnershipGuard, bob: User, alice_project: Project
    ):
        with pytest.raises(AuthorizationError):
            await guard.assert_project_ownership(alice_project.id, bob.id)

    async def test_foreign_and_missing_projects_look_the_same(
        self, guard: OwnershipGuard, bob: User, alice_project: Project
    ):
        with pytest.raises(ProjectNotAccessibleError) as foreign:
            await guard.assert_project_ownership(alice_project.id, bob.id)
        with pytest.raises(ProjectNotAccessibleError) as missing:
            await guard.assert_project_ownership(uuid4(), bob.id)

        assert foreign.value.detail == missing.value.detail

    async def test_other_user_cannot_list_or_count(
        self, project_service: ProjectService, bob: User, alice_project: Project
    ):
        assert await project_service.list_projects(bob.id) == []
        with pytest.raises(ProjectNotAccessibleError):
            await project_service.progress(alice_project.id, bob.id)

    async def test_other_user_cannot_mutate(
        self,
        db_session: AsyncSession,
        project_service: ProjectService,
        bob: User,
        alice_project: Project,
    ):
        # A failed mutation rolls back and expires loaded objects; keep plain ids
        project_id = alice_project.id
        bob_id = bob.id

        with pytest.raises(ProjectNotAccessibleError):
            await project_service.update(project_id, bob_id, ProjectUpdate(title="Hijacked"))
        with pytest.raises(ProjectNotAccessibleError):
            await project_service.delete(project_id, bob_id)

        project = await db_session.get(Project, project_id)
        assert project is not None
        assert project.title == "Alice's project"


class TestTaskScoping:
    async def test_task_reachable_through_its_project(
        self,
        db_session: AsyncSession,
        guard: OwnershipGuard,
        alice: User,
        alice_project: Project,
    ):
        task = TaskFactory.build(project_id=alice_project.id)
        db_session.add(task)
        await db_session.commit()

        found = await guard.assert_task_access(alice_project.id, task.id, alice.id)

        assert found.id == task.id

    async def test_task_under_other_project_of_same_owner_not_found(
        self,
        db_session: AsyncSession,
        task_service: TaskService,
        alice: User,
        alice_project: Project,
    ):
        other_project = ProjectFactory.build(owner_id=alice.id)
        task = TaskFactory.build(project_id=alice_project.id)
        db_session.add_all([other_project, task])
        await db_session.commit()

        with pytest.raises(NotFoundError) as exc_info:
            await task_service.get(other_project.id, task.id, alice.id)

        assert not isinstance(exc_info.value, ProjectNotAccessibleError)

    async def test_other_user_cannot_touch_tasks(
        self,
        db_session: AsyncSession,
        task_service: TaskService,
        bob: User,
        alice_project: Project,
    ):
        project_id = alice_project.id
        owner_id = alice_project.owner_id
        task = TaskFactory.build(project_id=project_id)
        db_session.add(task)
        await db_session.commit()
        task_id = task.id
        bob_id = bob.id

        with pytest.raises(ProjectNotAccessibleError):
            await task_service.list_tasks(project_id, bob_id)
        with pytest.raises(ProjectNotAccessibleError):
            await task_service.create(project_id, bob_id, TaskCreate(title="Injected"))
        with pytest.raises(ProjectNotAccessibleError):
            await task_service.update(project_id, task_id, bob_id, TaskUpdate(completed=True))
        with pytest.raises(ProjectNotAccessibleError):
            await task_service.delete(project_id, task_id, bob_id)

        refreshed = await task_service.get(project_id, task_id, owner_id)
        assert refreshed.completed is False

