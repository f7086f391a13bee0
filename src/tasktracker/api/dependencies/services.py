"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.tasktracker.api.dependencies.db import DBSession
from src.tasktracker.api.dependencies.repositories import ProjectRepo, TaskRepo, UserRepo
from src.tasktracker.core.security import TokenService, get_token_service
from src.tasktracker.services import (
    AuthService,
    OwnershipGuard,
    ProjectService,
    TaskService,
)

TokenServiceDep = Annotated[TokenService, Depends(get_token_service)]


def get_ownership_guard(project_repo: ProjectRepo, task_repo: TaskRepo) -> OwnershipGuard:
    return OwnershipGuard(project_repo, task_repo)


OwnershipGuardDep = Annotated[OwnershipGuard, Depends(get_ownership_guard)]


def get_auth_service(
    user_repo: UserRepo,
    session: DBSession,
    token_service: TokenServiceDep,
) -> AuthService:
    return AuthService(user_repo, session, token_service)


def get_project_service(
    project_repo: ProjectRepo,
    task_repo: TaskRepo,
    session: DBSession,
    guard: OwnershipGuardDep,
) -> ProjectService:
    return ProjectService(project_repo, task_repo, session, guard)


def get_task_service(
    task_repo: TaskRepo,
    session: DBSession,
    guard: OwnershipGuardDep,
) -> TaskService:
    return TaskService(task_repo, session, guard)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
TaskServiceDep = Annotated[TaskService, Depends(get_task_service)]
