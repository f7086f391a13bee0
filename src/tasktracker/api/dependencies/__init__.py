"""FastAPI dependency injection definitions.

Re-exports all dependencies for convenience.
"""

from src.tasktracker.api.dependencies.auth import CurrentUser, get_current_user
from src.tasktracker.api.dependencies.db import DBSession, get_db_session
from src.tasktracker.api.dependencies.repositories import (
    ProjectRepo,
    TaskRepo,
    UserRepo,
    get_project_repository,
    get_task_repository,
    get_user_repository,
)
from src.tasktracker.api.dependencies.services import (
    AuthServiceDep,
    OwnershipGuardDep,
    ProjectServiceDep,
    TaskServiceDep,
    TokenServiceDep,
    get_auth_service,
    get_ownership_guard,
    get_project_service,
    get_task_service,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Auth
    "CurrentUser",
    "get_current_user",
    # Repositories
    "ProjectRepo",
    "TaskRepo",
    "UserRepo",
    "get_project_repository",
    "get_task_repository",
    "get_user_repository",
    # Services
    "AuthServiceDep",
    "OwnershipGuardDep",
    "ProjectServiceDep",
    "TaskServiceDep",
    "TokenServiceDep",
    "get_auth_service",
    "get_ownership_guard",
    "get_project_service",
    "get_task_service",
]
