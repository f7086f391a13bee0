from src.tasktracker.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from src.tasktracker.schemas.project import (
    ProjectCreate,
    ProjectProgressRead,
    ProjectRead,
    ProjectUpdate,
)
from src.tasktracker.schemas.task import TaskCreate, TaskRead, TaskUpdate
from src.tasktracker.schemas.user import UserRead

__all__ = [
    # Auth
    "AuthResponse",
    "LoginRequest",
    "RegisterRequest",
    # Project
    "ProjectCreate",
    "ProjectProgressRead",
    "ProjectRead",
    "ProjectUpdate",
    # Task
    "TaskCreate",
    "TaskRead",
    "TaskUpdate",
    # User
    "UserRead",
]
