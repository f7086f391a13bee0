from src.tasktracker.services.auth_service import AuthService
from src.tasktracker.services.ownership import OwnershipGuard
from src.tasktracker.services.principal import PrincipalResolver
from src.tasktracker.services.project_service import ProjectService
from src.tasktracker.services.task_service import TaskService

__all__ = [
    "AuthService",
    "OwnershipGuard",
    "PrincipalResolver",
    "ProjectService",
    "TaskService",
]
