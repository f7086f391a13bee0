"""Repository layer - data access abstraction."""

from src.tasktracker.repositories.base import BaseRepository
from src.tasktracker.repositories.project import ProjectRepository
from src.tasktracker.repositories.task import TaskRepository
from src.tasktracker.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "ProjectRepository",
    "TaskRepository",
    "UserRepository",
]
