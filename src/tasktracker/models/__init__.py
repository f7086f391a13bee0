"""Model exports.

Import from here: `from src.tasktracker.models import User, Project, Task`
"""

from src.tasktracker.models.enums import UserRole
from src.tasktracker.models.project import Project
from src.tasktracker.models.task import Task
from src.tasktracker.models.user import User

__all__ = [
    # Enums
    "UserRole",
    # Models
    "Project",
    "Task",
    "User",
]
