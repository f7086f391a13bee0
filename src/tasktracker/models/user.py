"""User model - the principal every project is scoped to."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.tasktracker.models.base import utc_now
from src.tasktracker.models.enums import UserRole


class User(SQLModel, table=True):
    """Registered account. Email is the token subject and is matched exactly."""

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(max_length=100, unique=True, index=True)
    password_hash: str = Field(max_length=255)
    display_name: str = Field(max_length=100)
    role: str = Field(default=UserRole.USER.value, max_length=20)
    enabled: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
