"""Shared enums for models."""

from enum import Enum


class UserRole(str, Enum):
    """Account role. ADMIN currently grants nothing beyond USER."""

    USER = "USER"
    ADMIN = "ADMIN"
