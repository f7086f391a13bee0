"""Database utilities - engine, session, transaction boundary."""

from src.tasktracker.core.db.engine import create_schema, dispose_engine, get_engine
from src.tasktracker.core.db.session import atomic, get_session

__all__ = [
    # Engine
    "create_schema",
    "dispose_engine",
    "get_engine",
    # Session
    "atomic",
    "get_session",
]
