"""Database engine management."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlmodel import SQLModel

from src.tasktracker.core.config import get_settings

_engine: AsyncEngine | None = None


def _get_engine_options(database_url: str) -> dict[str, Any]:
    """Pool options; SQLite (tests, local dev) does not take pool sizing."""
    if database_url.startswith("sqlite"):
        return {}
    settings = get_settings()
    return {
        "pool_size": settings.database_pool_size,
        "max_overflow": settings.database_max_overflow,
        "pool_pre_ping": True,
    }


def get_engine() -> AsyncEngine:
    """Get or create the database engine singleton."""
    global _engine
    if _engine is None:
        settings = get_settings()
        _engine = create_async_engine(
            settings.database_url,
            **_get_engine_options(settings.database_url),
        )
    return _engine


async def dispose_engine() -> None:
    """Dispose the database engine. Call during shutdown."""
    global _engine
    if _engine is not None:
        await _engine.dispose()
        _engine = None


async def create_schema(engine: AsyncEngine | None = None) -> None:
    """Create all tables known to SQLModel metadata (idempotent)."""
    # Register table models on the metadata before create_all
    import src.tasktracker.models  # noqa: F401

    if engine is None:
        engine = get_engine()
    async with engine.begin() as connection:
        await connection.run_sync(SQLModel.metadata.create_all)
