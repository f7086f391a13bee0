"""Database session management and the transaction boundary."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from src.tasktracker.core.db.engine import get_engine


@asynccontextmanager
async def get_session(
    engine: AsyncEngine | None = None,
) -> AsyncGenerator[AsyncSession]:
    """Create a database session.

    Args:
        engine: Optional engine override for testing.
    """
    if engine is None:
        engine = get_engine()

    session_factory = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with session_factory() as session:
        yield session


@asynccontextmanager
async def atomic(session: AsyncSession) -> AsyncGenerator[AsyncSession]:
    """Run a check-then-mutate sequence as one transaction.

    Commits when the block exits normally, rolls back and re-raises on any
    exception. Ownership checks must run inside the same block as the write
    they guard.
    """
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
