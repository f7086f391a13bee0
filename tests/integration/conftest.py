"""Integration test fixtures for database and HTTP client operations.

Each test gets a fresh in-memory SQLite database. StaticPool keeps a single
connection alive so every session in the test sees the same database.
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from src.tasktracker.api.dependencies import get_db_session
from src.tasktracker.core.db import create_schema, get_session
from src.tasktracker.core.security import get_token_service
from src.tasktracker.main import create_app
from src.tasktracker.models import Project, User
from src.tasktracker.repositories import ProjectRepository, TaskRepository, UserRepository
from src.tasktracker.services import (
    AuthService,
    OwnershipGuard,
    ProjectService,
    TaskService,
)
from tests.factories import ProjectFactory, UserFactory


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Create a test database engine with all tables created."""
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_schema(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for database operations.

    The session does not auto-commit; services commit through ``atomic``.
    """
    async with get_session(engine) as session:
        yield session


@pytest.fixture
async def client(engine: AsyncEngine) -> AsyncGenerator[AsyncClient]:
    """HTTP client bound to the app, with request sessions on the test engine."""
    app = create_app()

    async def _get_test_session() -> AsyncGenerator[AsyncSession]:
        async with get_session(engine) as session:
            yield session

    app.dependency_overrides[get_db_session] = _get_test_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# --- Service fixtures ---


@pytest.fixture
def guard(db_session: AsyncSession) -> OwnershipGuard:
    return OwnershipGuard(ProjectRepository(db_session), TaskRepository(db_session))


@pytest.fixture
def auth_service(db_session: AsyncSession) -> AuthService:
    return AuthService(UserRepository(db_session), db_session, get_token_service())


@pytest.fixture
def project_service(db_session: AsyncSession, guard: OwnershipGuard) -> ProjectService:
    return ProjectService(
        ProjectRepository(db_session), TaskRepository(db_session), db_session, guard
    )


@pytest.fixture
def task_service(db_session: AsyncSession, guard: OwnershipGuard) -> TaskService:
    return TaskService(TaskRepository(db_session), db_session, guard)


# --- Data fixtures ---


@pytest.fixture
async def alice(db_session: AsyncSession) -> User:
    user = UserFactory.build(email="alice@example.com", display_name="Alice")
    db_session.add(user)
    await db_session.commit()
    return user


@pytest.fixture
async def bob(db_session: AsyncSession) -> User:
    user = UserFactory.build(email="bob@example.com", display_name="Bob")
    db_session.add(user)
    await db_session.commit()
    return user


@pytest.fixture
async def alice_project(db_session: AsyncSession, alice: User) -> Project:
    project = ProjectFactory.build(owner_id=alice.id, title="Alice's project")
    db_session.add(project)
    await db_session.commit()
    return project

