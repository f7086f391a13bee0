"""Tests for registration, login and principal resolution."""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from src.tasktracker.core.exceptions import AuthenticationError, ConflictError
from src.tasktracker.core.security import get_token_service
from src.tasktracker.models import User, UserRole
from src.tasktracker.repositories import UserRepository
from src.tasktracker.services import AuthService, PrincipalResolver
from tests.factories import DEFAULT_TEST_PASSWORD, UserFactory

pytestmark = pytest.mark.integration


class TestRegister:
    async def test_creates_enabled_user(self, auth_service: AuthService):
        user, token = await auth_service.register(
            "alice@example.com", DEFAULT_TEST_PASSWORD, "Alice"
        )

        assert user.email == "alice@example.com"
        assert user.role == UserRole.USER.value
        assert user.enabled is True
        assert user.password_hash != DEFAULT_TEST_PASSWORD
        assert get_token_service().verify(token).subject == "alice@example.com"

    async def test_duplicate_email_conflicts(self, auth_service: AuthService):
        await auth_service.register("alice@example.com", DEFAULT_TEST_PASSWORD, "Alice")

        with pytest.raises(ConflictError):
            await auth_service.register("alice@example.com", DEFAULT_TEST_PASSWORD, "Other")

    async def test_unique_violation_on_commit_conflicts(self, db_session: AsyncSession):
        """A concurrent registration that passes the pre-check still conflicts."""
        repo = UserRepository(db_session)
        service = AuthService(repo, db_session, get_token_service())
        await service.register("alice@example.com", DEFAULT_TEST_PASSWORD, "Alice")

        repo.exists_by_email = AsyncMock(return_value=False)  # type: ignore[method-assign]

        with pytest.raises(ConflictError):
            await service.register("alice@example.com", DEFAULT_TEST_PASSWORD, "Alice")

    async def test_email_matched_exactly(self, auth_service: AuthService):
        await auth_service.register("alice@example.com", DEFAULT_TEST_PASSWORD, "Alice")

        user, _ = await auth_service.register(
            "Alice@example.com", DEFAULT_TEST_PASSWORD, "Alice Again"
        )

        assert user.email == "Alice@example.com"


class TestLogin:
    async def test_valid_credentials(self, auth_service: AuthService, alice: User):
        user, token = await auth_service.login("alice@example.com", DEFAULT_TEST_PASSWORD)

        assert user.id == alice.id
        assert get_token_service().validate_for_subject(token, "alice@example.com")

    async def test_wrong_password(self, auth_service: AuthService, alice: User):
        with pytest.raises(AuthenticationError, match="Invalid email or password"):
            await auth_service.login("alice@example.com", "wrong-password-entirely")

    async def test_unknown_email(self, auth_service: AuthService):
        with pytest.raises(AuthenticationError, match="Invalid email or password"):
            await auth_service.login("nobody@example.com", DEFAULT_TEST_PASSWORD)

    async def test_disabled_account(self, auth_service: AuthService, db_session: AsyncSession):
        db_session.add(UserFactory.disabled(email="carol@example.com"))
        await db_session.commit()

        with pytest.raises(AuthenticationError, match="disabled"):
            await auth_service.login("carol@example.com", DEFAULT_TEST_PASSWORD)


class TestPrincipalResolver:
    async def test_resolves_subject_to_user(self, db_session: AsyncSession, alice: User):
        user = await PrincipalResolver(UserRepository(db_session)).resolve("alice@example.com")
        assert user.id == alice.id

    async def test_unknown_subject(self, db_session: AsyncSession):
        with pytest.raises(AuthenticationError):
            await PrincipalResolver(UserRepository(db_session)).resolve("ghost@example.com")

    async def test_disabled_user_is_still_resolved(self, db_session: AsyncSession):
        db_session.add(UserFactory.disabled(email="carol@example.com"))
        await db_session.commit()

        user = await PrincipalResolver(UserRepository(db_session)).resolve("carol@example.com")

        assert user.enabled is False
