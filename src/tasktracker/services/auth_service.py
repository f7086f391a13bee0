"""Authentication service - registration and login."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.tasktracker.core.exceptions import AuthenticationError, ConflictError
from src.tasktracker.core.logging import get_logger
from src.tasktracker.core.security import (
    DUMMY_PASSWORD_HASH,
    TokenService,
    hash_password,
    verify_password,
)
from src.tasktracker.models import User, UserRole
from src.tasktracker.repositories import UserRepository

logger = get_logger(__name__)


class AuthService:
    """Registers accounts and exchanges credentials for bearer tokens.

    Tokens are issued with the user's email as subject; PrincipalResolver
    maps it back to the account on every request.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        session: AsyncSession,
        token_service: TokenService,
    ):
        self.user_repo = user_repo
        self.session = session
        self.token_service = token_service

    async def register(self, email: str, password: str, display_name: str) -> tuple[User, str]:
        """Create a USER account and return it with a fresh access token.

        Raises:
            ConflictError: the email is already registered.
        """
        if await self.user_repo.exists_by_email(email):
            raise ConflictError("Email already registered")

        user = User(
            email=email,
            password_hash=hash_password(password),
            display_name=display_name,
            role=UserRole.USER.value,
            enabled=True,
        )
        self.user_repo.add(user)

        try:
            await self.session.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent registration for the same email
            await self.session.rollback()
            raise ConflictError("Email already registered") from e
        except Exception:
            await self.session.rollback()
            raise

        logger.info("User registered", user_id=str(user.id))
        return user, self.token_service.issue(user.email)

    async def login(self, email: str, password: str) -> tuple[User, str]:
        """Check credentials and return the user with a fresh access token.

        Raises:
            AuthenticationError: unknown email, wrong password or disabled account.
        """
        user = await self.user_repo.get_by_email(email)

        # Always verify a hash so response time does not reveal whether the
        # email exists
        password_hash = user.password_hash if user else DUMMY_PASSWORD_HASH
        password_valid = verify_password(password, password_hash)

        if user is None or not password_valid:
            logger.info("Login failed")
            raise AuthenticationError("Invalid email or password")

        if not user.enabled:
            logger.info("Login rejected for disabled account", user_id=str(user.id))
            raise AuthenticationError("Account is disabled")

        logger.info("User logged in", user_id=str(user.id))
        return user, self.token_service.issue(user.email)
