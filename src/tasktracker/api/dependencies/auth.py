"""Authentication dependencies - bearer token to principal."""

from typing import Annotated

from fastapi import Depends, Header

from src.tasktracker.api.dependencies.repositories import UserRepo
from src.tasktracker.api.dependencies.services import TokenServiceDep
from src.tasktracker.core.exceptions import AuthenticationError
from src.tasktracker.core.logging import bind_user_context
from src.tasktracker.models import User
from src.tasktracker.services import PrincipalResolver


async def get_current_user(
    user_repo: UserRepo,
    token_service: TokenServiceDep,
    authorization: Annotated[str | None, Header()] = None,
) -> User:
    """Verify the bearer token and return the user it names.

    The resolver itself accepts disabled accounts; this boundary rejects
    them so a disabled user's outstanding tokens stop working.
    """
    if not authorization or not authorization.startswith("Bearer "):
        raise AuthenticationError("Missing or invalid authorization header")

    claims = token_service.verify(authorization[7:])
    user = await PrincipalResolver(user_repo).resolve(claims.subject)

    if not user.enabled:
        raise AuthenticationError("Account is disabled")

    bind_user_context(user.id, user.email)
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]
