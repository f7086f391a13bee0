"""Principal resolution - token subject to User."""

from src.tasktracker.core.exceptions import AuthenticationError
from src.tasktracker.models import User
from src.tasktracker.repositories import UserRepository


class PrincipalResolver:
    """Maps a verified token subject (the registration email) to a User."""

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def resolve(self, subject: str) -> User:
        """Look up the user for ``subject``.

        Disabled accounts are returned as-is; callers decide whether to
        reject them.

        Raises:
            AuthenticationError: no user has this email.
        """
        user = await self.user_repo.get_by_email(subject)
        if user is None:
            raise AuthenticationError("User not found")
        return user
