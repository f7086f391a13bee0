"""User profile endpoints."""

from fastapi import APIRouter

from src.tasktracker.api.dependencies import CurrentUser
from src.tasktracker.schemas.user import UserRead

router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "/me",
    response_model=UserRead,
    responses={
        200: {"description": "Current user profile"},
        401: {"description": "Missing, invalid or expired token"},
    },
)
async def get_me(user: CurrentUser) -> UserRead:
    """Get the profile of the authenticated user."""
    return UserRead.model_validate(user)
