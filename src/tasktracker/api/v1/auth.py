"""Authentication endpoints - registration and login."""

from fastapi import APIRouter, status
from starlette.requests import Request

from src.tasktracker.api.dependencies import AuthServiceDep
from src.tasktracker.core.rate_limit import limiter
from src.tasktracker.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from src.tasktracker.schemas.user import UserRead

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "Account created and access token issued"},
        409: {"description": "Email already registered"},
        422: {"description": "Invalid email, weak password or bad display name"},
    },
)
@limiter.limit("3/minute")
async def register(
    request: Request, register_data: RegisterRequest, service: AuthServiceDep
) -> AuthResponse:
    """Register a new account and return an access token for it."""
    user, access_token = await service.register(
        register_data.email,
        register_data.password,
        register_data.display_name,
    )
    return AuthResponse(access_token=access_token, user=UserRead.model_validate(user))


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={
        200: {
            "description": "Successful authentication",
            "content": {
                "application/json": {
                    "example": {
                        "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                        "token_type": "bearer",
                        "user": {
                            "id": "550e8400-e29b-41d4-a716-446655440000",
                            "email": "user@example.com",
                            "display_name": "Jane Doe",
                            "role": "USER",
                            "enabled": True,
                            "created_at": "2024-01-15T10:30:00",
                        },
                    }
                }
            },
        },
        401: {"description": "Invalid credentials or disabled account"},
    },
)
@limiter.limit("5/minute")
async def login(request: Request, login_data: LoginRequest, service: AuthServiceDep) -> AuthResponse:
    """Exchange email and password for an access token."""
    user, access_token = await service.login(login_data.email, login_data.password)
    return AuthResponse(access_token=access_token, user=UserRead.model_validate(user))
