"""Domain error taxonomy and the handlers that expose it over HTTP.

Services raise these typed errors and never translate them themselves.
The FastAPI handlers registered by ``setup_exception_handlers`` map each kind
to a status code and always include the request_id in the body.
"""

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.tasktracker.core.logging import get_logger

logger = get_logger(__name__)


class TaskTrackerError(Exception):
    """Base class for every error raised by the task tracker core."""

    default_detail = "Request failed"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class AuthenticationError(TaskTrackerError):
    """Credentials are invalid or the token subject is not a live user."""

    default_detail = "Invalid credentials"


class InvalidTokenError(TaskTrackerError):
    """Token is malformed or its signature does not match."""

    default_detail = "Invalid token"


class TokenExpiredError(TaskTrackerError):
    """Token signature is valid but its expiry has passed."""

    default_detail = "Token has expired"


class AuthorizationError(TaskTrackerError):
    """Principal is known but does not own the targeted resource."""

    default_detail = "Access denied"


class NotFoundError(TaskTrackerError):
    """Requested entity does not exist."""

    default_detail = "Resource not found"


class ProjectNotAccessibleError(AuthorizationError, NotFoundError):
    """Project is missing or owned by someone else.

    Both cases raise the same error so a caller cannot probe for the
    existence of another user's projects.
    """

    default_detail = "Project not found"


class ValidationError(TaskTrackerError):
    """Structurally invalid input that slipped past the request schemas."""

    default_detail = "Invalid input"


class ConflictError(TaskTrackerError):
    """Operation collides with existing state (e.g. duplicate email)."""

    default_detail = "Resource already exists"


# Most specific first: ProjectNotAccessibleError must win over AuthorizationError.
ERROR_STATUS_CODES: list[tuple[type[TaskTrackerError], int]] = [
    (ProjectNotAccessibleError, status.HTTP_404_NOT_FOUND),
    (TokenExpiredError, status.HTTP_401_UNAUTHORIZED),
    (InvalidTokenError, status.HTTP_401_UNAUTHORIZED),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (AuthorizationError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, 422),
]


def status_code_for(exc: TaskTrackerError) -> int:
    """Return the HTTP status code for a domain error."""
    for error_type, status_code in ERROR_STATUS_CODES:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that include request_id in responses."""

    @app.exception_handler(TaskTrackerError)
    async def domain_exception_handler(request: Request, exc: TaskTrackerError) -> JSONResponse:
        status_code = status_code_for(exc)
        headers = (
            {"WWW-Authenticate": "Bearer"}
            if status_code == status.HTTP_401_UNAUTHORIZED
            else None
        )
        return JSONResponse(
            status_code=status_code,
            content={
                "detail": exc.detail,
                "request_id": correlation_id.get(),
            },
            headers=headers,
        )

    @app.exception_handler(StarletteHTTPException)
    async def starlette_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "detail": exc.detail,
                "request_id": correlation_id.get(),
            },
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "detail": exc.detail,
                "request_id": correlation_id.get(),
            },
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        request_id = correlation_id.get()
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            request_id=request_id,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content={
                "detail": "Internal server error",
                "request_id": request_id,
            },
        )
