import secrets
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from asgi_correlation_id import CorrelationIdMiddleware, correlation_id
from fastapi import Depends, FastAPI, HTTPException, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.security import APIKeyHeader
from prometheus_fastapi_instrumentator import Instrumentator
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.middleware.base import RequestResponseEndpoint

from src.tasktracker.api import health
from src.tasktracker.api.v1.router import api_router
from src.tasktracker.core.config import Settings, get_settings
from src.tasktracker.core.db import create_schema, dispose_engine
from src.tasktracker.core.exceptions import setup_exception_handlers
from src.tasktracker.core.logging import (
    bind_request_context,
    clear_request_context,
    get_logger,
    setup_logging,
)
from src.tasktracker.core.rate_limit import limiter

logger = get_logger(__name__)

OPENAPI_TAGS = [
    {"name": "auth", "description": "Registration and login"},
    {"name": "users", "description": "Profile of the authenticated user"},
    {"name": "projects", "description": "Owner-scoped projects and their progress"},
    {"name": "tasks", "description": "Tasks inside a project"},
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    settings = get_settings()
    setup_logging(settings.debug)
    logger.info("Application starting", app_name=settings.app_name, env=settings.app_env)

    if settings.database_create_schema:
        await create_schema()
        logger.info("Database schema ready")

    yield

    await dispose_engine()
    logger.info("Application stopped")


def _add_middleware(app: FastAPI, settings: Settings) -> None:
    # Registered innermost first; the correlation ID middleware must wrap
    # everything so request_id is set before any handler logs.
    @app.middleware("http")
    async def logging_context_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        clear_request_context()
        bind_request_context(correlation_id.get())
        try:
            return await call_next(request)
        finally:
            clear_request_context()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
    )
    app.add_middleware(CorrelationIdMiddleware)


def _expose_metrics(app: FastAPI, settings: Settings) -> None:
    """Serve Prometheus metrics at /metrics, behind X-Metrics-Key when configured."""
    instrumentator = Instrumentator().instrument(app)
    expected_key = settings.metrics_api_key

    if not expected_key:
        instrumentator.expose(app, endpoint="/metrics", include_in_schema=False)
        return

    metrics_key_header = APIKeyHeader(name="X-Metrics-Key", auto_error=False)

    async def require_metrics_key(api_key: str | None = Depends(metrics_key_header)) -> None:
        if api_key is None or not secrets.compare_digest(api_key, expected_key):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid or missing metrics API key",
            )

    instrumentator.expose(
        app,
        endpoint="/metrics",
        include_in_schema=False,
        dependencies=[Depends(require_metrics_key)],
    )


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Multi-user project and task tracker",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )

    setup_exception_handlers(app)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]

    _add_middleware(app, settings)

    app.include_router(api_router)
    app.include_router(health.router)
    _expose_metrics(app, settings)

    return app


app = create_app()


def run() -> None:
    """Serve the app with uvicorn. Entry point of the ``task-tracker`` script."""
    settings = get_settings()
    uvicorn.run(
        "src.tasktracker.main:app",
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.debug else "info",
    )
