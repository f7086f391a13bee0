"""Structured logging.

structlog renders through the stdlib root logger: JSON lines in production,
coloured console output when DEBUG is on. Request and user context travel
in contextvars, so every log call inside a request carries ``request_id``
and, once authenticated, ``user_id``.
"""

import logging
import sys
from uuid import UUID

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars

# Libraries that log every statement or request at INFO
_NOISY_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "httpx")


def _renderer(debug: bool) -> structlog.typing.Processor:
    if debug:
        return structlog.dev.ConsoleRenderer(colors=True)
    return structlog.processors.JSONRenderer()


def setup_logging(debug: bool = False) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        debug: Console renderer and DEBUG level instead of JSON at INFO.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if debug else logging.INFO,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            _renderer(debug),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_request_context(request_id: str | None) -> None:
    """Attach the request's correlation ID to subsequent log calls."""
    if request_id:
        bind_contextvars(request_id=request_id)


def bind_user_context(user_id: UUID, email: str | None = None) -> None:
    """Attach the authenticated principal to subsequent log calls.

    Args:
        user_id: The authenticated user's ID.
        email: Bound as ``user_email`` only when LOG_USER_EMAILS is enabled.
    """
    from src.tasktracker.core.config import get_settings

    bind_contextvars(user_id=str(user_id))
    if email and get_settings().log_user_emails:
        bind_contextvars(user_email=email)


def clear_request_context() -> None:
    clear_contextvars()
