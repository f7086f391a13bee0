"""Tests for structured logging context."""

from unittest.mock import MagicMock
from uuid import uuid4

import pytest
import structlog
from structlog.testing import CapturingLogger

from src.tasktracker.core import config
from src.tasktracker.core.logging import (
    bind_request_context,
    bind_user_context,
    clear_request_context,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def capturing_logger():
    """Route structlog output to a CapturingLogger for the duration of a test."""
    cap_logger = CapturingLogger()
    old_config = structlog.get_config()

    structlog.configure(
        processors=[structlog.contextvars.merge_contextvars],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=lambda *args, **kwargs: cap_logger,
        cache_logger_on_first_use=False,
    )

    clear_request_context()
    yield cap_logger
    clear_request_context()
    structlog.configure(**old_config)


def _log_once(capturing_logger: CapturingLogger) -> dict:
    structlog.get_logger().info("test message")
    entries = capturing_logger.calls
    assert len(entries) == 1
    return entries[0].kwargs


def test_request_id_is_bound(capturing_logger):
    bind_request_context("req-123")
    assert _log_once(capturing_logger)["request_id"] == "req-123"


def test_missing_request_id_is_not_bound(capturing_logger):
    bind_request_context(None)
    assert "request_id" not in _log_once(capturing_logger)


def test_user_id_bound_without_email_by_default(capturing_logger):
    """Emails stay out of logs unless LOG_USER_EMAILS is enabled."""
    user_id = uuid4()

    bind_user_context(user_id, "alice@example.com")

    fields = _log_once(capturing_logger)
    assert fields["user_id"] == str(user_id)
    assert "user_email" not in fields


def test_email_bound_when_enabled(capturing_logger, monkeypatch):
    mock_settings = MagicMock()
    mock_settings.log_user_emails = True
    monkeypatch.setattr(config, "get_settings", lambda: mock_settings)
    user_id = uuid4()

    bind_user_context(user_id, "alice@example.com")

    fields = _log_once(capturing_logger)
    assert fields["user_id"] == str(user_id)
    assert fields["user_email"] == "alice@example.com"


def test_request_and_user_context_accumulate(capturing_logger):
    user_id = uuid4()

    bind_request_context("req-123")
    bind_user_context(user_id)

    fields = _log_once(capturing_logger)
    assert fields["request_id"] == "req-123"
    assert fields["user_id"] == str(user_id)


def test_clear_request_context(capturing_logger):
    bind_request_context("req-123")
    bind_user_context(uuid4())

    clear_request_context()

    fields = _log_once(capturing_logger)
    assert "request_id" not in fields
    assert "user_id" not in fields
