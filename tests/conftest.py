"""Root test fixtures shared across all test types.

Integration fixtures (database engine, sessions, HTTP client) live in
tests/integration/conftest.py.
"""

import os

# Set environment before any app imports: disables rate limiting, points the
# app at an in-memory database and keeps Argon2 cheap for the test run.
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-that-is-at-least-32-characters")
os.environ.setdefault("DATABASE_CREATE_SCHEMA", "false")
os.environ.setdefault("ARGON2_TIME_COST", "1")
os.environ.setdefault("ARGON2_MEMORY_COST", "8192")

# ruff: noqa: E402 - Imports must be after env var setup
from src.tasktracker.core.config import get_settings

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()
