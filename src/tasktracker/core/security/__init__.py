"""Security utilities - password hashing and bearer tokens.

Re-exports all security-related names for convenience.
"""

from src.tasktracker.core.security.crypto import (
    DUMMY_PASSWORD_HASH,
    hash_password,
    verify_password,
)
from src.tasktracker.core.security.tokens import (
    TokenClaims,
    TokenService,
    get_token_service,
)

__all__ = [
    # Crypto
    "DUMMY_PASSWORD_HASH",
    "hash_password",
    "verify_password",
    # Tokens
    "TokenClaims",
    "TokenService",
    "get_token_service",
]
