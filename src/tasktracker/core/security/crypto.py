"""Argon2id password hashing.

Cost parameters come from settings; the hasher is built once at import.
"""

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerifyMismatchError

from src.tasktracker.core.config import get_settings

_settings = get_settings()
_hasher = PasswordHasher(
    time_cost=_settings.argon2_time_cost,
    memory_cost=_settings.argon2_memory_cost,
    parallelism=_settings.argon2_parallelism,
)

# Verified against when the email is unknown so login timing does not reveal
# whether an account exists.
DUMMY_PASSWORD_HASH = _hasher.hash("dummy-password-for-timing-safety")


def hash_password(password: str) -> str:
    return _hasher.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """True if ``password`` matches. A mismatch or malformed hash is False."""
    try:
        return _hasher.verify(password_hash, password)
    except (VerifyMismatchError, InvalidHashError):
        return False
