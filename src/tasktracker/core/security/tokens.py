"""Stateless bearer tokens - HS256 JWTs signed with the server secret.

A token is the usual three base64url segments (header.payload.signature)
carrying ``sub``, ``iat`` and ``exp``. Verification needs nothing but the
token, the secret and the current time: there is no session table and no
revocation list, so a token stays valid until it expires.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from functools import lru_cache
from typing import Any

from jose import JWTError, jwt

from src.tasktracker.core.config import get_settings
from src.tasktracker.core.exceptions import InvalidTokenError, TokenExpiredError


def _utc_clock() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class TokenClaims:
    """Verified contents of a bearer token."""

    subject: str
    issued_at: datetime
    expires_at: datetime


class TokenService:
    """Issues and verifies signed bearer tokens."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        default_ttl_seconds: int = 3600,
        clock: Callable[[], datetime] = _utc_clock,
    ):
        self._secret_key = secret_key
        self._algorithm = algorithm
        self.default_ttl_seconds = default_ttl_seconds
        self._clock = clock

    def issue(self, subject: str, ttl_seconds: int | None = None) -> str:
        """Create a token for ``subject`` valid for ``ttl_seconds``.

        ``iat`` is truncated to whole seconds so ``exp`` is exactly
        ``iat + ttl``.
        """
        ttl = self.default_ttl_seconds if ttl_seconds is None else ttl_seconds
        if ttl <= 0:
            raise ValueError("Token TTL must be positive")

        issued_at = int(self._clock().timestamp())
        claims = {
            "sub": subject,
            "iat": issued_at,
            "exp": issued_at + ttl,
        }
        return jwt.encode(  # type: ignore[no-any-return]
            claims,
            self._secret_key,
            algorithm=self._algorithm,
        )

    def verify(self, token: str, now: datetime | None = None) -> TokenClaims:
        """Verify signature and expiry and return the token claims.

        Raises:
            InvalidTokenError: malformed token, bad signature or missing claims.
            TokenExpiredError: ``now`` is past the token's expiry.
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                # Expiry is checked below against the injected clock
                options={"verify_exp": False},
            )
        except JWTError as e:
            raise InvalidTokenError() from e

        subject = payload.get("sub")
        issued_at = payload.get("iat")
        expires_at = payload.get("exp")
        if not isinstance(subject, str) or not subject:
            raise InvalidTokenError("Invalid token payload")
        if not isinstance(issued_at, int) or not isinstance(expires_at, int):
            raise InvalidTokenError("Invalid token payload")

        current = now if now is not None else self._clock()
        if current.timestamp() > expires_at:
            raise TokenExpiredError()

        return TokenClaims(
            subject=subject,
            issued_at=datetime.fromtimestamp(issued_at, UTC),
            expires_at=datetime.fromtimestamp(expires_at, UTC),
        )

    def validate_for_subject(self, token: str, expected_subject: str) -> bool:
        """Return True if the token verifies and belongs to ``expected_subject``."""
        try:
            claims = self.verify(token)
        except (InvalidTokenError, TokenExpiredError):
            return False
        return claims.subject == expected_subject


@lru_cache
def get_token_service() -> TokenService:
    """Token service configured from settings (read once at startup)."""
    settings = get_settings()
    return TokenService(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        default_ttl_seconds=settings.access_token_ttl_seconds,
    )
