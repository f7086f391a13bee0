"""Application settings, read once from the environment and ``.env``."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PLACEHOLDER_SECRET = "change-this-to-a-secure-random-string"
MIN_SECRET_LENGTH = 32


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Task Tracker API"
    app_env: str = "development"  # development, testing, production
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000

    # Logging
    log_user_emails: bool = False  # PII; leave off in production

    # Database
    database_url: str
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_create_schema: bool = True  # metadata.create_all on startup

    # Tokens
    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24

    # Password hashing (Argon2id)
    argon2_time_cost: int = 3
    argon2_memory_cost: int = 64 * 1024  # KiB
    argon2_parallelism: int = 1

    # HTTP
    cors_origins: list[str] = ["http://localhost:3000"]
    metrics_api_key: str | None = None  # If set, /metrics requires X-Metrics-Key

    @field_validator("jwt_secret_key")
    @classmethod
    def validate_jwt_secret(cls, v: str) -> str:
        if v == PLACEHOLDER_SECRET:
            raise ValueError(
                "JWT_SECRET_KEY must be changed from the placeholder value; "
                "generate one with: openssl rand -hex 32"
            )
        if len(v) < MIN_SECRET_LENGTH:
            raise ValueError(f"JWT_SECRET_KEY must be at least {MIN_SECRET_LENGTH} characters")
        return v

    @field_validator("access_token_expire_minutes")
    @classmethod
    def validate_token_ttl(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("ACCESS_TOKEN_EXPIRE_MINUTES must be positive")
        return v

    @field_validator("cors_origins")
    @classmethod
    def validate_cors_origins(cls, v: list[str]) -> list[str]:
        """Credentials are allowed, so a wildcard origin is refused."""
        if "*" in v:
            raise ValueError("CORS wildcard '*' cannot be combined with credentials; list origins")
        return v

    @property
    def access_token_ttl_seconds(self) -> int:
        return self.access_token_expire_minutes * 60


@lru_cache
def get_settings() -> Settings:
    return Settings()
