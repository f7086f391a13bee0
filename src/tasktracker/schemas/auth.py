"""Registration and login payloads."""

from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, Field, field_validator
from zxcvbn import zxcvbn

from src.tasktracker.schemas.user import UserRead

# zxcvbn scores 0-4; 3 is "safely unguessable"
MIN_PASSWORD_SCORE = 3


def _check_email(v: str) -> str:
    # Accounts match on the exact string, so the normalised form is discarded.
    try:
        validate_email(v, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"Invalid email: {e}") from e
    return v


ExactEmail = Annotated[str, AfterValidator(_check_email)]


def _weak_password_reason(result: dict) -> str:
    feedback = result.get("feedback") or {}
    if feedback.get("warning"):
        return feedback["warning"]
    if feedback.get("suggestions"):
        return feedback["suggestions"][0]
    return "use a longer password with a mix of characters."


class LoginRequest(BaseModel):
    email: ExactEmail
    password: str = Field(min_length=1, max_length=100)


class RegisterRequest(BaseModel):
    email: ExactEmail = Field(max_length=100)
    password: str = Field(min_length=8, max_length=100)
    display_name: str = Field(min_length=2, max_length=100)

    @field_validator("display_name")
    @classmethod
    def strip_display_name(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 2:
            raise ValueError("Display name must have at least 2 non-blank characters")
        return v

    @field_validator("password")
    @classmethod
    def validate_password_strength(cls, v: str) -> str:
        result = zxcvbn(v)
        if result["score"] < MIN_PASSWORD_SCORE:
            raise ValueError(f"Weak password: {_weak_password_reason(result)}")
        return v


class AuthResponse(BaseModel):
    """Issued access token plus the account it belongs to."""

    access_token: str
    token_type: str = "bearer"
    user: UserRead
