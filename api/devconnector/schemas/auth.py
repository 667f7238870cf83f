"""Authentication schemas for request/response validation."""

from pydantic import BaseModel, field_validator

from devconnector.schemas.validators import RequestModel, require_email, require_text


class RegisterRequest(RequestModel):
    """User registration request schema."""

    name: str | None = None
    email: str | None = None
    password: str | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str:
        return require_text(v, "Name is required").strip()

    @field_validator("email", mode="before")
    @classmethod
    def validate_email(cls, v: object) -> str:
        return require_email(v)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str | None) -> str:
        """Minimum length only; no complexity rules."""
        if v is None or len(v) < 6:
            raise ValueError("Please enter a password with 6 or more characters")
        return v


class LoginRequest(RequestModel):
    """User login request schema."""

    email: str | None = None
    password: str | None = None

    @field_validator("email", mode="before")
    @classmethod
    def validate_email(cls, v: object) -> str:
        return require_email(v)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("Password is required")
        return v


class TokenResponse(BaseModel):
    """Signed token returned on registration and login."""

    token: str


class UserResponse(BaseModel):
    """User record without the password hash."""

    id: str
    name: str
    email: str
    avatar: str | None
    date: str


class MessageResponse(BaseModel):
    msg: str
