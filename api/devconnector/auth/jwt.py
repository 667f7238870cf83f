"""JWT token creation and validation."""

from datetime import datetime, timedelta, timezone
from uuid import UUID

from jose import JWTError, jwt

from devconnector.config import settings

ALGORITHM = "HS256"


def create_token(user_id: UUID | str, expires_in: int | None = None) -> str:
    """
    Create a signed token embedding the user id.

    The payload is ``{"user": {"id": ...}, "exp": ...}``; ``expires_in`` is
    in seconds and defaults to ``settings.jwt_expire_seconds``.
    """
    if expires_in is None:
        expires_in = settings.jwt_expire_seconds
    expire = datetime.now(timezone.utc) + timedelta(seconds=expires_in)
    payload = {
        "user": {"id": str(user_id)},
        "exp": expire,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=ALGORITHM)


def decode_token(token: str) -> dict | None:
    """
    Decode and validate a JWT token.

    Returns the payload if valid, None if invalid or expired.
    """
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[ALGORITHM])
    except JWTError:
        return None


def get_token_user_id(token: str) -> UUID | None:
    """Return the user id embedded in a valid token, else None."""
    payload = decode_token(token)
    if not payload:
        return None

    user = payload.get("user")
    if not isinstance(user, dict):
        return None

    try:
        return UUID(str(user.get("id")))
    except ValueError:
        return None
