"""Authentication dependencies for FastAPI endpoints."""

from uuid import UUID

from fastapi import Header
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from devconnector.auth.jwt import get_token_user_id
from devconnector.exceptions import AuthenticationError, NotFoundError
from devconnector.models.user import User

TOKEN_HEADER = "x-auth-token"


async def get_current_user_id(
    x_auth_token: str | None = Header(default=None, alias=TOKEN_HEADER),
) -> UUID:
    """
    Validate the request token and return the user id it carries.

    Raises:
        AuthenticationError: 401 if the token is missing, malformed,
            tampered with, or expired
    """
    if not x_auth_token:
        raise AuthenticationError("No token, authorization denied")

    user_id = get_token_user_id(x_auth_token)
    if user_id is None:
        raise AuthenticationError("Token is not valid")

    return user_id


async def get_user_or_404(db: AsyncSession, user_id: UUID) -> User:
    """Load the user a token refers to; the account may have been deleted since."""
    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()

    if not user:
        raise NotFoundError("User not found")

    return user
