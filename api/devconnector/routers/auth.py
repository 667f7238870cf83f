"""Authentication router for login and the current user."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from devconnector.auth.dependencies import get_current_user_id, get_user_or_404
from devconnector.auth.jwt import create_token
from devconnector.auth.password import verify_password
from devconnector.config import settings
from devconnector.database import get_db
from devconnector.exceptions import BadRequestError
from devconnector.middleware.rate_limit import limiter
from devconnector.models.user import User
from devconnector.schemas.auth import LoginRequest, TokenResponse, UserResponse
from devconnector.schemas.body import json_body

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.get(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_200_OK,
)
async def get_me(
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
) -> UserResponse:
    """Return the authenticated user, without the password hash."""
    user = await get_user_or_404(db, user_id)

    return UserResponse(
        id=str(user.id),
        name=user.name,
        email=user.email,
        avatar=user.avatar,
        date=user.date.isoformat(),
    )


@router.post(
    "",
    response_model=TokenResponse,
    status_code=status.HTTP_200_OK,
)
@limiter.limit(settings.login_rate_limit)
async def login(
    request: Request,
    data: LoginRequest = Depends(json_body(LoginRequest)),
    db: AsyncSession = Depends(get_db),
) -> TokenResponse:
    """
    Authenticate a user by email and password.

    Unknown email and wrong password get the same answer so the endpoint
    cannot be used to discover registered addresses.
    """
    result = await db.execute(select(User).where(User.email == data.email))
    user = result.scalar_one_or_none()

    if not user or not verify_password(data.password, user.password_hash):
        raise BadRequestError("Invalid Credentials")

    return TokenResponse(token=create_token(user.id))
