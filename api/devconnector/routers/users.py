"""Users router for account registration."""

import hashlib

import structlog
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from devconnector.auth.jwt import create_token
from devconnector.auth.password import hash_password
from devconnector.config import settings
from devconnector.database import get_db
from devconnector.exceptions import BadRequestError
from devconnector.middleware.rate_limit import limiter
from devconnector.models.user import User
from devconnector.schemas.auth import RegisterRequest, TokenResponse
from devconnector.schemas.body import json_body

router = APIRouter(prefix="/api/users", tags=["Users"])

logger = structlog.get_logger(__name__)


def gravatar_url(email: str) -> str:
    """Gravatar image for an email: 200px, PG-rated, mystery-person fallback."""
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    return f"//www.gravatar.com/avatar/{digest}?s=200&r=pg&d=mm"


@router.post(
    "",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
)
@limiter.limit(settings.register_rate_limit)
async def register(
    request: Request,
    data: RegisterRequest = Depends(json_body(RegisterRequest)),
    db: AsyncSession = Depends(get_db),
) -> TokenResponse:
    """
    Create a new user account.

    Returns a signed token for the new user, same as a login would.
    """
    existing = await db.execute(select(User).where(User.email == data.email))
    if existing.scalar_one_or_none():
        raise BadRequestError("User already exists")

    user = User(
        name=data.name,
        email=data.email,
        password_hash=hash_password(data.password),
        avatar=gravatar_url(data.email),
    )
    db.add(user)

    # Two concurrent registrations can both pass the check above
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise BadRequestError("User already exists")

    logger.info("user_registered", user_id=str(user.id))

    return TokenResponse(token=create_token(user.id))
