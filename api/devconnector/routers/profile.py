"""Profile router for developer profiles, experience, education, and GitHub repos."""

from typing import Any
from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, status
from sqlalchemy import delete, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from devconnector.auth.dependencies import get_current_user_id, get_user_or_404
from devconnector.database import get_db
from devconnector.exceptions import BadRequestError, NotFoundError
from devconnector.ids import parse_id
from devconnector.models.post import Comment, Like, Post
from devconnector.models.profile import SOCIAL_NETWORKS, Education, Experience, Profile
from devconnector.models.user import User
from devconnector.schemas.auth import MessageResponse
from devconnector.schemas.body import json_body
from devconnector.schemas.profile import (
    EducationRequest,
    EducationResponse,
    ExperienceRequest,
    ExperienceResponse,
    ProfileRequest,
    ProfileResponse,
    ProfileUser,
    SocialLinks,
)
from devconnector.services.github import GitHubClient, get_github_client

router = APIRouter(prefix="/api/profile", tags=["Profile"])

logger = structlog.get_logger(__name__)

NO_PROFILE = "There is no profile for this user"


def _profile_query():
    """Select profiles with owner, experience, and education loaded."""
    return (
        select(Profile)
        .options(
            selectinload(Profile.user),
            selectinload(Profile.experience),
            selectinload(Profile.education),
        )
        .execution_options(populate_existing=True)
    )


async def _load_profile(db: AsyncSession, user_id: UUID) -> Profile | None:
    result = await db.execute(_profile_query().where(Profile.user_id == user_id))
    return result.scalar_one_or_none()


async def _load_own_profile(db: AsyncSession, user_id: UUID) -> Profile:
    """The caller's profile; 400 rather than 404 when they have not made one yet."""
    profile = await _load_profile(db, user_id)
    if not profile:
        raise BadRequestError(NO_PROFILE)
    return profile


def _format_date(value) -> str | None:
    return value.isoformat() if value else None


def _profile_response(profile: Profile) -> ProfileResponse:
    user: User = profile.user
    social = profile.social or {}

    return ProfileResponse(
        id=str(profile.id),
        user=ProfileUser(id=str(user.id), name=user.name, avatar=user.avatar),
        company=profile.company,
        website=profile.website,
        location=profile.location,
        status=profile.status,
        skills=list(profile.skills or []),
        bio=profile.bio,
        githubusername=profile.githubusername,
        social=SocialLinks(**{network: social.get(network, "") for network in SOCIAL_NETWORKS}),
        experience=[
            ExperienceResponse(
                id=str(exp.id),
                title=exp.title,
                company=exp.company,
                location=exp.location,
                from_date=_format_date(exp.from_date),
                to_date=_format_date(exp.to_date),
                current=exp.current,
                description=exp.description,
            )
            for exp in profile.experience
        ],
        education=[
            EducationResponse(
                id=str(edu.id),
                school=edu.school,
                degree=edu.degree,
                fieldofstudy=edu.fieldofstudy,
                from_date=_format_date(edu.from_date),
                to_date=_format_date(edu.to_date),
                current=edu.current,
                description=edu.description,
            )
            for edu in profile.education
        ],
        date=profile.date.isoformat(),
    )


# --- Own Profile ---


@router.get(
    "/me",
    response_model=ProfileResponse,
    status_code=status.HTTP_200_OK,
)
async def get_my_profile(
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
) -> ProfileResponse:
    """Get the authenticated user's profile."""
    profile = await _load_own_profile(db, user_id)
    return _profile_response(profile)


@router.post(
    "",
    response_model=ProfileResponse,
    status_code=status.HTTP_200_OK,
)
async def upsert_profile(
    user_id: UUID = Depends(get_current_user_id),
    data: ProfileRequest = Depends(json_body(ProfileRequest)),
    db: AsyncSession = Depends(get_db),
) -> ProfileResponse:
    """
    Create or update the authenticated user's profile.

    Every call replaces all profile fields; experience and education entries
    are left alone.
    """
    await get_user_or_404(db, user_id)

    fields = {
        "company": data.company or "",
        "website": data.website or "",
        "location": data.location or "",
        "bio": data.bio or "",
        "status": data.status,
        "githubusername": data.githubusername or "",
        "skills": data.skills,
        "social": {network: getattr(data, network) or "" for network in SOCIAL_NETWORKS},
    }

    result = await db.execute(select(Profile).where(Profile.user_id == user_id))
    profile = result.scalar_one_or_none()

    if profile:
        for key, value in fields.items():
            setattr(profile, key, value)
        await db.commit()
    else:
        db.add(Profile(user_id=user_id, **fields))
        try:
            await db.commit()
        except IntegrityError:
            # A concurrent request created it first; apply ours as an update
            await db.rollback()
            await db.execute(update(Profile).where(Profile.user_id == user_id).values(**fields))
            await db.commit()

    profile = await _load_profile(db, user_id)
    return _profile_response(profile)


@router.delete(
    "",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
)
async def delete_account(
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
) -> MessageResponse:
    """
    Delete the authenticated user's account.

    Removes the user's posts (with every like and comment on them), the likes
    and comments the user left on other posts, the profile, and the user.
    """
    own_posts = select(Post.id).where(Post.user_id == user_id)
    own_profile = select(Profile.id).where(Profile.user_id == user_id)

    await db.execute(delete(Like).where(or_(Like.user_id == user_id, Like.post_id.in_(own_posts))))
    await db.execute(
        delete(Comment).where(or_(Comment.user_id == user_id, Comment.post_id.in_(own_posts)))
    )
    await db.execute(delete(Post).where(Post.user_id == user_id))
    await db.execute(delete(Experience).where(Experience.profile_id.in_(own_profile)))
    await db.execute(delete(Education).where(Education.profile_id.in_(own_profile)))
    await db.execute(delete(Profile).where(Profile.user_id == user_id))
    await db.execute(delete(User).where(User.id == user_id))
    await db.commit()

    logger.info("account_deleted", user_id=str(user_id))

    return MessageResponse(msg="User deleted")


# --- Public Profiles ---


@router.get(
    "",
    response_model=list[ProfileResponse],
    status_code=status.HTTP_200_OK,
)
async def list_profiles(
    db: AsyncSession = Depends(get_db),
) -> list[ProfileResponse]:
    """List every profile with its owner's name and avatar."""
    result = await db.execute(_profile_query().order_by(Profile.date.desc()))
    return [_profile_response(profile) for profile in result.scalars().all()]


@router.get(
    "/user/{user_id}",
    response_model=ProfileResponse,
    status_code=status.HTTP_200_OK,
)
async def get_profile_by_user(
    user_id: str,
    db: AsyncSession = Depends(get_db),
) -> ProfileResponse:
    """Get a profile by its owner's user id."""
    profile = await _load_profile(db, parse_id(user_id))

    if not profile:
        raise NotFoundError("Profile not found")

    return _profile_response(profile)


# --- Experience ---


@router.put(
    "/experience",
    response_model=ProfileResponse,
    status_code=status.HTTP_200_OK,
)
async def add_experience(
    user_id: UUID = Depends(get_current_user_id),
    data: ExperienceRequest = Depends(json_body(ExperienceRequest)),
    db: AsyncSession = Depends(get_db),
) -> ProfileResponse:
    """Add a job to the top of the authenticated user's experience list."""
    profile = await _load_own_profile(db, user_id)

    db.add(
        Experience(
            profile_id=profile.id,
            title=data.title,
            company=data.company,
            location=data.location or "",
            from_date=data.from_date,
            to_date=data.to_date,
            current=data.current,
            description=data.description or "",
        )
    )
    await db.commit()

    profile = await _load_profile(db, user_id)
    return _profile_response(profile)


@router.delete(
    "/experience/{exp_id}",
    response_model=ProfileResponse,
    status_code=status.HTTP_200_OK,
)
async def delete_experience(
    exp_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
) -> ProfileResponse:
    """Remove an experience entry. An id that matches nothing changes nothing."""
    entry_id = parse_id(exp_id)
    profile = await _load_own_profile(db, user_id)

    await db.execute(
        delete(Experience).where(
            Experience.id == entry_id,
            Experience.profile_id == profile.id,
        )
    )
    await db.commit()

    profile = await _load_profile(db, user_id)
    return _profile_response(profile)


# --- Education ---


@router.put(
    "/education",
    response_model=ProfileResponse,
    status_code=status.HTTP_200_OK,
)
async def add_education(
    user_id: UUID = Depends(get_current_user_id),
    data: EducationRequest = Depends(json_body(EducationRequest)),
    db: AsyncSession = Depends(get_db),
) -> ProfileResponse:
    """Add a school to the top of the authenticated user's education list."""
    profile = await _load_own_profile(db, user_id)

    db.add(
        Education(
            profile_id=profile.id,
            school=data.school,
            degree=data.degree,
            fieldofstudy=data.fieldofstudy,
            from_date=data.from_date,
            to_date=data.to_date,
            current=data.current,
            description=data.description or "",
        )
    )
    await db.commit()

    profile = await _load_profile(db, user_id)
    return _profile_response(profile)


@router.delete(
    "/education/{edu_id}",
    response_model=ProfileResponse,
    status_code=status.HTTP_200_OK,
)
async def delete_education(
    edu_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
) -> ProfileResponse:
    """Remove an education entry. An id that matches nothing changes nothing."""
    entry_id = parse_id(edu_id)
    profile = await _load_own_profile(db, user_id)

    await db.execute(
        delete(Education).where(
            Education.id == entry_id,
            Education.profile_id == profile.id,
        )
    )
    await db.commit()

    profile = await _load_profile(db, user_id)
    return _profile_response(profile)


# --- GitHub ---


@router.get(
    "/github/{username}",
    status_code=status.HTTP_200_OK,
)
async def get_github_repos(
    username: str,
    github: GitHubClient = Depends(get_github_client),
) -> Any:
    """Proxy a user's public GitHub repositories."""
    return await github.get_user_repos(username)
