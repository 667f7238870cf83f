"""Pydantic schemas for request/response validation."""

from devconnector.schemas.auth import (
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from devconnector.schemas.post import (
    CommentRequest,
    CommentResponse,
    LikeResponse,
    PostRequest,
    PostResponse,
)
from devconnector.schemas.profile import (
    EducationRequest,
    EducationResponse,
    ExperienceRequest,
    ExperienceResponse,
    ProfileRequest,
    ProfileResponse,
)

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "TokenResponse",
    "UserResponse",
    "MessageResponse",
    "ProfileRequest",
    "ProfileResponse",
    "ExperienceRequest",
    "ExperienceResponse",
    "EducationRequest",
    "EducationResponse",
    "PostRequest",
    "PostResponse",
    "CommentRequest",
    "CommentResponse",
    "LikeResponse",
]
