"""Post-related Pydantic schemas."""

from pydantic import BaseModel, field_validator

from devconnector.schemas.validators import RequestModel, require_text


class PostRequest(RequestModel):
    """Request to create a post."""

    text: str | None = None

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str | None) -> str:
        return require_text(v, "Text is required")


class CommentRequest(RequestModel):
    """Request to add a comment."""

    text: str | None = None

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str | None) -> str:
        return require_text(v, "Text is required")


class LikeResponse(BaseModel):
    id: str
    user: str


class CommentResponse(BaseModel):
    """Comment with the commenter's name and avatar as they were when it was written."""

    id: str
    user: str
    text: str
    name: str | None
    avatar: str | None
    date: str


class PostResponse(BaseModel):
    """Full post with likes and comments, newest first."""

    id: str
    user: str
    text: str
    name: str | None
    avatar: str | None
    likes: list[LikeResponse]
    comments: list[CommentResponse]
    date: str
