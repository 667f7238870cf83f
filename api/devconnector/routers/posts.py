"""Posts router for the feed, likes, and comments."""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from devconnector.auth.dependencies import get_current_user_id, get_user_or_404
from devconnector.database import get_db
from devconnector.exceptions import BadRequestError, NotAuthorizedError, NotFoundError
from devconnector.ids import parse_id
from devconnector.models.post import Comment, Like, Post
from devconnector.schemas.auth import MessageResponse
from devconnector.schemas.body import json_body
from devconnector.schemas.post import (
    CommentRequest,
    CommentResponse,
    LikeResponse,
    PostRequest,
    PostResponse,
)

router = APIRouter(prefix="/api/posts", tags=["Posts"])


def _post_query():
    """Select posts with likes and comments loaded."""
    return (
        select(Post)
        .options(selectinload(Post.likes), selectinload(Post.comments))
        .execution_options(populate_existing=True)
    )


async def _get_post_or_404(db: AsyncSession, post_id: str) -> Post:
    result = await db.execute(_post_query().where(Post.id == parse_id(post_id)))
    post = result.scalar_one_or_none()

    if not post:
        raise NotFoundError("Post not found")

    return post


async def _likes(db: AsyncSession, post_id: UUID) -> list[LikeResponse]:
    result = await db.execute(
        select(Like).where(Like.post_id == post_id).order_by(Like.date.desc())
    )
    return [_like_response(like) for like in result.scalars().all()]


async def _comments(db: AsyncSession, post_id: UUID) -> list[CommentResponse]:
    result = await db.execute(
        select(Comment).where(Comment.post_id == post_id).order_by(Comment.date.desc())
    )
    return [_comment_response(comment) for comment in result.scalars().all()]


def _like_response(like: Like) -> LikeResponse:
    return LikeResponse(id=str(like.id), user=str(like.user_id))


def _comment_response(comment: Comment) -> CommentResponse:
    return CommentResponse(
        id=str(comment.id),
        user=str(comment.user_id),
        text=comment.text,
        name=comment.name,
        avatar=comment.avatar,
        date=comment.date.isoformat(),
    )


def _post_response(post: Post) -> PostResponse:
    return PostResponse(
        id=str(post.id),
        user=str(post.user_id),
        text=post.text,
        name=post.name,
        avatar=post.avatar,
        likes=[_like_response(like) for like in post.likes],
        comments=[_comment_response(comment) for comment in post.comments],
        date=post.date.isoformat(),
    )


# --- Create Post ---


@router.post(
    "",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_post(
    user_id: UUID = Depends(get_current_user_id),
    data: PostRequest = Depends(json_body(PostRequest)),
    db: AsyncSession = Depends(get_db),
) -> PostResponse:
    """Create a post, copying the author's current name and avatar onto it."""
    user = await get_user_or_404(db, user_id)

    post = Post(
        text=data.text,
        name=user.name,
        avatar=user.avatar,
        user_id=user.id,
    )
    db.add(post)
    await db.commit()

    post = await _get_post_or_404(db, str(post.id))
    return _post_response(post)


# --- List Posts ---


@router.get(
    "",
    response_model=list[PostResponse],
    status_code=status.HTTP_200_OK,
)
async def list_posts(
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
) -> list[PostResponse]:
    """List all posts, newest first."""
    result = await db.execute(_post_query().order_by(Post.date.desc()))
    return [_post_response(post) for post in result.scalars().all()]


# --- Get Post ---


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    status_code=status.HTTP_200_OK,
)
async def get_post(
    post_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
) -> PostResponse:
    """Get a single post by id."""
    post = await _get_post_or_404(db, post_id)
    return _post_response(post)


# --- Delete Post ---


@router.delete(
    "/{post_id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
)
async def delete_post(
    post_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
) -> MessageResponse:
    """
    Delete a post.

    Only the post author can delete their post.
    """
    post = await _get_post_or_404(db, post_id)

    if post.user_id != user_id:
        raise NotAuthorizedError()

    await db.delete(post)
    await db.commit()

    return MessageResponse(msg="Post removed")


# --- Likes ---


@router.put(
    "/like/{post_id}",
    response_model=list[LikeResponse],
    status_code=status.HTTP_200_OK,
)
async def like_post(
    post_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
) -> list[LikeResponse]:
    """
    Like a post.

    The unique (post, user) constraint decides whether the like is new, so
    two simultaneous requests cannot both succeed.
    """
    post = await _get_post_or_404(db, post_id)

    db.add(Like(post_id=post.id, user_id=user_id))
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise BadRequestError("Post already liked")

    return await _likes(db, post.id)


@router.put(
    "/unlike/{post_id}",
    response_model=list[LikeResponse],
    status_code=status.HTTP_200_OK,
)
async def unlike_post(
    post_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
) -> list[LikeResponse]:
    """Remove the caller's like from a post in a single conditional delete."""
    post = await _get_post_or_404(db, post_id)

    result = await db.execute(
        delete(Like).where(Like.post_id == post.id, Like.user_id == user_id)
    )
    if result.rowcount == 0:
        raise BadRequestError("Post has not yet been liked")

    await db.commit()

    return await _likes(db, post.id)


# --- Comments ---


@router.put(
    "/comment/{post_id}",
    response_model=list[CommentResponse],
    status_code=status.HTTP_200_OK,
)
async def add_comment(
    post_id: str,
    user_id: UUID = Depends(get_current_user_id),
    data: CommentRequest = Depends(json_body(CommentRequest)),
    db: AsyncSession = Depends(get_db),
) -> list[CommentResponse]:
    """Comment on a post. Returns the post's comments, newest first."""
    user = await get_user_or_404(db, user_id)
    post = await _get_post_or_404(db, post_id)

    db.add(
        Comment(
            post_id=post.id,
            user_id=user.id,
            text=data.text,
            name=user.name,
            avatar=user.avatar,
        )
    )
    await db.commit()

    return await _comments(db, post.id)


@router.delete(
    "/comment/{post_id}/{comment_id}",
    response_model=list[CommentResponse],
    status_code=status.HTTP_200_OK,
)
async def delete_comment(
    post_id: str,
    comment_id: str,
    db: AsyncSession = Depends(get_db),
    user_id: UUID = Depends(get_current_user_id),
) -> list[CommentResponse]:
    """
    Delete a comment.

    Only the comment author can delete it, even on someone else's post.
    """
    post = await _get_post_or_404(db, post_id)
    target_id = parse_id(comment_id)

    comment = next((c for c in post.comments if c.id == target_id), None)
    if not comment:
        raise NotFoundError("Comment not found")

    if comment.user_id != user_id:
        raise NotAuthorizedError()

    await db.delete(comment)
    await db.commit()

    return await _comments(db, post.id)
