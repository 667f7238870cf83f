"""Post models for the feed, likes, and comments."""

import uuid

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Index,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import relationship

from devconnector.database import Base, utcnow


class Post(Base):
    """
    Feed post.

    ``name`` and ``avatar`` are copied from the author when the post is
    created and are not kept in sync afterwards.
    """

    __tablename__ = "posts"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    text = Column(Text, nullable=False)
    name = Column(Text)
    avatar = Column(Text)
    date = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        Index("idx_posts_user", user_id),
        Index("idx_posts_date", date.desc()),
    )

    likes = relationship(
        "Like",
        back_populates="post",
        cascade="all, delete-orphan",
        order_by="Like.date.desc()",
    )
    comments = relationship(
        "Comment",
        back_populates="post",
        cascade="all, delete-orphan",
        order_by="Comment.date.desc()",
    )


class Like(Base):
    """A user's like on a post. At most one per (post, user)."""

    __tablename__ = "post_likes"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    post_id = Column(Uuid, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    date = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (UniqueConstraint("post_id", "user_id", name="uq_post_likes_post_user"),)

    post = relationship("Post", back_populates="likes")


class Comment(Base):
    """Comment on a post, with the commenter's name and avatar copied in."""

    __tablename__ = "post_comments"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    post_id = Column(Uuid, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    text = Column(Text, nullable=False)
    name = Column(Text)
    avatar = Column(Text)
    date = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (Index("idx_post_comments_post", post_id, date),)

    post = relationship("Post", back_populates="comments")
