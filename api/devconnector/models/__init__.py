"""Database models for the DevConnector API."""

from devconnector.models.post import Comment, Like, Post
from devconnector.models.profile import Education, Experience, Profile
from devconnector.models.user import User

__all__ = [
    "User",
    "Profile",
    "Experience",
    "Education",
    "Post",
    "Like",
    "Comment",
]
