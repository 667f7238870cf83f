"""Profile model with its experience and education entries."""

import uuid

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import relationship

from devconnector.database import Base, utcnow

SOCIAL_NETWORKS = ("youtube", "twitter", "facebook", "linkedin", "instagram")


class Profile(Base):
    """
    Developer profile, one per user.

    ``skills`` is an ordered list of strings and ``social`` maps each of
    SOCIAL_NETWORKS to a URL (empty string when unset).
    """

    __tablename__ = "profiles"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    company = Column(Text, nullable=False, default="")
    website = Column(Text, nullable=False, default="")
    location = Column(Text, nullable=False, default="")
    status = Column(Text, nullable=False)
    skills = Column(JSON, nullable=False, default=list)
    bio = Column(Text, nullable=False, default="")
    githubusername = Column(Text, nullable=False, default="")
    social = Column(JSON, nullable=False, default=dict)
    date = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (UniqueConstraint("user_id", name="uq_profiles_user_id"),)

    user = relationship("User", back_populates="profile")
    experience = relationship(
        "Experience",
        back_populates="profile",
        cascade="all, delete-orphan",
        order_by="Experience.created_at.desc()",
    )
    education = relationship(
        "Education",
        back_populates="profile",
        cascade="all, delete-orphan",
        order_by="Education.created_at.desc()",
    )


class Experience(Base):
    """Job entry on a profile."""

    __tablename__ = "profile_experience"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    profile_id = Column(
        Uuid,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    )
    title = Column(Text, nullable=False)
    company = Column(Text, nullable=False)
    location = Column(Text, nullable=False, default="")
    from_date = Column("from", Date, nullable=False)
    to_date = Column("to", Date)
    current = Column(Boolean, nullable=False, default=False)
    description = Column(Text, nullable=False, default="")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (Index("idx_profile_experience_profile", profile_id, created_at),)

    profile = relationship("Profile", back_populates="experience")


class Education(Base):
    """School entry on a profile."""

    __tablename__ = "profile_education"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    profile_id = Column(
        Uuid,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    )
    school = Column(Text, nullable=False)
    degree = Column(Text, nullable=False)
    fieldofstudy = Column(Text, nullable=False)
    from_date = Column("from", Date, nullable=False)
    to_date = Column("to", Date)
    current = Column(Boolean, nullable=False, default=False)
    description = Column(Text, nullable=False, default="")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (Index("idx_profile_education_profile", profile_id, created_at),)

    profile = relationship("Profile", back_populates="education")
