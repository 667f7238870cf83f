"""User model."""

import uuid

from sqlalchemy import Column, DateTime, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

from devconnector.database import Base, utcnow


class User(Base):
    """User account model."""

    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    email = Column(String, nullable=False)
    password_hash = Column(Text, nullable=False)
    avatar = Column(Text)
    date = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (UniqueConstraint("email", name="uq_users_email"),)

    profile = relationship("Profile", back_populates="user", uselist=False)
