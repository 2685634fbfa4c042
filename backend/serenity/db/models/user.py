from sqlalchemy import Boolean, Column, String
from sqlalchemy.orm import relationship

from serenity.db.base import Base, TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and profile."""

    username = Column(String(50), nullable=False)
    email = Column(String(100), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)

    # Status
    is_active = Column(Boolean, default=True)

    # Relationships
    chat_sessions = relationship(
        "ChatSession", back_populates="user", cascade="all, delete-orphan"
    )
    posts = relationship("Post", back_populates="author")
