from sqlalchemy import Column, ForeignKey, Integer, JSON, String, UUID
from sqlalchemy.orm import relationship

from serenity.db.base import Base, TimestampMixin

DEFAULT_TITLE = "New Chat"


class ChatSession(Base, TimestampMixin):
    """One conversation thread between a user and the assistant."""

    user_id = Column(
        UUID(as_uuid=True), ForeignKey("user.id"), index=True, nullable=False
    )
    title = Column(String(100), default=DEFAULT_TITLE, nullable=False)

    # Ordered message dicts: role, content, timestamp, emotional_context
    messages = Column(JSON, default=list, nullable=False)

    # Mirrors len(messages); appends are conditional on it
    message_count = Column(Integer, default=0, nullable=False)

    # Relationships
    user = relationship("User", back_populates="chat_sessions")
