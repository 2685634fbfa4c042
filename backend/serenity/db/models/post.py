from sqlalchemy import Boolean, Column, ForeignKey, Integer, JSON, Text, UUID
from sqlalchemy.orm import relationship

from serenity.db.base import Base, TimestampMixin


class Post(Base, TimestampMixin):
    """Community post with its comments embedded."""

    author_id = Column(UUID(as_uuid=True), ForeignKey("user.id"), nullable=False)
    content = Column(Text, nullable=False)
    is_anonymous = Column(Boolean, default=False, nullable=False)
    likes = Column(Integer, default=0, nullable=False)

    # Ordered comment dicts: id, content, author_id, is_anonymous, likes, created_at
    comments = Column(JSON, default=list, nullable=False)

    # Relationships
    author = relationship("User", back_populates="posts")
