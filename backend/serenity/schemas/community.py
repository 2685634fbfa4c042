"""
Pydantic models for community posts and comments.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field, field_validator

from serenity.schemas.chat import CamelModel

ANONYMOUS_USERNAME = "Anonymous User"


class PostCreate(CamelModel):
    """Schema for creating a post or a comment."""

    content: str
    is_anonymous: bool = False

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Content is required")
        return value


class CommentCreate(PostCreate):
    """Schema for adding a comment to a post."""


class Comment(CamelModel):
    """Comment as stored inside a post."""

    id: str
    content: str
    author_id: str
    is_anonymous: bool = False
    likes: int = 0
    created_at: datetime


class AuthorDisplay(CamelModel):
    """Author as shown to readers; anonymous authors carry no id."""

    id: Optional[str] = None
    username: str


class CommentResponse(CamelModel):
    id: str
    content: str
    author: AuthorDisplay
    is_anonymous: bool
    likes: int
    created_at: datetime


class PostResponse(CamelModel):
    """Schema for post responses."""

    id: UUID
    content: str
    author: AuthorDisplay
    is_anonymous: bool
    likes: int
    comments: List[CommentResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class LikeResponse(CamelModel):
    likes: int
