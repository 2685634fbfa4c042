"""
REST API endpoints for the community board.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from serenity.db.models import User
from serenity.db.session import get_db
from serenity.dependencies import get_current_user
from serenity.schemas.community import (
    CommentCreate,
    LikeResponse,
    PostCreate,
    PostResponse,
)
from serenity.services import community

router = APIRouter(prefix="/api/community", tags=["community"])


@router.post(
    "/posts", response_model=PostResponse, status_code=status.HTTP_201_CREATED
)
async def create_post(
    body: PostCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    post = community.create_post(db, user, body.content, body.is_anonymous)
    return community.to_response(db, post)


@router.get("/posts", response_model=list[PostResponse])
async def get_posts(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Return every post, newest first, with anonymous authors hidden."""
    return [community.to_response(db, post) for post in community.list_posts(db)]


@router.get("/posts/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return community.to_response(db, community.get_post(db, post_id))


@router.post(
    "/posts/{post_id}/comments",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    post_id: str,
    body: CommentCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Add a comment and return the updated post."""
    post = community.add_comment(db, post_id, user, body.content, body.is_anonymous)
    return community.to_response(db, post)


@router.put("/posts/{post_id}/like", response_model=LikeResponse)
async def like_post(
    post_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return LikeResponse(likes=community.like_post(db, post_id))
