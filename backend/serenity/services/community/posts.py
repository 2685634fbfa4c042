"""
Service for community posts and their comments.
"""

import logging
import uuid
from typing import Dict, List, Union

from sqlalchemy import update
from sqlalchemy.orm import Session, selectinload

from serenity.core.exceptions import NotFoundError
from serenity.db.models import Post, User
from serenity.schemas.community import (
    ANONYMOUS_USERNAME,
    AuthorDisplay,
    Comment,
    CommentResponse,
    PostResponse,
)
from serenity.utils.datetime_helper import utc_now

logger = logging.getLogger(__name__)


def _parse_id(value: Union[str, uuid.UUID]) -> uuid.UUID:
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError:
        raise NotFoundError("Post not found")


def _author_display(
    author_id: str, is_anonymous: bool, usernames: Dict[str, str]
) -> AuthorDisplay:
    if is_anonymous:
        return AuthorDisplay(username=ANONYMOUS_USERNAME)
    return AuthorDisplay(id=author_id, username=usernames.get(author_id, "Unknown"))


def to_response(db: Session, post: Post) -> PostResponse:
    """Shape a post for readers, hiding anonymous authors."""
    comments = [Comment.model_validate(c) for c in post.comments or []]

    author_ids = {c.author_id for c in comments}
    usernames = {}
    if author_ids:
        rows = (
            db.query(User.id, User.username)
            .filter(User.id.in_([uuid.UUID(a) for a in author_ids]))
            .all()
        )
        usernames = {str(row.id): row.username for row in rows}
    usernames[str(post.author_id)] = post.author.username

    return PostResponse(
        id=post.id,
        content=post.content,
        author=_author_display(str(post.author_id), post.is_anonymous, usernames),
        is_anonymous=post.is_anonymous,
        likes=post.likes,
        comments=[
            CommentResponse(
                id=c.id,
                content=c.content,
                author=_author_display(c.author_id, c.is_anonymous, usernames),
                is_anonymous=c.is_anonymous,
                likes=c.likes,
                created_at=c.created_at,
            )
            for c in comments
        ],
        created_at=post.created_at,
        updated_at=post.updated_at,
    )


def create_post(
    db: Session, author: User, content: str, is_anonymous: bool = False
) -> Post:
    post = Post(
        author_id=author.id,
        content=content,
        is_anonymous=is_anonymous,
        likes=0,
        comments=[],
    )
    db.add(post)
    db.commit()
    db.refresh(post)

    logger.info(f"Created post {post.id} for user {author.id}")
    return post


def list_posts(db: Session) -> List[Post]:
    """Return all posts, newest first."""
    return (
        db.query(Post)
        .options(selectinload(Post.author))
        .order_by(Post.created_at.desc())
        .all()
    )


def get_post(db: Session, post_id: Union[str, uuid.UUID]) -> Post:
    """
    Fetch a post by ID.

    Raises:
        NotFoundError: If the post does not exist
    """
    post = db.query(Post).filter(Post.id == _parse_id(post_id)).first()
    if not post:
        raise NotFoundError("Post not found")
    return post


def add_comment(
    db: Session,
    post_id: Union[str, uuid.UUID],
    author: User,
    content: str,
    is_anonymous: bool = False,
) -> Post:
    """Append a comment to a post and return the updated post."""
    post = get_post(db, post_id)

    comment = Comment(
        id=uuid.uuid4().hex,
        content=content,
        author_id=str(author.id),
        is_anonymous=is_anonymous,
        likes=0,
        created_at=utc_now(),
    )
    # Reassign so the JSON column is flagged dirty
    post.comments = list(post.comments or []) + [comment.model_dump(mode="json")]
    db.commit()
    db.refresh(post)

    logger.info(f"Added comment {comment.id} to post {post.id}")
    return post


def like_post(db: Session, post_id: Union[str, uuid.UUID]) -> int:
    """Increment a post's like counter and return the new count."""
    post = get_post(db, post_id)

    db.execute(
        update(Post)
        .where(Post.id == post.id)
        .values(likes=Post.likes + 1)
        .execution_options(synchronize_session=False)
    )
    db.commit()
    db.refresh(post)
    return post.likes
