"""
Persistence of chat sessions and their append-only message history.
"""

import logging
import uuid
from typing import List, Union

from sqlalchemy import and_, desc, update
from sqlalchemy.orm import Session

from serenity.core.exceptions import ConcurrencyConflictError, NotFoundError
from serenity.db.models import ChatSession
from serenity.db.models.chat_session import DEFAULT_TITLE
from serenity.schemas.chat import ChatMessage
from serenity.utils.datetime_helper import utc_now

logger = logging.getLogger(__name__)

TITLE_LENGTH = 30


def make_title(content: str) -> str:
    """Title a session after the opening user message."""
    if not content:
        return DEFAULT_TITLE
    if len(content) > TITLE_LENGTH:
        return content[:TITLE_LENGTH] + "..."
    return content


def _parse_id(value: Union[str, uuid.UUID]) -> uuid.UUID:
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except ValueError:
        raise NotFoundError("Chat not found")


def create_session(db: Session, owner_id: uuid.UUID) -> ChatSession:
    """
    Create an empty chat session.

    Args:
        db: Database session
        owner_id: Owning user's ID

    Returns:
        Created chat session
    """
    session = ChatSession(
        user_id=owner_id,
        title=DEFAULT_TITLE,
        messages=[],
        message_count=0,
    )
    db.add(session)
    db.commit()
    db.refresh(session)

    logger.info(f"Created new chat session {session.id} for user {owner_id}")
    return session


def load_session(
    db: Session, session_id: Union[str, uuid.UUID], owner_id: uuid.UUID
) -> ChatSession:
    """
    Load a session owned by ``owner_id``.

    Raises:
        NotFoundError: If the session does not exist or has another owner
    """
    session = (
        db.query(ChatSession)
        .filter(
            and_(
                ChatSession.id == _parse_id(session_id),
                ChatSession.user_id == owner_id,
            )
        )
        .first()
    )

    if not session:
        raise NotFoundError("Chat not found")
    return session


def list_sessions(db: Session, owner_id: uuid.UUID) -> List[ChatSession]:
    """Return the owner's sessions, most recently updated first."""
    return (
        db.query(ChatSession)
        .filter(ChatSession.user_id == owner_id)
        .order_by(desc(ChatSession.updated_at))
        .all()
    )


def append_turn(
    db: Session,
    session: ChatSession,
    user_message: ChatMessage,
    assistant_message: ChatMessage,
) -> ChatSession:
    """
    Append a user message and its reply in one conditional update.

    The update only applies while the stored message count still matches the
    count ``session`` was loaded with. The title is set from the user message
    when the session reaches exactly two messages.

    Raises:
        ConcurrencyConflictError: If another request appended in between
    """
    expected = session.message_count
    new_count = expected + 2
    messages = list(session.messages or []) + [
        user_message.model_dump(mode="json"),
        assistant_message.model_dump(mode="json"),
    ]

    values = {
        "messages": messages,
        "message_count": new_count,
        "updated_at": utc_now(),
    }
    if new_count == 2:
        values["title"] = make_title(user_message.content)

    result = db.execute(
        update(ChatSession)
        .where(
            and_(
                ChatSession.id == session.id,
                ChatSession.message_count == expected,
            )
        )
        .values(**values)
        .execution_options(synchronize_session=False)
    )

    if result.rowcount != 1:
        db.rollback()
        logger.warning(
            f"Conflicting append on chat session {session.id} at count {expected}"
        )
        raise ConcurrencyConflictError()

    db.commit()
    db.refresh(session)

    logger.info(f"Appended turn to chat session {session.id}, {new_count} messages")
    return session


def delete_session(
    db: Session, session_id: Union[str, uuid.UUID], owner_id: uuid.UUID
) -> None:
    """
    Delete a chat session.

    Raises:
        NotFoundError: If the session does not exist or has another owner
    """
    session = load_session(db, session_id, owner_id)

    try:
        db.delete(session)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Error deleting chat session {session_id}: {str(e)}")
        raise

    logger.info(f"Deleted chat session {session_id} for user {owner_id}")
