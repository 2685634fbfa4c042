"""
Orchestration of a single chat turn.
"""

import logging
import uuid
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from serenity.core.exceptions import ValidationError
from serenity.db.models import ChatSession
from serenity.schemas.chat import ChatMessage, SendMessageRequest
from serenity.services.chat.assembler import ConversationAssembler
from serenity.services.chat.session_store import (
    append_turn,
    create_session,
    load_session,
)
from serenity.services.emotion import EmotionScorer
from serenity.utils.datetime_helper import utc_now

logger = logging.getLogger(__name__)


async def send_message(
    db: Session,
    owner_id: uuid.UUID,
    request: SendMessageRequest,
    scorer: EmotionScorer,
    assembler: ConversationAssembler,
) -> Tuple[ChatSession, bool]:
    """
    Run one user turn: score emotions, get a reply and persist both messages.

    Nothing is written until the reply exists; a new session is only created
    once there is a pair to store in it.

    Returns:
        The updated session and whether it was created by this call

    Raises:
        ValidationError: If the request carries no text, audio or image
        NotFoundError: If ``chat_id`` is not a session owned by the caller
        GenerationError: If no reply could be generated
    """
    if not (request.message or request.audio_data or request.image_data):
        raise ValidationError("Message is required")

    session: Optional[ChatSession] = None
    history = []
    if request.chat_id:
        session = load_session(db, request.chat_id, owner_id)
        history = [ChatMessage.model_validate(m) for m in session.messages]

    emotional_context = None
    if request.message:
        emotional_context = await scorer.combine(
            request.message,
            request.audio_data,
            request.image_data,
            request.detected_emotion,
        )

    user_message = ChatMessage(
        role="user",
        content=request.message,
        timestamp=utc_now(),
        emotional_context=emotional_context,
    )

    turns = assembler.build_prompt(history + [user_message])
    reply = await assembler.get_reply(turns)

    assistant_message = ChatMessage(
        role="assistant",
        content=reply,
        timestamp=utc_now(),
    )

    created = session is None
    if created:
        session = create_session(db, owner_id)

    return append_turn(db, session, user_message, assistant_message), created
