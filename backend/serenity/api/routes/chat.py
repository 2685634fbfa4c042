"""
REST API endpoints related to chat functionality.

This module provides endpoints for sending messages, managing chat sessions
and running the emotion and thought analysis tools directly.
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from serenity.core.exceptions import ValidationError
from serenity.db.models import User
from serenity.db.session import get_db
from serenity.dependencies import (
    enforce_payload_limit,
    get_assembler,
    get_current_user,
    get_emotion_scorer,
    get_thought_reframer,
)
from serenity.schemas.chat import (
    ChatSessionResponse,
    EmotionAnalysisRequest,
    EmotionalContext,
    FaceAnalysisRequest,
    MoodAnalysisRequest,
    SendMessageRequest,
    ThoughtRequest,
    VoiceAnalysisRequest,
)
from serenity.services.chat import (
    ConversationAssembler,
    delete_session,
    list_sessions,
    load_session,
    send_message,
)
from serenity.services.emotion import EmotionScorer, ThoughtReframer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/chat", tags=["chat"])


@router.post(
    "/message",
    dependencies=[Depends(enforce_payload_limit)],
)
async def post_message(
    body: SendMessageRequest,
    response: Response,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    scorer: EmotionScorer = Depends(get_emotion_scorer),
    assembler: ConversationAssembler = Depends(get_assembler),
):
    """
    Send a message and receive the assistant's reply.

    Creates a new chat when no ``chatId`` is given.
    """
    session, created = await send_message(db, user.id, body, scorer, assembler)

    if created:
        response.status_code = status.HTTP_201_CREATED

    return {"success": True, "data": ChatSessionResponse.model_validate(session)}


@router.get("")
async def get_chats(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Return the caller's chats, most recently updated first."""
    sessions = list_sessions(db, user.id)
    return {
        "success": True,
        "data": [ChatSessionResponse.model_validate(s) for s in sessions],
    }


@router.get("/{chat_id}")
async def get_chat(
    chat_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    session = load_session(db, chat_id, user.id)
    return {"success": True, "data": ChatSessionResponse.model_validate(session)}


@router.delete("/{chat_id}")
async def delete_chat(
    chat_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    delete_session(db, chat_id, user.id)
    return {"success": True, "message": "Chat deleted successfully"}


@router.post("/analyze-mood")
async def analyze_mood(
    body: MoodAnalysisRequest,
    user: User = Depends(get_current_user),
    scorer: EmotionScorer = Depends(get_emotion_scorer),
):
    """Classify the emotion expressed in a piece of text."""
    if not body.text:
        raise ValidationError("Text is required")

    return {"mood": await scorer.classify_text(body.text)}


@router.post("/analyze-voice")
async def analyze_voice(
    body: VoiceAnalysisRequest,
    user: User = Depends(get_current_user),
    scorer: EmotionScorer = Depends(get_emotion_scorer),
):
    if not body.audio_data:
        raise ValidationError("Audio data is required")

    return {"tone": scorer.classify_voice(body.audio_data)}


@router.post("/analyze-face")
async def analyze_face(
    body: FaceAnalysisRequest,
    user: User = Depends(get_current_user),
    scorer: EmotionScorer = Depends(get_emotion_scorer),
):
    if not body.image_data:
        raise ValidationError("Image data is required")

    return {"emotion": scorer.classify_face(body.image_data, body.detected_emotion)}


@router.post(
    "/analyze-emotion",
    response_model=EmotionalContext,
    response_model_exclude_none=True,
)
async def analyze_emotion(
    body: EmotionAnalysisRequest,
    user: User = Depends(get_current_user),
    scorer: EmotionScorer = Depends(get_emotion_scorer),
):
    """Combine text, voice and facial signals into one emotional context."""
    if not body.text:
        raise ValidationError("Text is required")

    return await scorer.combine(
        body.text, body.audio_data, body.image_data, body.detected_emotion
    )


@router.post("/analyze-thought")
async def analyze_thought(
    body: ThoughtRequest,
    user: User = Depends(get_current_user),
    reframer: ThoughtReframer = Depends(get_thought_reframer),
):
    """Name the cognitive distortion behind a negative thought."""
    if not body.negative_thought:
        raise ValidationError("Negative thought is required")

    distortion = await reframer.analyze_cognitive_distortion(body.negative_thought)
    return {
        "success": True,
        "data": {"negativeThought": body.negative_thought, "distortion": distortion},
    }


@router.post("/reframe-thought")
async def reframe_thought(
    body: ThoughtRequest,
    user: User = Depends(get_current_user),
    reframer: ThoughtReframer = Depends(get_thought_reframer),
):
    """
    Reframe a negative thought.

    The distortion is analyzed first when the client does not supply one.
    """
    if not body.negative_thought:
        raise ValidationError("Negative thought is required")

    distortion = body.distortion or await reframer.analyze_cognitive_distortion(
        body.negative_thought
    )
    reframed = await reframer.generate_reframed_thought(
        body.negative_thought, distortion
    )
    return {
        "success": True,
        "data": {
            "negativeThought": body.negative_thought,
            "distortion": distortion,
            "reframedThought": reframed,
        },
    }
