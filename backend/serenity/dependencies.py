"""
Dependency injection functions for the API.
"""

import uuid
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from serenity.core.config import Settings, get_settings
from serenity.core.exceptions import AuthError, PayloadTooLargeError
from serenity.core.security import verify_token
from serenity.db.models import User
from serenity.db.session import get_db
from serenity.services.chat import ConversationAssembler
from serenity.services.emotion import (
    EmotionScorer,
    NeutralFaceClassifier,
    NeutralVoiceClassifier,
    TextEmotionClassifier,
    ThoughtReframer,
)
from serenity.services.llm import GeminiClient

# Database dependency
db_dependency = get_db

# Largest chat request accepted, below the transport limit
MAX_MESSAGE_PAYLOAD_BYTES = 45 * 1024 * 1024

bearer_scheme = HTTPBearer(auto_error=False)


async def enforce_payload_limit(request: Request) -> None:
    """
    Reject oversized chat payloads before any other work.

    Raises:
        PayloadTooLargeError: If the raw body exceeds 45 MiB
    """
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > MAX_MESSAGE_PAYLOAD_BYTES:
        raise PayloadTooLargeError()

    body = await request.body()
    if len(body) > MAX_MESSAGE_PAYLOAD_BYTES:
        raise PayloadTooLargeError()


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> User:
    """
    Get the current authenticated user from a bearer token.

    Verifies the token and fetches the corresponding user from the database.
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthError("Not authorized, no token")

    try:
        payload = verify_token(credentials.credentials, settings)
    except ValueError:
        raise AuthError("Not authorized, token failed")

    user = db.query(User).filter(User.id == _user_id(payload["sub"])).first()
    if not user or not user.is_active:
        raise AuthError("Not authorized, user not found")

    return user


def _user_id(subject: str) -> uuid.UUID:
    try:
        return uuid.UUID(subject)
    except ValueError:
        raise AuthError("Not authorized, token failed")


def get_gateway(settings: Settings = Depends(get_settings)) -> GeminiClient:
    return GeminiClient(settings)


def get_emotion_scorer(gateway: GeminiClient = Depends(get_gateway)) -> EmotionScorer:
    return EmotionScorer(
        text_classifier=TextEmotionClassifier(gateway),
        voice_classifier=NeutralVoiceClassifier(),
        face_classifier=NeutralFaceClassifier(),
    )


def get_assembler(
    settings: Settings = Depends(get_settings),
    gateway: GeminiClient = Depends(get_gateway),
) -> ConversationAssembler:
    return ConversationAssembler(settings.persona_prompt, gateway)


def get_thought_reframer(
    gateway: GeminiClient = Depends(get_gateway),
) -> ThoughtReframer:
    return ThoughtReframer(gateway)
