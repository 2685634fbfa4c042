"""
Pydantic models for chat-related schemas.

Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime
from typing import Dict, List, Literal, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

EMOTION_LABELS = (
    "happy",
    "sad",
    "angry",
    "anxious",
    "neutral",
    "stressed",
    "depressed",
)


class CamelModel(BaseModel):
    """Base model that accepts and emits camelCase keys."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class EmotionalContext(CamelModel):
    """Detected emotions for one user message and their combined score."""

    text_sentiment: Optional[str] = None
    voice_tone: Optional[str] = None
    facial_emotion: Optional[str] = None
    combined_emotion_score: Optional[Dict[str, float]] = None


class ChatMessage(CamelModel):
    """Single message stored inside a chat session."""

    role: Literal["user", "assistant"]
    content: str = ""
    timestamp: datetime
    emotional_context: Optional[EmotionalContext] = None


class ChatSessionResponse(CamelModel):
    """Schema for a chat session with its messages."""

    id: UUID
    user_id: UUID
    title: str
    messages: List[ChatMessage] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class SendMessageRequest(CamelModel):
    """Body of ``POST /api/chat/message``."""

    message: str = ""
    chat_id: Optional[str] = None
    audio_data: Optional[str] = None
    image_data: Optional[str] = None
    detected_emotion: Optional[str] = None

    @field_validator("message", mode="before")
    @classmethod
    def none_to_empty(cls, value):
        return "" if value is None else value


class MoodAnalysisRequest(CamelModel):
    text: Optional[str] = None


class VoiceAnalysisRequest(CamelModel):
    audio_data: Optional[str] = None


class FaceAnalysisRequest(CamelModel):
    image_data: Optional[str] = None
    detected_emotion: Optional[str] = None


class EmotionAnalysisRequest(CamelModel):
    text: Optional[str] = None
    audio_data: Optional[str] = None
    image_data: Optional[str] = None
    detected_emotion: Optional[str] = None


class ThoughtRequest(CamelModel):
    """Body of the thought analysis and reframing endpoints."""

    negative_thought: Optional[str] = None
    distortion: Optional[str] = None
