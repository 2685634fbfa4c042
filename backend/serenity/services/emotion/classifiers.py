"""
Emotion classifiers for text, voice and facial input.

Voice and face classification are capabilities: callers depend on the
abstract classes and receive a concrete implementation at construction.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from serenity.core.exceptions import ClassificationError, LLMGatewayError
from serenity.services.llm import GeminiClient

logger = logging.getLogger(__name__)

NEUTRAL = "Neutral"

MOOD_PROMPT = """
Analyze the emotional state in this text. Categorize it as one of the following:
- Happy
- Sad
- Anxious
- Angry
- Neutral
- Stressed
- Depressed

Text: "{text}"

Return only the emotion category name.
"""


class TextEmotionClassifier:
    """Classifies free text into one of the seven emotion labels via the LLM."""

    def __init__(self, gateway: GeminiClient):
        self.gateway = gateway

    async def classify(self, text: str) -> str:
        """
        Return the emotion label the LLM picks for ``text``.

        Raises:
            ClassificationError: If the upstream call fails
        """
        try:
            label = await self.gateway.complete(MOOD_PROMPT.format(text=text))
        except LLMGatewayError as e:
            logger.error(f"Error analyzing mood: {e.message}")
            raise ClassificationError("Failed to analyze mood") from e
        return label.strip()


class VoiceEmotionClassifier(ABC):
    """Maps a base64 audio payload to one of the seven emotion labels."""

    @abstractmethod
    def classify(self, audio_payload: str) -> str:
        ...


class FaceEmotionClassifier(ABC):
    """Maps a base64 image payload to one of the seven emotion labels."""

    def classify(self, image_payload: str, client_hint: Optional[str] = None) -> str:
        # A label from the client-side detector is trusted as-is
        if client_hint:
            logger.debug(f"Using client-detected emotion: {client_hint}")
            return client_hint
        return self.classify_image(image_payload)

    @abstractmethod
    def classify_image(self, image_payload: str) -> str:
        ...


class NeutralVoiceClassifier(VoiceEmotionClassifier):
    """Placeholder until an audio emotion model is wired in."""

    def classify(self, audio_payload: str) -> str:
        return NEUTRAL


class NeutralFaceClassifier(FaceEmotionClassifier):
    """Placeholder until a facial expression model is wired in."""

    def classify_image(self, image_payload: str) -> str:
        return NEUTRAL
