"""
Combines text, voice and facial emotion signals into one weighted score.
"""

import logging
from typing import Dict, List, Optional, Tuple

from serenity.core.exceptions import ClassificationError
from serenity.schemas.chat import EMOTION_LABELS, EmotionalContext
from serenity.services.emotion.classifiers import (
    NEUTRAL,
    FaceEmotionClassifier,
    TextEmotionClassifier,
    VoiceEmotionClassifier,
)

logger = logging.getLogger(__name__)

TEXT_WEIGHT = 1.0
VOICE_WEIGHT = 1.5
FACE_WEIGHT = 2.0


def normalize_label(label: str) -> str:
    """Lowercase a label; anything outside the taxonomy counts as neutral."""
    cleaned = label.strip().strip(".!\"'").lower()
    return cleaned if cleaned in EMOTION_LABELS else "neutral"


def score_labels(weighted: List[Tuple[Optional[str], float]]) -> Dict[str, float]:
    """
    Build the normalized label map from ``(label, weight)`` pairs.

    Pairs whose label is None are absent sources and carry no weight. When
    no source is present every label scores 0.0.
    """
    scores = {label: 0.0 for label in EMOTION_LABELS}
    total = 0.0
    for label, weight in weighted:
        if label is None:
            continue
        scores[normalize_label(label)] += weight
        total += weight

    if total > 0:
        scores = {label: value / total for label, value in scores.items()}
    return scores


class EmotionScorer:
    """Produces an EmotionalContext from up to three optional inputs."""

    def __init__(
        self,
        text_classifier: TextEmotionClassifier,
        voice_classifier: VoiceEmotionClassifier,
        face_classifier: FaceEmotionClassifier,
    ):
        self.text_classifier = text_classifier
        self.voice_classifier = voice_classifier
        self.face_classifier = face_classifier

    async def classify_text(self, text: str) -> str:
        return await self.text_classifier.classify(text)

    def classify_voice(self, audio_payload: str) -> str:
        return self.voice_classifier.classify(audio_payload)

    def classify_face(
        self, image_payload: str, client_hint: Optional[str] = None
    ) -> str:
        return self.face_classifier.classify(image_payload, client_hint)

    async def combine(
        self,
        text: str,
        audio: Optional[str] = None,
        image: Optional[str] = None,
        client_hint: Optional[str] = None,
    ) -> EmotionalContext:
        """
        Classify every present input and weight the results.

        Text weighs 1.0, voice 1.5 and face 2.0. A text classification
        failure never propagates: the result degrades to a neutral text
        sentiment with no other fields.
        """
        try:
            text_sentiment = await self.classify_text(text)
        except ClassificationError as e:
            logger.warning(f"Emotion classification failed, using neutral: {e}")
            return EmotionalContext(text_sentiment=NEUTRAL)

        voice_tone = self.classify_voice(audio) if audio else None
        facial_emotion = self.classify_face(image, client_hint) if image else None

        combined = score_labels(
            [
                (text_sentiment, TEXT_WEIGHT),
                (voice_tone, VOICE_WEIGHT),
                (facial_emotion, FACE_WEIGHT),
            ]
        )

        return EmotionalContext(
            text_sentiment=text_sentiment,
            voice_tone=voice_tone,
            facial_emotion=facial_emotion,
            combined_emotion_score=combined,
        )
