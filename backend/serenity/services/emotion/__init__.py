"""
Emotion analysis package initialization.
"""

from serenity.services.emotion.classifiers import (
    FaceEmotionClassifier,
    NeutralFaceClassifier,
    NeutralVoiceClassifier,
    TextEmotionClassifier,
    VoiceEmotionClassifier,
)
from serenity.services.emotion.scorer import EmotionScorer, score_labels
from serenity.services.emotion.thoughts import ThoughtReframer

__all__ = [
    "EmotionScorer",
    "FaceEmotionClassifier",
    "NeutralFaceClassifier",
    "NeutralVoiceClassifier",
    "TextEmotionClassifier",
    "ThoughtReframer",
    "VoiceEmotionClassifier",
    "score_labels",
]
