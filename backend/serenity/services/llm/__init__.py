"""
LLM gateway package initialization.
"""

from serenity.services.llm.gemini import GeminiClient, Turn

__all__ = [
    "GeminiClient",
    "Turn",
]
