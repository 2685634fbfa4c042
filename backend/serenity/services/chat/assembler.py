"""
Turns stored chat history into the prompt sent to the LLM.
"""

import logging
from typing import List, Sequence

from serenity.core.exceptions import GenerationError, LLMGatewayError
from serenity.schemas.chat import ChatMessage, EmotionalContext
from serenity.services.llm import GeminiClient, Turn

logger = logging.getLogger(__name__)


def format_emotional_context(context: EmotionalContext) -> str:
    """Render the annotation attached to a user turn."""
    return (
        "[EMOTIONAL CONTEXT:\n"
        f"  Facial emotion: {context.facial_emotion or 'Not detected'}\n"
        f"  Voice tone: {context.voice_tone or 'Not detected'}\n"
        f"  Text sentiment: {context.text_sentiment or 'Not analyzed'}\n"
        "]"
    )


class ConversationAssembler:
    """Builds prompts around a fixed persona and fetches replies."""

    def __init__(self, persona: str, gateway: GeminiClient):
        self.persona = persona
        self.gateway = gateway

    def build_prompt(self, messages: Sequence[ChatMessage]) -> List[Turn]:
        """
        Return the persona turn followed by one turn per message, in order.

        User messages with an emotional context carry it as an annotation
        next to their text.
        """
        turns = [Turn(role="system", text=self.persona)]

        for message in messages:
            if message.role == "user":
                annotation = None
                if message.emotional_context is not None:
                    annotation = format_emotional_context(message.emotional_context)
                turns.append(
                    Turn(role="user", text=message.content, annotation=annotation)
                )
            else:
                turns.append(Turn(role="model", text=message.content))

        return turns

    async def get_reply(self, turns: List[Turn]) -> str:
        """
        Fetch one assistant reply.

        Raises:
            GenerationError: If the gateway fails for any reason
        """
        try:
            return await self.gateway.generate(turns)
        except LLMGatewayError as e:
            logger.error(f"Error with Gemini API: {e.message}")
            raise GenerationError("Failed to get response from AI") from e
