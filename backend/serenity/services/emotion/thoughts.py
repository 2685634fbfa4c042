"""
Cognitive distortion analysis and thought reframing.
"""

import logging

from serenity.core.exceptions import (
    ClassificationError,
    GenerationError,
    LLMGatewayError,
)
from serenity.services.llm import GeminiClient

logger = logging.getLogger(__name__)

DISTORTION_PROMPT = """
Analyze the following negative thought and identify which cognitive distortion it most closely represents from the following options:
1. Black and White Thinking: Seeing things in absolute, all-or-nothing categories.
2. Catastrophizing: Expecting the worst possible outcome.
3. Mind Reading: Assuming you know what others are thinking without evidence.
4. Emotional Reasoning: Assuming your feelings reflect reality.

Negative thought: "{thought}"

Return ONLY the name of the cognitive distortion (e.g., "Black and White Thinking") without any other text or explanation.
"""

REFRAME_PROMPT = """
You are a skilled cognitive behavioral therapist with expertise in thought reframing.

The user has provided the following negative thought:
"{thought}"

The cognitive distortion identified is: {distortion}

Please generate a reframed version of this thought that is:
1. More balanced and realistic
2. Challenges the identified cognitive distortion
3. Supportive and compassionate, not toxic positivity
4. Specific to the original thought's context

Return only the reframed thought without any additional explanations, introductions, or comments.
"""


class ThoughtReframer:
    """Single-shot LLM tools for the thought reframing exercise."""

    def __init__(self, gateway: GeminiClient):
        self.gateway = gateway

    async def analyze_cognitive_distortion(self, negative_thought: str) -> str:
        try:
            reply = await self.gateway.complete(
                DISTORTION_PROMPT.format(thought=negative_thought)
            )
        except LLMGatewayError as e:
            logger.error(f"Error analyzing cognitive distortion: {e.message}")
            raise ClassificationError("Failed to analyze cognitive distortion") from e
        return reply.strip()

    async def generate_reframed_thought(
        self, negative_thought: str, distortion: str
    ) -> str:
        try:
            reply = await self.gateway.complete(
                REFRAME_PROMPT.format(thought=negative_thought, distortion=distortion)
            )
        except LLMGatewayError as e:
            logger.error(f"Error generating reframed thought: {e.message}")
            raise GenerationError("Failed to generate reframed thought") from e
        return reply.strip()
