"""
Client for the Gemini ``generateContent`` REST API.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Optional

import httpx

from serenity.core.config import Settings
from serenity.core.exceptions import LLMGatewayError

logger = logging.getLogger(__name__)

# The API rejects empty text parts
EMPTY_TURN_TEXT = "(no text provided)"


@dataclass(frozen=True)
class Turn:
    """One entry of an LLM prompt.

    ``annotation`` is sent as an extra part of the same turn, after ``text``.
    """

    role: Literal["system", "user", "model"]
    text: str
    annotation: Optional[str] = None

    def parts(self) -> List[Dict[str, str]]:
        parts = []
        if self.text:
            parts.append({"text": self.text})
        if self.annotation:
            parts.append({"text": self.annotation})
        if not parts:
            parts.append({"text": EMPTY_TURN_TEXT})
        return parts


class GeminiClient:
    """Single-call boundary to the hosted completion API. No retries."""

    def __init__(self, settings: Settings):
        self.api_key = settings.google_api_key
        self.model = settings.gemini_model
        self.base_url = settings.gemini_base_url.rstrip("/")
        self.timeout = settings.llm_timeout_seconds
        self.generation_config = {
            "temperature": settings.llm_temperature,
            "maxOutputTokens": settings.llm_max_output_tokens,
            "topP": settings.llm_top_p,
        }

    def build_payload(self, turns: List[Turn]) -> Dict[str, Any]:
        """Map prompt turns onto the request body."""
        system_parts = []
        contents = []
        for turn in turns:
            if turn.role == "system":
                system_parts.extend(turn.parts())
            else:
                contents.append({"role": turn.role, "parts": turn.parts()})

        payload = {
            "contents": contents,
            "generationConfig": self.generation_config,
        }
        if system_parts:
            payload["systemInstruction"] = {"parts": system_parts}
        return payload

    async def _request(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Send a request to the Gemini API."""
        url = f"{self.base_url}/models/{self.model}:generateContent"

        headers = {
            "x-goog-api-key": self.api_key,
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    url, json=payload, headers=headers, timeout=self.timeout
                )
                response.raise_for_status()
                return response.json()
        except httpx.TimeoutException as e:
            raise LLMGatewayError(f"Gemini request timed out: {e}") from e
        except httpx.HTTPStatusError as e:
            raise LLMGatewayError(
                f"Gemini returned status {e.response.status_code}"
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            raise LLMGatewayError(f"Gemini request failed: {e}") from e

    @staticmethod
    def extract_text(data: Dict[str, Any]) -> str:
        """Join the text parts of the first candidate."""
        candidates = data.get("candidates") or []
        if not candidates:
            raise LLMGatewayError("Gemini returned no candidates")

        parts = candidates[0].get("content", {}).get("parts") or []
        text = "".join(part.get("text", "") for part in parts)
        if not text:
            raise LLMGatewayError("Gemini returned an empty reply")
        return text

    async def generate(self, turns: List[Turn]) -> str:
        """
        Generate a reply for an ordered list of turns.

        Raises:
            LLMGatewayError: On timeout, transport error, non-2xx status or
                a reply without text
        """
        logger.info(f"Sending {len(turns)} turns to Gemini model {self.model}")
        data = await self._request(self.build_payload(turns))
        return self.extract_text(data)

    async def complete(self, prompt: str) -> str:
        """Generate a reply for a single user prompt."""
        return await self.generate([Turn(role="user", text=prompt)])
