"""
Application configuration loaded from the environment.
"""

import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel, Field


THERAPIST_PROMPT = """You are a compassionate mental health therapist named SerenityBot.
Use empathy first, then guide the user using evidence-based techniques like CBT (Cognitive Behavioral Therapy) and DBT (Dialectical Behavior Therapy).
Avoid generic replies and platitudes. Be supportive, calm, and helpful.
When appropriate, suggest specific coping strategies, breathing exercises, or mindfulness techniques.
Consider the user's emotional state in your responses.
Never claim to be a replacement for professional help - encourage seeking professional help when appropriate.
Keep responses relatively concise (2-3 paragraphs maximum) unless the situation requires more detail."""

# Values required at startup; there is no in-source fallback for any of them
REQUIRED_VARIABLES = ("JWT_SECRET_KEY", "GOOGLE_API_KEY")


class Settings(BaseModel):
    """Runtime settings shared by the gateway, assembler and security code."""

    database_url: str = "sqlite:///./serenity.db"
    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    access_token_expire_days: int = 30

    google_api_key: str
    gemini_model: str = "gemini-1.5-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    llm_timeout_seconds: float = 60.0
    llm_temperature: float = 1.0
    llm_max_output_tokens: int = 2048
    llm_top_p: float = 0.95

    persona_prompt: str = THERAPIST_PROMPT
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:3000"]
    )
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from environment variables.

        Raises:
            RuntimeError: If a required variable is missing or empty
        """
        missing = [name for name in REQUIRED_VARIABLES if not os.getenv(name)]
        if missing:
            raise RuntimeError(
                f"Missing required environment variables: {', '.join(missing)}"
            )

        values = {
            "jwt_secret_key": os.getenv("JWT_SECRET_KEY"),
            "google_api_key": os.getenv("GOOGLE_API_KEY"),
        }

        optional = {
            "database_url": "DATABASE_URL",
            "gemini_model": "GEMINI_MODEL",
            "gemini_base_url": "GEMINI_BASE_URL",
            "llm_timeout_seconds": "LLM_TIMEOUT_SECONDS",
            "access_token_expire_days": "ACCESS_TOKEN_EXPIRE_DAYS",
            "log_level": "LOG_LEVEL",
        }
        for field_name, variable in optional.items():
            value = os.getenv(variable)
            if value:
                values[field_name] = value

        origins = os.getenv("CORS_ORIGINS")
        if origins:
            values["cors_origins"] = [
                origin.strip() for origin in origins.split(",") if origin.strip()
            ]

        return cls(**values)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, built on first use."""
    return Settings.from_env()
