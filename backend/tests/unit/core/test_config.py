"""Tests for settings loading."""

import pytest

from serenity.core.config import THERAPIST_PROMPT, Settings


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "JWT_SECRET_KEY",
        "GOOGLE_API_KEY",
        "DATABASE_URL",
        "GEMINI_MODEL",
        "LLM_TIMEOUT_SECONDS",
        "CORS_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_missing_credentials_fail_fast(clean_env):
    with pytest.raises(RuntimeError) as exc_info:
        Settings.from_env()

    assert "JWT_SECRET_KEY" in str(exc_info.value)
    assert "GOOGLE_API_KEY" in str(exc_info.value)


def test_empty_credential_counts_as_missing(clean_env):
    clean_env.setenv("JWT_SECRET_KEY", "")
    clean_env.setenv("GOOGLE_API_KEY", "key")

    with pytest.raises(RuntimeError, match="JWT_SECRET_KEY"):
        Settings.from_env()


def test_defaults(clean_env):
    clean_env.setenv("JWT_SECRET_KEY", "secret")
    clean_env.setenv("GOOGLE_API_KEY", "key")

    settings = Settings.from_env()

    assert settings.gemini_model == "gemini-1.5-flash"
    assert settings.access_token_expire_days == 30
    assert settings.llm_timeout_seconds == 60.0
    assert settings.persona_prompt == THERAPIST_PROMPT
    assert settings.cors_origins == ["http://localhost:3000"]


def test_overrides(clean_env):
    clean_env.setenv("JWT_SECRET_KEY", "secret")
    clean_env.setenv("GOOGLE_API_KEY", "key")
    clean_env.setenv("GEMINI_MODEL", "gemini-2.0-flash")
    clean_env.setenv("LLM_TIMEOUT_SECONDS", "12.5")
    clean_env.setenv("CORS_ORIGINS", "https://a.test, https://b.test")

    settings = Settings.from_env()

    assert settings.gemini_model == "gemini-2.0-flash"
    assert settings.llm_timeout_seconds == 12.5
    assert settings.cors_origins == ["https://a.test", "https://b.test"]
