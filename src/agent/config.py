"""Completion provider configuration with environment variable loading.

Pydantic-based configuration for the agno agent that answers chat turns.
Supports Google Gemini (default) and OpenAI or any OpenAI-compatible API via
a custom base URL.
"""

import os
from typing import Any, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

ProviderName = Literal["google", "openai"]

_KEY_ENV_VARS: dict[str, str] = {
    "google": "GOOGLE_API_KEY",
    "openai": "OPENAI_API_KEY",
}

_DEFAULT_MODELS: dict[str, str] = {
    "google": "gemini-2.5-flash",
    "openai": "gpt-4o-mini",
}


def _api_key_from_env(data: dict[str, Any]) -> str:
    provider = data.get("provider", "google")
    return os.getenv("LLM_API_KEY") or os.getenv(_KEY_ENV_VARS.get(provider, ""), "")


def _model_from_env(data: dict[str, Any]) -> str:
    provider = data.get("provider", "google")
    return os.getenv("LLM_MODEL") or _DEFAULT_MODELS.get(provider, "gemini-2.5-flash")


class AgentConfig(BaseModel):
    """Configuration for the completion agent.

    Attributes:
        provider: Model vendor, "google" (Gemini) or "openai".
        api_key: API key for model access.
        model_name: Model identifier to use.
        base_url: API base URL for OpenAI-compatible servers (None for default).
        temperature: Sampling temperature (0.0 = deterministic, 2.0 = creative).
        max_tokens: Maximum tokens in generated response.
    """

    provider: ProviderName = Field(
        default_factory=lambda: os.getenv("LLM_PROVIDER") or "google",
        validate_default=True,
        description="Model vendor",
    )
    api_key: str = Field(
        default_factory=_api_key_from_env,
        validate_default=True,
        description="API key for LLM provider",
    )
    model_name: str = Field(
        default_factory=_model_from_env,
        description="Model to use",
    )
    base_url: str | None = Field(
        default_factory=lambda: os.getenv("LLM_BASE_URL") or None,
        description="API base URL (OpenAI-compatible providers only)",
    )
    temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for response generation",
    )
    max_tokens: int = Field(
        default=1024,
        ge=1,
        le=128000,
        description="Maximum tokens in generated response",
    )

    @field_validator("provider", mode="before")
    @classmethod
    def normalize_provider(cls, v: object) -> object:
        """Accept provider names in any case and with surrounding spaces."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError(
                "API key required. Set LLM_API_KEY, GOOGLE_API_KEY or OPENAI_API_KEY in .env"
            )
        return v.strip()


def get_agent_config() -> AgentConfig:
    """Create agent configuration from environment.

    Returns:
        Configured AgentConfig instance.

    Raises:
        ValueError: If no API key is set.
    """
    return AgentConfig()
