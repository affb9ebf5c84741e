"""Relay configuration with environment variable loading.

Pydantic-based configuration for the upstream Anthropic Messages API.
The model and output budget are fixed; callers cannot change them.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()

MODEL_ID = "claude-sonnet-4-5-20250929"
MAX_TOKENS = 1024


class RelayConfig(BaseModel):
    """Configuration for the upstream streaming client.

    Attributes:
        api_key: Anthropic API key.
        base_url: API base URL (override for proxies or test servers).
        api_version: Value sent in the anthropic-version header.
        timeout: Upstream request timeout in seconds.
    """

    # Environment-derived defaults go through the same validators
    model_config = ConfigDict(validate_default=True)

    api_key: str = Field(
        default_factory=lambda: os.getenv("ANTHROPIC_API_KEY", ""),
        description="API key for the Anthropic Messages API",
    )
    base_url: str = Field(
        default_factory=lambda: os.getenv("ANTHROPIC_BASE_URL", "https://api.anthropic.com"),
        description="API base URL",
    )
    api_version: str = Field(
        default_factory=lambda: os.getenv("ANTHROPIC_VERSION", "2023-06-01"),
        description="anthropic-version header value",
    )
    timeout: float = Field(
        default_factory=lambda: float(os.getenv("UPSTREAM_TIMEOUT", "60")),
        gt=0,
        description="Upstream request timeout in seconds",
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError("API key required. Set ANTHROPIC_API_KEY in .env")
        return v.strip()

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


def get_relay_config() -> RelayConfig:
    """Create relay configuration from environment.

    Returns:
        Configured RelayConfig instance.

    Raises:
        ValueError: If no API key is set.
    """
    return RelayConfig()
