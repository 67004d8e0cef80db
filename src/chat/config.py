"""Chat configuration with environment variable loading.

Pydantic-based configuration for the Gemini session, the request lifecycle
and the user-facing copy. Branding and localized strings are data here,
not separate code paths.
"""

import os
from enum import Enum

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()


class SafetyThreshold(str, Enum):
    """Block thresholds accepted by the Gemini safety filter."""

    BLOCK_LOW_AND_ABOVE = "BLOCK_LOW_AND_ABOVE"
    BLOCK_MEDIUM_AND_ABOVE = "BLOCK_MEDIUM_AND_ABOVE"
    BLOCK_ONLY_HIGH = "BLOCK_ONLY_HIGH"
    BLOCK_NONE = "BLOCK_NONE"


# Categories filtered for the whole session, all at one threshold.
SAFETY_CATEGORIES: tuple[str, ...] = (
    "HARM_CATEGORY_HARASSMENT",
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
    "HARM_CATEGORY_DANGEROUS_CONTENT",
)


class GeminiConfig(BaseModel):
    """Configuration for the remote Gemini chat session.

    Attributes:
        api_key: API key for Gemini access.
        model_name: Model identifier to use.
        temperature: Sampling temperature.
        top_k: Top-k sampling cutoff.
        top_p: Nucleus sampling cutoff.
        max_output_tokens: Maximum tokens in a generated reply.
        safety_threshold: Block level applied to every safety category.
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_KEY", os.getenv("GOOGLE_API_KEY", "")),
        validate_default=True,
        description="API key for the Gemini API",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", "gemini-2.0-flash"),
        description="Model to use",
    )
    temperature: float = Field(default=0.9, ge=0.0, le=2.0)
    top_k: int = Field(default=1, ge=1)
    top_p: float = Field(default=1.0, ge=0.0, le=1.0)
    max_output_tokens: int = Field(default=2048, ge=1, le=65536)
    safety_threshold: SafetyThreshold = SafetyThreshold.BLOCK_MEDIUM_AND_ABOVE

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError("API key required. Set GEMINI_API_KEY or GOOGLE_API_KEY in .env")
        return v.strip()

    @property
    def safety_settings(self) -> list[tuple[str, str]]:
        """(category, threshold) pairs for every filtered category."""
        return [(category, self.safety_threshold.value) for category in SAFETY_CATEGORIES]


class ChatSettings(BaseModel):
    """Request lifecycle limits.

    Attributes:
        request_timeout: Seconds to wait for a reply before giving up.
        history_window: Maximum transcript entries replayed into a new session.
    """

    request_timeout: float = Field(
        default_factory=lambda: float(os.getenv("CHAT_REQUEST_TIMEOUT", "60")),
        gt=0.0,
    )
    history_window: int = Field(
        default_factory=lambda: int(os.getenv("CHAT_HISTORY_WINDOW", "50")),
        ge=0,
    )


class UiText(BaseModel):
    """Branding, copy and toast timings for the chat screen."""

    title: str = "Codex Chatbot"
    assistant_name: str = Field(default_factory=lambda: os.getenv("ASSISTANT_NAME", "Codex"))
    user_label: str = "You"
    placeholder: str = "Ask anything for Codex..."
    empty_state: str = "Start a conversation"
    retry_label: str = "Reconnect"

    session_init_failed: str = "Failed to start chat. Please try again."
    send_failed: str = "Failed to send message. Please try again."
    send_timed_out: str = "The reply took too long. Please try again."
    empty_message: str = "Please enter a message before sending."
    service_unavailable: str = "Chat service is unavailable. Reconnect before sending."

    # Toast auto-dismiss durations (milliseconds)
    error_toast_ms: int = Field(default=3000, ge=0)
    validation_toast_ms: int = Field(default=2500, ge=0)


def get_gemini_config() -> GeminiConfig:
    """Create Gemini configuration from environment.

    Returns:
        Configured GeminiConfig instance.

    Raises:
        pydantic.ValidationError: If no API key is set.
    """
    return GeminiConfig()


def get_chat_settings() -> ChatSettings:
    """Create request lifecycle settings from environment."""
    return ChatSettings()
