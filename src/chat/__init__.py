"""Conversation state and request lifecycle.

Responsibilities:
    - Remote session creation, seeded once from the transcript
    - Append-only transcript of user and assistant turns
    - At-most-one in-flight request with guaranteed release
    - Failure reporting through notifications

Maintains clean separation from the NiceGUI layer so it can be tested
without a browser.
"""

from src.chat.config import (
    ChatSettings,
    GeminiConfig,
    UiText,
    get_chat_settings,
    get_gemini_config,
)
from src.chat.controller import ConversationController, Phase, RequestState, SendOutcome
from src.chat.errors import (
    ChatError,
    SendError,
    SendTimeoutError,
    SessionInitError,
    ValidationError,
)
from src.chat.notifications import NotificationCategory, Notifier
from src.chat.session import ChatSession, GeminiSessionFactory
from src.chat.theme import Theme
from src.chat.transcript import TranscriptStore

__all__ = [
    "ChatError",
    "ChatSession",
    "ChatSettings",
    "ConversationController",
    "GeminiConfig",
    "GeminiSessionFactory",
    "NotificationCategory",
    "Notifier",
    "Phase",
    "RequestState",
    "SendError",
    "SendOutcome",
    "SendTimeoutError",
    "SessionInitError",
    "Theme",
    "TranscriptStore",
    "UiText",
    "ValidationError",
    "get_chat_settings",
    "get_gemini_config",
]
