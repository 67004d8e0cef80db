"""Remote chat session backed by the Gemini API.

The controller only sees the ``ChatSession`` protocol: a handle seeded once
with history that answers one user message at a time. The Gemini adapter
wraps every SDK failure into the chat error taxonomy so the controller
never has to know about google-genai exceptions.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from google import genai
from google.genai import types
from pydantic import ValidationError as ConfigValidationError

from src.chat.config import GeminiConfig, get_gemini_config
from src.chat.errors import SendError, SessionInitError
from src.models.schemas import HistoryEntry, Role

logger = logging.getLogger(__name__)

# Gemini calls the assistant side of the conversation "model"
_GEMINI_ROLES = {Role.USER: "user", Role.ASSISTANT: "model"}


class ChatSession(Protocol):
    """Opaque handle to a remote conversational context."""

    async def reply(self, text: str) -> str: ...


SessionFactory = Callable[[list[HistoryEntry]], Awaitable[ChatSession]]


def build_generate_config(config: GeminiConfig) -> types.GenerateContentConfig:
    """Build the fixed generation and safety config for a session."""
    return types.GenerateContentConfig(
        temperature=config.temperature,
        top_k=config.top_k,
        top_p=config.top_p,
        max_output_tokens=config.max_output_tokens,
        safety_settings=[
            types.SafetySetting(
                category=types.HarmCategory(category),
                threshold=types.HarmBlockThreshold(threshold),
            )
            for category, threshold in config.safety_settings
        ],
    )


def to_gemini_history(history: list[HistoryEntry]) -> list[types.Content]:
    """Map transcript entries to Gemini ``Content`` blocks."""
    return [
        types.Content(
            role=_GEMINI_ROLES[entry.role],
            parts=[types.Part.from_text(text=entry.text)],
        )
        for entry in history
    ]


class GeminiSession:
    """Gemini chat handle. Continuity lives in the SDK's chat object."""

    def __init__(self, chat: Any) -> None:
        self._chat = chat

    async def reply(self, text: str) -> str:
        """Send one user message and return the reply text.

        Raises:
            SendError: On transport failure, safety block or empty reply.
        """
        try:
            response = await self._chat.send_message(text)
        except Exception as e:
            raise SendError(f"Gemini reply failed: {e}") from e

        feedback = getattr(response, "prompt_feedback", None)
        block_reason = getattr(feedback, "block_reason", None)
        if block_reason:
            raise SendError(f"Prompt blocked by safety filter: {block_reason}")

        reply = getattr(response, "text", None)
        if not reply or not reply.strip():
            raise SendError("Gemini returned an empty reply")
        return reply


class GeminiSessionFactory:
    """Creates Gemini chat sessions seeded with transcript history."""

    def __init__(
        self,
        config: GeminiConfig | None = None,
        client: genai.Client | None = None,
    ) -> None:
        """Initialize the factory.

        Args:
            config: Optional Gemini configuration.
                    Loads from environment at session start if not provided.
            client: Optional preconfigured SDK client.
        """
        self._config = config
        self._client = client

    def _load_config(self) -> GeminiConfig:
        if self._config is not None:
            return self._config
        try:
            return get_gemini_config()
        except ConfigValidationError as e:
            raise SessionInitError(f"Invalid Gemini configuration: {e}") from e

    async def __call__(self, history: list[HistoryEntry]) -> GeminiSession:
        """Start a chat session seeded with ``history``.

        Raises:
            SessionInitError: If configuration is missing or the SDK refuses.
        """
        config = self._load_config()
        try:
            client = self._client or genai.Client(api_key=config.api_key)
            chat = client.aio.chats.create(
                model=config.model_name,
                config=build_generate_config(config),
                history=to_gemini_history(history),
            )
        except Exception as e:
            raise SessionInitError(f"Gemini session start failed: {e}") from e

        if chat is None:
            raise SessionInitError("Gemini returned no chat session")

        logger.info(f"Started Gemini session on {config.model_name} ({len(history)} seed turns)")
        return GeminiSession(chat)
