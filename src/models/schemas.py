from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Role(str, Enum):
    """Speaker of a turn."""

    USER = "user"
    ASSISTANT = "assistant"


class Turn(BaseModel):
    """One committed message in the conversation.

    Turns are frozen: once appended to the transcript they are never
    edited or reordered.

    Attributes:
        text: Message content, stored verbatim (must not be blank).
        role: Who produced the message.
        timestamp: Creation time on the client clock.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., min_length=1)
    role: Role
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @field_validator("text")
    @classmethod
    def reject_blank_text(cls, v: str) -> str:
        """Reject whitespace-only text without altering it."""
        if not v.strip():
            raise ValueError("Turn text must not be blank")
        return v


class HistoryEntry(BaseModel):
    """Turn shape replayed into a new remote session (timestamp dropped)."""

    model_config = ConfigDict(frozen=True)

    text: str
    role: Role

    @classmethod
    def from_turn(cls, turn: Turn) -> "HistoryEntry":
        return cls(text=turn.text, role=turn.role)


class HealthResponse(BaseModel):
    """Payload of the liveness endpoint."""

    status: str = "healthy"
    service: str = "codex-chatbot"
