"""Pydantic models shared by the controller, the UI and the HTTP app.

Provides type safety and validation for conversation data.

Models:
    - Role: Closed speaker tag (user or assistant)
    - Turn: Immutable, timestamped message in the transcript
    - HistoryEntry: Turn shape replayed into a new session
    - HealthResponse: Liveness endpoint payload
"""

from src.models.schemas import HealthResponse, HistoryEntry, Role, Turn

__all__ = ["HealthResponse", "HistoryEntry", "Role", "Turn"]
