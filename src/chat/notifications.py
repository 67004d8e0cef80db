"""Notification surface used by the controller."""

from enum import Enum
from typing import Protocol


class NotificationCategory(str, Enum):
    """Kinds of toast the controller can raise."""

    ERROR = "error"
    VALIDATION = "validation"


class Notifier(Protocol):
    """Fire-and-forget toast sink."""

    def notify(self, category: NotificationCategory, message: str) -> None: ...
