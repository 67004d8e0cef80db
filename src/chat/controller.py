"""Conversation controller: transcript, session lifecycle and request lifecycle.

Core module for the chat screen. The UI owns none of this state; it holds
a controller, binds its input to ``draft`` and re-renders on change.

State machine::

    uninitialized -> initializing -> ready <-> sending
                                 \\-> unavailable -> initializing (retry)

Scheduling is a single asyncio loop. ``request_state`` is a cooperative
re-entrancy guard, not a lock: at most one remote call (session start or
reply) is in flight per controller.
"""

import asyncio
import logging
from collections.abc import Callable
from enum import Enum

from src.chat.config import ChatSettings, UiText, get_chat_settings
from src.chat.errors import SendError, SendTimeoutError, SessionInitError, ValidationError
from src.chat.notifications import NotificationCategory, Notifier
from src.chat.session import ChatSession, SessionFactory
from src.chat.theme import Theme
from src.chat.transcript import TranscriptStore
from src.models.schemas import Role, Turn

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"
    SENDING = "sending"
    UNAVAILABLE = "unavailable"


class RequestState(str, Enum):
    IDLE = "idle"
    PENDING = "pending"


class SendOutcome(str, Enum):
    """What happened to a send attempt."""

    REPLIED = "replied"
    FAILED = "failed"
    REJECTED_EMPTY = "rejected_empty"
    REJECTED_BUSY = "rejected_busy"
    UNAVAILABLE = "unavailable"


class ConversationController:
    """Owns the conversation state for one page load.

    Attributes:
        transcript: Append-only record of turns.
        draft: Input buffer bound to the text field.
        request_state: Idle, or pending while a remote call is in flight.
        last_error: Most recent failure message. Not cleared on success.
        theme: Current presentation theme.
        on_change: Called after every state change the UI must reflect.
    """

    def __init__(
        self,
        session_factory: SessionFactory,
        notifier: Notifier,
        settings: ChatSettings | None = None,
        text: UiText | None = None,
        transcript: TranscriptStore | None = None,
        theme: Theme = Theme.LIGHT,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._notifier = notifier
        self._settings = settings or get_chat_settings()
        self._text = text or UiText()
        self.on_change = on_change

        self.transcript = transcript if transcript is not None else TranscriptStore()
        self.draft = ""
        self.request_state = RequestState.IDLE
        self.last_error: str | None = None
        self.theme = theme

        self._session: ChatSession | None = None
        self._session_attempted = False

    @property
    def phase(self) -> Phase:
        if self.request_state is RequestState.PENDING:
            return Phase.SENDING if self._session is not None else Phase.INITIALIZING
        if self._session is not None:
            return Phase.READY
        if self._session_attempted:
            return Phase.UNAVAILABLE
        return Phase.UNINITIALIZED

    @property
    def is_pending(self) -> bool:
        return self.request_state is RequestState.PENDING

    @property
    def session_ready(self) -> bool:
        return self._session is not None

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change()

    def _set_request_state(self, state: RequestState) -> None:
        self.request_state = state
        self._changed()

    def _fail(self, message: str, error: Exception) -> None:
        """Record a failure and raise an error toast."""
        self.last_error = message
        logger.error(f"{type(error).__name__}: {error}")
        self._notifier.notify(NotificationCategory.ERROR, message)

    # === Session lifecycle ===

    async def initialize_session(self) -> bool:
        """Start the remote session once, seeded with the current transcript.

        Later calls are no-ops; use ``retry_session`` after a failure.

        Returns:
            True if a session is available afterwards.
        """
        if self._session_attempted:
            return self.session_ready
        return await self._start_session()

    async def retry_session(self) -> bool:
        """Re-run session start, only while the controller is unavailable."""
        if self.phase is not Phase.UNAVAILABLE:
            return self.session_ready
        logger.info("Retrying chat session start")
        return await self._start_session()

    async def _start_session(self) -> bool:
        if self.is_pending:
            return False

        self._session_attempted = True
        self._set_request_state(RequestState.PENDING)
        try:
            history = self.transcript.history(self._settings.history_window)
            self._session = await self._session_factory(history)
            logger.info("Chat session ready")
            return True
        except SessionInitError as e:
            self._fail(self._text.session_init_failed, e)
            return False
        except Exception as e:
            logger.exception("Unexpected error starting chat session")
            self._fail(self._text.session_init_failed, SessionInitError(str(e)))
            return False
        finally:
            self._set_request_state(RequestState.IDLE)

    # === Request lifecycle ===

    @staticmethod
    def _validate(text: str) -> str:
        stripped = text.strip() if text else ""
        if not stripped:
            raise ValidationError("Message is empty")
        return stripped

    async def send(self, text: str | None = None) -> SendOutcome:
        """Send a user message and append the reply.

        Both the Enter key and the send button call this. When ``text`` is
        None the bound ``draft`` is sent.

        The user turn is appended before the remote call and is kept even
        if the call fails. The request state always returns to idle.

        Args:
            text: Message to send. Defaults to the current draft.

        Returns:
            The outcome of the attempt.
        """
        if self.is_pending:
            logger.warning("Send rejected: a request is already in flight")
            return SendOutcome.REJECTED_BUSY

        try:
            message = self._validate(self.draft if text is None else text)
        except ValidationError as e:
            logger.warning(f"Send rejected: {e}")
            self._notifier.notify(NotificationCategory.VALIDATION, self._text.empty_message)
            return SendOutcome.REJECTED_EMPTY

        session = self._session
        if session is None:
            self._fail(self._text.service_unavailable, SessionInitError("No chat session"))
            return SendOutcome.UNAVAILABLE

        self.transcript.append(Turn(text=message, role=Role.USER))
        self.draft = ""
        self._set_request_state(RequestState.PENDING)
        try:
            async with asyncio.timeout(self._settings.request_timeout):
                reply = await session.reply(message)
            turn = Turn(text=reply, role=Role.ASSISTANT)
        except TimeoutError:
            error = SendTimeoutError(f"No reply after {self._settings.request_timeout}s")
            self._fail(self._text.send_timed_out, error)
            return SendOutcome.FAILED
        except SendError as e:
            self._fail(self._text.send_failed, e)
            return SendOutcome.FAILED
        except Exception as e:
            logger.exception("Unexpected error while waiting for reply")
            self._fail(self._text.send_failed, SendError(str(e)))
            return SendOutcome.FAILED
        else:
            self.transcript.append(turn)
            logger.info(f"Reply received ({len(reply)} chars)")
            return SendOutcome.REPLIED
        finally:
            self._set_request_state(RequestState.IDLE)

    # === Theme ===

    def toggle_theme(self) -> Theme:
        self.theme = self.theme.toggled()
        self._changed()
        return self.theme

    def set_theme(self, theme: Theme) -> None:
        self.theme = theme
        self._changed()
