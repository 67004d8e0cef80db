"""Pytest fixtures and shared test configuration.

Fixtures:
    - notifier: Records every toast the controller raises
    - fake_session: Scripted remote session
    - session_factory: Counts session starts and returns fake_session
    - chat_settings: Short timeout for lifecycle tests
    - controller: Controller wired to the fakes
    - async_client: HTTPX client for API testing
"""

import asyncio
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from src.api import app
from src.chat.config import ChatSettings, UiText
from src.chat.controller import ConversationController
from src.chat.errors import SessionInitError
from src.chat.notifications import NotificationCategory
from src.models.schemas import HistoryEntry


class RecordingNotifier:
    """Notifier that keeps (category, message) pairs."""

    def __init__(self) -> None:
        self.notifications: list[tuple[NotificationCategory, str]] = []

    def notify(self, category: NotificationCategory, message: str) -> None:
        self.notifications.append((category, message))

    def categories(self) -> list[NotificationCategory]:
        return [category for category, _ in self.notifications]


class FakeSession:
    """Remote session returning scripted replies.

    Set ``error`` to make the next replies fail, or ``gate`` to hold a
    reply until the event is set.
    """

    def __init__(self, reply_text: str = "Hello from Codex") -> None:
        self.reply_text = reply_text
        self.error: Exception | None = None
        self.gate: asyncio.Event | None = None
        self.started = asyncio.Event()
        self.calls: list[str] = []

    async def reply(self, text: str) -> str:
        self.calls.append(text)
        self.started.set()
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.reply_text


class FakeSessionFactory:
    """Session factory that records seed history and can be made to fail."""

    def __init__(self, session: FakeSession) -> None:
        self.session = session
        self.calls: list[list[HistoryEntry]] = []
        self.fail_with: Exception | None = None

    async def __call__(self, history: list[HistoryEntry]) -> FakeSession:
        self.calls.append(history)
        if self.fail_with is not None:
            raise self.fail_with
        return self.session


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def session_factory(fake_session: FakeSession) -> FakeSessionFactory:
    return FakeSessionFactory(fake_session)


@pytest.fixture
def failing_session_factory(fake_session: FakeSession) -> FakeSessionFactory:
    factory = FakeSessionFactory(fake_session)
    factory.fail_with = SessionInitError("quota exceeded")
    return factory


@pytest.fixture
def chat_settings() -> ChatSettings:
    return ChatSettings(request_timeout=0.5, history_window=50)


@pytest.fixture
def ui_text() -> UiText:
    return UiText(assistant_name="Codex")


@pytest.fixture
def controller(
    session_factory: FakeSessionFactory,
    notifier: RecordingNotifier,
    chat_settings: ChatSettings,
    ui_text: UiText,
) -> ConversationController:
    """Controller wired to fakes, session not yet started."""
    return ConversationController(
        session_factory=session_factory,
        notifier=notifier,
        settings=chat_settings,
        text=ui_text,
    )


@pytest.fixture
async def ready_controller(controller: ConversationController) -> ConversationController:
    """Controller with an established session."""
    assert await controller.initialize_session()
    return controller


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
