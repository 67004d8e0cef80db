"""NiceGUI chat interface driven by a ConversationController."""

from nicegui import ui

from src.chat.config import UiText, get_chat_settings
from src.chat.controller import ConversationController, Phase
from src.chat.notifications import NotificationCategory
from src.chat.session import GeminiSessionFactory
from src.chat.theme import PALETTES, Theme, ThemePalette, palette_for
from src.models.schemas import Role, Turn

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    .message-user { border-radius: 18px 18px 4px 18px; }
    .message-assistant { border-radius: 18px 18px 18px 4px; }

    .message-assistant pre { margin: 0.5rem 0; }
    .message-assistant code { font-family: 'Menlo', 'Monaco', monospace; }
</style>
"""

# Quasar notification types per category
_NOTIFY_TYPES = {
    NotificationCategory.ERROR: "negative",
    NotificationCategory.VALIDATION: "warning",
}


class NiceGuiNotifier:
    """Toasts via ``ui.notify``, scoped to the page that owns ``anchor``."""

    def __init__(self, text: UiText) -> None:
        self._text = text
        self._anchor: ui.element | None = None

    def attach(self, anchor: ui.element) -> None:
        self._anchor = anchor

    def notify(self, category: NotificationCategory, message: str) -> None:
        if self._anchor is None:
            return
        timeout = (
            self._text.validation_toast_ms
            if category is NotificationCategory.VALIDATION
            else self._text.error_toast_ms
        )
        with self._anchor:
            ui.notify(
                message,
                type=_NOTIFY_TYPES[category],
                position="top",
                timeout=timeout,
                progress=True,
                close_button=True,
            )


def _swap_palette_class(element: ui.element, palette: ThemePalette, slot: str) -> None:
    """Replace whichever theme class ``element`` carries for ``slot``."""
    stale = " ".join(getattr(p, slot) for p in PALETTES.values())
    element.classes(remove=stale, add=getattr(palette, slot))


@ui.page("/")
def chat_page() -> None:
    """Main chat page. Every load gets a fresh controller and session."""
    ui.add_head_html(CUSTOM_CSS)
    text = UiText()
    notifier = NiceGuiNotifier(text)
    controller = ConversationController(
        session_factory=GeminiSessionFactory(),
        notifier=notifier,
        settings=get_chat_settings(),
        text=text,
    )
    dark_mode = ui.dark_mode(False)

    page: ui.column
    scroll: ui.scroll_area
    send_btn: ui.button

    def render_turn(turn: Turn) -> None:
        palette = palette_for(controller.theme)
        is_user = turn.role is Role.USER
        align = "items-end" if is_user else "items-start"

        with ui.column().classes(f"w-full gap-1 {align}"):
            if is_user:
                bubble = f"message-user px-4 py-2 max-w-[70%] {palette.accent} text-white"
                with ui.element("div").classes(bubble):
                    ui.label(turn.text).classes("text-sm whitespace-pre-wrap")
            else:
                bubble = f"message-assistant px-4 py-2 max-w-[70%] {palette.primary} {palette.text}"
                with ui.element("div").classes(bubble):
                    ui.markdown(turn.text).classes("text-sm")
            with ui.row().classes(f"items-center gap-2 text-xs {palette.text}"):
                ui.icon("person" if is_user else "smart_toy").classes("text-base")
                ui.label(text.user_label if is_user else text.assistant_name)
                ui.label(turn.timestamp.astimezone().strftime("%I:%M %p"))

    @ui.refreshable
    def render_messages() -> None:
        palette = palette_for(controller.theme)
        turns = controller.transcript.render()
        if not turns:
            with ui.column().classes("w-full h-64 items-center justify-center gap-3"):
                ui.icon("forum").classes("text-5xl text-gray-400")
                ui.label(text.empty_state).classes(f"text-lg {palette.text}")
        for turn in turns:
            render_turn(turn)
        if controller.phase is Phase.SENDING:
            ui.spinner("dots", size="lg", color="cyan")

    @ui.refreshable
    def render_status() -> None:
        if controller.phase is Phase.UNAVAILABLE:
            ui.button(text.retry_label, icon="refresh", on_click=controller.retry_session).props(
                "flat dense color=negative"
            )
        elif controller.phase is Phase.INITIALIZING:
            ui.spinner(size="sm", color="cyan")

    def apply_theme() -> None:
        palette = palette_for(controller.theme)
        dark_mode.set_value(controller.theme is Theme.DARK)
        _swap_palette_class(page, palette, "primary")
        _swap_palette_class(scroll, palette, "secondary")

    def on_change() -> None:
        apply_theme()
        render_status.refresh()
        render_messages.refresh()
        if controller.is_pending:
            send_btn.disable()
        else:
            send_btn.enable()
        scroll.scroll_to(percent=1.0)

    # === UI Layout ===
    with ui.column().classes("w-full h-screen p-4 gap-4") as page:
        # Header
        with ui.row().classes("w-full items-center justify-between"):
            ui.label(text.title).classes("text-2xl font-bold")
            with ui.row().classes("items-center gap-3"):
                render_status()
                ui.switch(
                    "Dark",
                    value=controller.theme is Theme.DARK,
                    on_change=lambda e: controller.set_theme(Theme.DARK if e.value else Theme.LIGHT),
                )

        # Messages
        with (
            ui.scroll_area().classes("flex-grow w-full rounded-md") as scroll,
            ui.column().classes("w-full p-4 gap-4"),
        ):
            render_messages()

        # Input
        with ui.row().classes("w-full gap-2 items-center"):
            (
                ui.input(placeholder=text.placeholder)
                .props("outlined dense")
                .classes("flex-grow")
                .bind_value(controller, "draft")
                .on("keydown.enter.prevent", lambda: controller.send())
            )
            send_btn = ui.button(icon="send", on_click=lambda: controller.send()).props(
                "round unelevated"
            )

    notifier.attach(page)
    controller.on_change = on_change
    apply_theme()

    # Start the remote session once the page is mounted
    ui.timer(0, controller.initialize_session, once=True)

