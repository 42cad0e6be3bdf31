"""NiceGUI chat page rendering a conversation session."""

from nicegui import ui

from src.agent.chat_agent import get_agent_service
from src.models.schemas import Role, SessionSnapshot, Turn
from src.session.conversation import ConversationSession

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/icon?family=Material+Icons" rel="stylesheet">
<style>
    body { min-height: 100vh; }

    .chat-card {
        background: #fdf2f8;
        border-radius: 12px;
        box-shadow: 0 10px 15px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }

    .chat-bar { background: linear-gradient(to right, #059669, #16a34a); }

    .chat-body { background: linear-gradient(to bottom right, #ecfdf5, #f0fdf4); }

    .typing-dot {
        width: 8px; height: 8px;
        background: #4b5563;
        border-radius: 50%;
        animation: pulse 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes pulse {
        0%, 100% { opacity: 1; }
        50% { opacity: 0.4; }
    }
</style>
"""


@ui.page("/")
def chat_page() -> None:
    """Main chat page, one conversation session per visit."""
    ui.add_head_html(CUSTOM_CSS)
    session = ConversationSession(get_agent_service())

    messages_container: ui.column
    scroll_area: ui.scroll_area
    input_field: ui.input
    send_btn: ui.button

    def render_avatar(is_user: bool) -> None:
        with ui.element("div").classes(
            "w-8 h-8 rounded-full flex items-center justify-center "
            "bg-green-300 text-white font-bold"
        ):
            if is_user:
                ui.label("Y")
            else:
                ui.icon("groups").classes("text-lg")

    def render_turn(turn: Turn) -> None:
        is_user = turn.role is Role.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "text-black" if is_user else "bg-white text-black"

        with ui.row().classes(f"w-full {align} gap-2 items-end"):
            if not is_user:
                render_avatar(False)
            with ui.column().classes("max-w-[80%] gap-1"):
                ui.label(turn.text).classes(
                    f"p-2 rounded-lg text-sm whitespace-pre-wrap {bubble}"
                )
                ui.label(turn.created_at.strftime("%I:%M %p")).classes(
                    f"text-[10px] text-gray-400 {'self-end' if is_user else 'self-start'}"
                )
            if is_user:
                render_avatar(True)

    def render_typing_indicator() -> None:
        with ui.row().classes("p-2 m-2 gap-1 rounded-lg bg-gray-200 items-center"):
            for _ in range(3):
                ui.element("div").classes("typing-dot")

    def refresh(snapshot: SessionSnapshot) -> None:
        messages_container.clear()
        with messages_container:
            for turn in snapshot.transcript:
                render_turn(turn)
            if snapshot.pending:
                render_typing_indicator()
            if snapshot.last_error is not None:
                ui.label(snapshot.last_error.message).classes(
                    "p-4 m-2 rounded-lg max-w-[80%] bg-red-500 text-white"
                )
        send_btn.set_enabled(not snapshot.pending)
        scroll_area.scroll_to(percent=1.0)

    async def send_message() -> None:
        # Keep the draft when the submission is rejected
        if session.submit_turn(input_field.value or "") is None:
            input_field.value = ""

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-2 flex items-center justify-center"),
        ui.column().classes("w-full max-w-xl chat-card gap-0").style("height: 80vh"),
    ):
        # Header
        with ui.row().classes("w-full chat-bar p-2 items-center justify-between"):
            with ui.row().classes("items-center gap-2"):
                ui.icon("smart_toy").classes("text-black text-5xl")
                with ui.column().classes("gap-0"):
                    ui.label("Ai Chat Assistant").classes("font-bold text-black text-lg")
                    ui.label("Ask me anything").classes("text-xs text-gray-600")
            ui.label("Dashboard").classes(
                "px-4 py-2 rounded text-black text-sm bg-emerald-50"
            )

        # Messages
        with ui.scroll_area().classes("flex-grow w-full chat-body") as scroll_area:
            messages_container = ui.column().classes("w-full p-2 gap-3")

        # Input
        with ui.row().classes("w-full chat-bar p-4 gap-2 items-center no-wrap"):
            input_field = (
                ui.input(placeholder="Message HR Assistant")
                .props("rounded outlined dense bg-color=grey-2")
                .classes("flex-grow")
                .on("keydown.enter", send_message)
            )
            send_btn = (
                ui.button(icon="arrow_upward", on_click=send_message)
                .props("round unelevated color=black")
            )

    unsubscribe = session.subscribe(refresh)
    ui.context.client.on_disconnect(unsubscribe)
    refresh(session.snapshot())
