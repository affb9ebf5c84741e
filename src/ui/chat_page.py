"""NiceGUI chat interface with streamed assistant replies."""

from nicegui import ui

from src.models.schemas import ChatMessage, Role
from src.ui.conversation import ChatSession

TITLE = "Claude Chatbot"
EMPTY_STATE_TEXT = "Send a message to start chatting."

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f5f5f5; min-height: 100vh; }

    .app-container {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }

    .message-user {
        background: #bae6fd;
        color: #1f2937;
        border-radius: 18px 18px 4px 18px;
        white-space: pre-wrap;
    }

    .message-assistant {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
    }

    .message-assistant pre { margin: 0.5rem 0; }
    .message-assistant code { font-family: 'Menlo', 'Monaco', monospace; }
</style>
"""


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)
    session = ChatSession()

    scroll_area: ui.scroll_area

    def render_message(message: ChatMessage) -> None:
        is_user = message.role == Role.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-assistant"

        with (
            ui.row().classes(f"w-full {align}"),
            ui.element("div").classes(f"max-w-[80%] px-4 py-2 {bubble}"),
        ):
            if is_user:
                ui.label(message.content).classes("text-sm leading-relaxed")
            else:
                ui.markdown(message.content).classes("text-sm leading-relaxed")

    @ui.refreshable
    def message_list() -> None:
        if not session.messages:
            with ui.column().classes("w-full h-64 items-center justify-center gap-3"):
                ui.icon("forum").classes("text-5xl text-gray-300")
                ui.label(EMPTY_STATE_TEXT).classes("text-gray-400")
            return

        for message in session.messages:
            render_message(message)

        if session.awaiting_reply:
            with (
                ui.row().classes("w-full justify-start"),
                ui.element("div").classes("message-assistant px-4 py-2"),
            ):
                ui.label("Thinking...").classes("text-sm text-gray-400 italic")

    def on_change() -> None:
        message_list.refresh()
        scroll_area.scroll_to(percent=1.0)

    session.on_change = on_change

    async def send_message() -> None:
        await session.submit()

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-3xl mx-auto app-container").style(
            "height: calc(100vh - 4rem)"
        ),
    ):
        # Header
        with ui.column().classes("w-full items-center gap-0 px-5 py-3 border-b"):
            ui.label(TITLE).classes("text-lg font-semibold")
            ui.label("Powered by Claude").classes("text-sm text-gray-500")

        # Messages
        with ui.scroll_area().classes("flex-grow w-full") as scroll_area:
            with ui.column().classes("w-full p-4 gap-4"):
                message_list()

        # Input
        with ui.row().classes("w-full p-4 gap-2 items-center border-t"):
            (
                ui.input(placeholder="Type your message...")
                .props("outlined dense")
                .classes("flex-grow")
                .bind_value(session, "input_text")
                .bind_enabled_from(session, "is_loading", backward=lambda loading: not loading)
                .on("keydown.enter", send_message)
            )
            ui.button("Send", on_click=send_message).props("unelevated").bind_enabled_from(
                session, "can_submit"
            )


def main() -> None:
    ui.run(title=TITLE, port=8080, reload=False)


if __name__ == "__main__":
    main()
