"""Conversation state and the streaming turn loop.

ChatSession owns the conversation for one page instance and drives each turn
through an explicit TurnState. The page only renders what it holds.
"""

import codecs
import logging
import os
from collections.abc import Callable
from enum import Enum

import httpx

from src.models.schemas import ChatMessage, Role

logger = logging.getLogger(__name__)

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")
CHAT_PATH = "/api/chat"
APOLOGY_TEXT = "Sorry, something went wrong."


class TurnState(str, Enum):
    """Lifecycle of a single conversation turn."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    STREAMING = "streaming"
    SETTLED = "settled"


class ChatSession:
    """Manages chat state for a user session.

    Attributes:
        messages: The conversation, oldest first.
        input_text: Current contents of the input box.
        state: Where the current (or last) turn stands.
        on_change: Called after every visible change to the session.
    """

    def __init__(
        self,
        api_base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self.messages: list[ChatMessage] = []
        self.input_text: str = ""
        self.state: TurnState = TurnState.IDLE
        self.on_change = on_change
        self._api_base_url = api_base_url or API_BASE_URL
        self._transport = transport

    @property
    def is_loading(self) -> bool:
        return self.state in (TurnState.SUBMITTING, TurnState.STREAMING)

    @property
    def can_submit(self) -> bool:
        return not self.is_loading and bool(self.input_text.strip())

    @property
    def awaiting_reply(self) -> bool:
        """True while loading and no assistant text has been placed yet."""
        if not self.is_loading:
            return False
        return not self.messages or self.messages[-1].role != Role.ASSISTANT

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change()

    async def submit(self) -> bool:
        """Run one turn with the current input.

        Blank input, or a turn already in flight, leaves the session untouched.

        Returns:
            True if a turn was started.
        """
        text = self.input_text.strip()
        if not text or self.is_loading:
            return False

        self.messages.append(ChatMessage(role=Role.USER, content=text))
        self.input_text = ""
        self.state = TurnState.SUBMITTING
        self._notify()

        try:
            await self._stream_reply()
        except httpx.HTTPError as e:
            logger.warning(f"Chat turn failed: {e}")
            self._replace_with_apology()
        finally:
            self.state = TurnState.SETTLED
            self._notify()
        return True

    async def _stream_reply(self) -> None:
        """Send the full history and grow the assistant reply chunk by chunk."""
        payload = {"messages": [m.model_dump(mode="json") for m in self.messages]}

        async with (
            httpx.AsyncClient(
                base_url=self._api_base_url,
                transport=self._transport,
                timeout=None,
            ) as client,
            client.stream("POST", CHAT_PATH, json=payload) as response,
        ):
            response.raise_for_status()

            self.messages.append(ChatMessage(role=Role.ASSISTANT, content=""))
            self.state = TurnState.STREAMING
            self._notify()

            decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
            accumulated = ""
            async for chunk in response.aiter_bytes():
                text = decoder.decode(chunk)
                if text:
                    accumulated += text
                    self._set_reply(accumulated)

            tail = decoder.decode(b"", final=True)
            if tail:
                self._set_reply(accumulated + tail)

    def _set_reply(self, content: str) -> None:
        self.messages[-1] = self.messages[-1].model_copy(update={"content": content})
        self._notify()

    def _replace_with_apology(self) -> None:
        # A partial reply is discarded, never merged with the apology.
        if self.state == TurnState.STREAMING:
            self.messages.pop()
        self.messages.append(ChatMessage(role=Role.ASSISTANT, content=APOLOGY_TEXT))
