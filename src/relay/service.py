"""Relay service: upstream event stream in, plain text bytes out.

Core module for the chat endpoint.

Architecture notes:

1. **Open before respond** - The upstream request is sent and its status
   checked before the HTTP response starts, so an upstream rejection can
   still become a non-200 status instead of an empty 200 body.

2. **Filter, not transform** - Text deltas are encoded and forwarded as soon
   as they arrive; other events are dropped. No buffering, no framing, no
   end marker beyond closing the stream.

3. **Errors propagate** - A failure after the first byte is raised out of
   the body iterator so the server aborts the chunked response. A truncated
   answer must never look like a complete one.

4. **Singleton Pattern** - One shared httpx client (and its connection pool)
   for all requests; the service holds no per-request state.
"""

import logging
from collections.abc import AsyncGenerator, AsyncIterable
from contextlib import aclosing
from typing import Any

from src.relay.config import RelayConfig, get_relay_config
from src.relay.events import StreamError, TextDelta, UpstreamEvent
from src.relay.upstream import AnthropicStreamClient, UpstreamStream, UpstreamStreamError

logger = logging.getLogger(__name__)


async def relay_text(events: AsyncIterable[UpstreamEvent]) -> AsyncGenerator[bytes]:
    """Forward the text of every text delta as UTF-8 bytes.

    Args:
        events: Upstream events in arrival order.

    Yields:
        Encoded text fragments, in the same order.

    Raises:
        UpstreamStreamError: If the upstream sends an error event.
    """
    deltas = 0
    async for event in events:
        if isinstance(event, TextDelta):
            deltas += 1
            if event.text:
                yield event.text.encode("utf-8")
        elif isinstance(event, StreamError):
            logger.error(f"Upstream error event: {event.error_type}: {event.message}")
            raise UpstreamStreamError(f"{event.error_type}: {event.message}")

    logger.info(f"Relay complete: {deltas} text deltas forwarded")


class RelayService:
    """Opens upstream completions and exposes them as byte streams."""

    def __init__(
        self,
        config: RelayConfig | None = None,
        upstream: AnthropicStreamClient | None = None,
    ) -> None:
        """Initialize the relay service.

        Args:
            config: Optional relay configuration.
                    Loads from environment if not provided.
            upstream: Optional upstream client, built from config if omitted.
        """
        self._config = config or get_relay_config()
        self._upstream = upstream or AnthropicStreamClient(self._config)

    async def open_relay(self, messages: list[dict[str, Any]]) -> AsyncGenerator[bytes]:
        """Start an upstream completion and return its text byte stream.

        Args:
            messages: The conversation history, forwarded verbatim.

        Returns:
            Async generator of UTF-8 text fragments.

        Raises:
            UpstreamError: If the upstream call fails before the first byte.
        """
        logger.info(f"Opening upstream stream for {len(messages)} messages")
        stream = await self._upstream.open_stream(messages)
        return self._relay(stream)

    async def _relay(self, stream: UpstreamStream) -> AsyncGenerator[bytes]:
        # The upstream response is released even when relay_text stops early.
        async with aclosing(stream.events()) as events:
            async for chunk in relay_text(events):
                yield chunk

    async def aclose(self) -> None:
        await self._upstream.aclose()


# Module-level singleton instance
_relay_service: RelayService | None = None


def get_relay_service() -> RelayService:
    """Get or create the global relay service.

    Returns:
        The RelayService instance.
    """
    global _relay_service
    if _relay_service is None:
        _relay_service = RelayService()
    return _relay_service


async def close_relay_service() -> None:
    """Close the global relay service if one was created."""
    global _relay_service
    if _relay_service is not None:
        await _relay_service.aclose()
        _relay_service = None
