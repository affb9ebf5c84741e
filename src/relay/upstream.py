"""Streaming client for the Anthropic Messages API.

Sends the conversation with ``stream: true`` and parses the server-sent
event body into UpstreamEvent variants. Failures before the first byte raise
from open_stream(); failures after it raise from the event iterator.
"""

import logging
from collections.abc import AsyncGenerator
from typing import Any

import httpx
import orjson

from src.relay.config import MAX_TOKENS, MODEL_ID, RelayConfig
from src.relay.events import UpstreamEvent, parse_event

logger = logging.getLogger(__name__)

# Constants
SSE_DATA_PREFIX = "data: "
MESSAGES_PATH = "/v1/messages"


class UpstreamError(Exception):
    """Base class for upstream completion failures."""

    pass


class UpstreamConnectionError(UpstreamError):
    """Raised when the upstream request could not be sent."""

    pass


class UpstreamStatusError(UpstreamError):
    """Raised when the upstream API answers with a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Upstream returned HTTP {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class UpstreamStreamError(UpstreamError):
    """Raised when the upstream stream fails after it has started."""

    pass


class UpstreamStream:
    """An open upstream response whose body has not been consumed yet."""

    def __init__(self, response: httpx.Response) -> None:
        self._response = response

    async def events(self) -> AsyncGenerator[UpstreamEvent]:
        """Yield parsed events in arrival order.

        The upstream response is closed when the generator finishes,
        fails, or is closed early by its consumer.

        Raises:
            UpstreamStreamError: On transport failure or a malformed payload.
        """
        try:
            async for line in self._response.aiter_lines():
                if not line.startswith(SSE_DATA_PREFIX):
                    continue
                try:
                    data = orjson.loads(line[len(SSE_DATA_PREFIX) :])
                except orjson.JSONDecodeError as e:
                    raise UpstreamStreamError(f"Malformed upstream event: {e}") from e
                if not isinstance(data, dict):
                    raise UpstreamStreamError(f"Unexpected upstream payload: {line}")
                yield parse_event(data)
        except httpx.HTTPError as e:
            raise UpstreamStreamError(f"Upstream stream interrupted: {e}") from e
        finally:
            await self._response.aclose()


class AnthropicStreamClient:
    """Thin async client for streaming completions."""

    def __init__(
        self,
        config: RelayConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            headers={
                "x-api-key": config.api_key,
                "anthropic-version": config.api_version,
                "Content-Type": "application/json",
            },
            timeout=config.timeout,
            transport=transport,
        )

    @staticmethod
    def build_payload(messages: list[dict[str, Any]]) -> dict[str, Any]:
        """Build the request body with the fixed model and token budget."""
        return {
            "model": MODEL_ID,
            "max_tokens": MAX_TOKENS,
            "messages": messages,
            "stream": True,
        }

    async def open_stream(self, messages: list[dict[str, Any]]) -> UpstreamStream:
        """Send the completion request and wait for the response headers.

        Args:
            messages: The conversation, passed through verbatim.

        Returns:
            UpstreamStream over the still-unread response body.

        Raises:
            UpstreamConnectionError: If the request could not be sent.
            UpstreamStatusError: If the API answered with an error status.
        """
        request = self._client.build_request(
            "POST", MESSAGES_PATH, json=self.build_payload(messages)
        )
        try:
            response = await self._client.send(request, stream=True)
        except httpx.RequestError as e:
            raise UpstreamConnectionError(f"Upstream request failed: {e}") from e

        if response.is_error:
            try:
                body = (await response.aread()).decode("utf-8", errors="replace")
            except httpx.HTTPError:
                body = ""
            finally:
                await response.aclose()
            raise UpstreamStatusError(response.status_code, body)

        return UpstreamStream(response)

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
