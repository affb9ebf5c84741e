"""Upstream stream events.

The Messages API emits a closed set of tagged events. Only text deltas carry
content for the relay; vendor error events abort the stream; everything else
(message_start, ping, content_block_stop, non-text deltas, ...) is ignored.
"""

from typing import Any

from pydantic import BaseModel


class TextDelta(BaseModel):
    """A fragment of generated assistant text."""

    text: str


class StreamError(BaseModel):
    """An error event sent by the vendor after the stream has started."""

    error_type: str
    message: str


class IgnoredEvent(BaseModel):
    """Any event variant the relay does not act on."""

    type: str


UpstreamEvent = TextDelta | StreamError | IgnoredEvent


def parse_event(data: dict[str, Any]) -> UpstreamEvent:
    """Map one decoded SSE payload to its event variant.

    Args:
        data: The JSON object from a ``data:`` line.

    Returns:
        TextDelta for ``content_block_delta`` events with a ``text_delta``
        payload, StreamError for ``error`` events, IgnoredEvent otherwise.
    """
    event_type = str(data.get("type", ""))

    if event_type == "content_block_delta":
        delta = data.get("delta") or {}
        if delta.get("type") == "text_delta":
            return TextDelta(text=delta.get("text", ""))

    elif event_type == "error":
        error = data.get("error") or {}
        return StreamError(
            error_type=str(error.get("type", "unknown_error")),
            message=str(error.get("message", "")),
        )

    return IgnoredEvent(type=event_type)
