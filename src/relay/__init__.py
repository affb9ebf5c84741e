"""Upstream relay for streamed assistant replies.

Bridges the Anthropic Messages API event stream to a plain byte stream.

Responsibilities:
    - Fixed model and token budget, environment-driven credentials
    - Streaming request to the vendor API
    - Parsing server-sent events into a closed set of event variants
    - Filtering text deltas into outbound bytes

Maintains clean separation from the HTTP layer.
"""

from src.relay.config import MAX_TOKENS, MODEL_ID, RelayConfig, get_relay_config
from src.relay.service import (
    RelayService,
    close_relay_service,
    get_relay_service,
    relay_text,
)
from src.relay.upstream import (
    UpstreamConnectionError,
    UpstreamError,
    UpstreamStatusError,
    UpstreamStreamError,
)

__all__ = [
    "MAX_TOKENS",
    "MODEL_ID",
    "RelayConfig",
    "RelayService",
    "UpstreamConnectionError",
    "UpstreamError",
    "UpstreamStatusError",
    "UpstreamStreamError",
    "close_relay_service",
    "get_relay_config",
    "get_relay_service",
    "relay_text",
]
