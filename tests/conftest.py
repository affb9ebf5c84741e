"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - fake_relay: Relay service double fed from a scripted event list
    - async_client: HTTPX client for API testing, wired to fake_relay
    - sample_conversation: A short, valid conversation history
"""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from src.api import app
from src.relay.events import IgnoredEvent, TextDelta, UpstreamEvent
from src.relay.service import get_relay_service, relay_text


class FakeRelayService:
    """Stands in for RelayService without any network access.

    Attributes:
        events: Upstream events to replay, in order.
        open_error: Raised from open_relay() when set (before first byte).
        stream_error: Raised after all events were replayed when set.
        calls: Conversations received by open_relay().
    """

    def __init__(self, events: list[UpstreamEvent] | None = None) -> None:
        self.events: list[UpstreamEvent] = events or []
        self.open_error: Exception | None = None
        self.stream_error: Exception | None = None
        self.calls: list[list[dict[str, Any]]] = []

    async def _replay(self) -> AsyncGenerator[UpstreamEvent]:
        for event in self.events:
            yield event
        if self.stream_error is not None:
            raise self.stream_error

    async def open_relay(self, messages: list[dict[str, Any]]) -> AsyncGenerator[bytes]:
        self.calls.append(messages)
        if self.open_error is not None:
            raise self.open_error
        return relay_text(self._replay())


@pytest.fixture
def fake_relay() -> FakeRelayService:
    """Relay double emitting "Hello", " world" and a ping.

    Returns:
        FakeRelayService with a default event script.
    """
    return FakeRelayService(
        [
            TextDelta(text="Hello"),
            TextDelta(text=" world"),
            IgnoredEvent(type="ping"),
        ]
    )


@pytest.fixture
def sample_conversation() -> list[dict[str, str]]:
    """Return a short conversation with both roles."""
    return [
        {"role": "user", "content": "What is 2+2?"},
        {"role": "assistant", "content": "4"},
        {"role": "user", "content": "And times 3?"},
    ]


@pytest.fixture
async def async_client(fake_relay: FakeRelayService) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient whose requests hit fake_relay.
    """
    app.dependency_overrides[get_relay_service] = lambda: fake_relay
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
