"""Unit tests for individual components in isolation.

Coverage:
    - relay/: Config validation, event parsing, upstream client, delta filter
    - ui/: Conversation turn state machine and incremental decoding

Uses httpx.MockTransport and mocks for external services.
"""
