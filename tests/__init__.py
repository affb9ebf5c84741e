"""Test package for Claude Chat Relay.

Unit tests for isolated logic and integration tests for the endpoint and the
conversation loop working together.

Structure:
    - unit/: Individual function and class tests
    - integration/: Endpoint and client-to-endpoint workflow tests

No network access: the vendor API is always scripted.
Leverages pytest with pytest-check for soft assertions.
"""
