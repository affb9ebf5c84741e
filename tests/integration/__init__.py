"""Integration tests for components working together as a system.

Coverage:
    - POST /api/chat with real HTTP requests through ASGITransport
    - Relay service parsing recorded vendor server-sent events
    - ChatSession turns against the running app

The upstream vendor is scripted; everything else is real.
"""
