"""FastAPI endpoints for the chat relay.

HTTP routes with async request handling and chunked text streaming.

Endpoints:
    - GET /health: Service health status
    - POST /api/chat: Streamed assistant reply for a conversation
"""

from src.api.app import app, create_app

__all__ = ["app", "create_app"]
