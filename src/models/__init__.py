"""Pydantic models for API requests and responses.

Shared by the relay endpoint and the chat client, so both ends agree on the
shape of a conversation.

Models:
    - Role: Message speaker (user or assistant)
    - ChatMessage: Individual message in conversation
    - ChatRequest: Incoming chat request payload
    - HealthStatus: Health check response
"""

from src.models.schemas import ChatMessage, ChatRequest, HealthStatus, Role

__all__ = ["ChatMessage", "ChatRequest", "HealthStatus", "Role"]
