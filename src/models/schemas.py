from enum import Enum

from pydantic import BaseModel, Field


class Role(str, Enum):
    """Speaker of a conversation message."""

    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    """A single message in the conversation.

    Attributes:
        role: Who wrote the message (user or assistant).
        content: The message text.
    """

    role: Role
    content: str


class ChatRequest(BaseModel):
    """Request payload for the streaming chat endpoint.

    Attributes:
        messages: Full conversation history, oldest first.
    """

    messages: list[ChatMessage] = Field(..., description="Conversation history in turn order")

    def upstream_messages(self) -> list[dict[str, str]]:
        """Return the history as plain dicts, order preserved."""
        return [message.model_dump(mode="json") for message in self.messages]


class HealthStatus(BaseModel):
    """Response body of the health check."""

    status: str
    service: str
