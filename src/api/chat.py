"""Streaming chat endpoint.

Relays the assistant's reply to the caller as raw UTF-8 text, chunk by chunk.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import StreamingResponse

from src.models.schemas import ChatRequest
from src.relay.service import RelayService, get_relay_service
from src.relay.upstream import UpstreamError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])

TEXT_MEDIA_TYPE = "text/plain; charset=utf-8"


@router.post("/chat")
async def chat(
    request: ChatRequest,
    service: Annotated[RelayService, Depends(get_relay_service)],
) -> StreamingResponse:
    """Stream the assistant reply for a conversation.

    The body is the concatenation of the upstream text deltas, with no
    framing and no end marker beyond closing the stream.

    Args:
        request: Conversation history, oldest message first.
        service: Relay service (injected).

    Returns:
        StreamingResponse with a text/plain body.

    Raises:
        422: Malformed request body.
        502: Upstream request failed before any text was produced.
    """
    try:
        body = await service.open_relay(request.upstream_messages())
    except UpstreamError as e:
        logger.error(f"Upstream completion request failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Upstream completion request failed",
        ) from e

    return StreamingResponse(body, media_type=TEXT_MEDIA_TYPE)
