"""Claude Chat Relay - streamed chat replies from the Anthropic Messages API.

Combines FastAPI for chunked HTTP streaming, httpx for the upstream and
client calls, NiceGUI for the chat page, and Pydantic for data validation.

Components:
    - api: HTTP endpoints and streaming responses
    - relay: Upstream client and text-delta filter
    - ui: Conversation state machine and web interface
    - models: Request/response schemas
"""

__version__ = "0.1.0"
