"""FastAPI application factory and configuration.

Main application entry point with lifespan management, middleware,
and router registration.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.chat import router as chat_router
from src.models.schemas import HealthStatus
from src.relay.service import close_relay_service

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    The relay service is created lazily on the first chat request and
    closed here on shutdown.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    logger.info("Starting Claude Chat Relay API...")
    yield
    await close_relay_service()
    logger.info("Shutting down Claude Chat Relay API...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Claude Chat Relay API",
        description=(
            "Relays a chat conversation to the Anthropic Messages API and "
            "streams the assistant's reply back as plain text."
        ),
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    application.include_router(chat_router)

    @application.get("/health", response_model=HealthStatus)
    async def health_check() -> HealthStatus:
        """Check service health status."""
        return HealthStatus(status="healthy", service="claude-chat-relay")

    return application


app = create_app()
