"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures routes and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from regform.api.dependencies import build_registrant_store
from regform.api.v1 import router as v1_router
from regform.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Registration Form API v1 - Validate, register and list users",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Creates the configured registrant store on startup
    - Closes the store's HTTP client on shutdown (remote backend)
    """
    settings = get_settings()

    logger.info("Starting application...")
    logger.info("Using %s registrant store", settings.storage_backend)

    store = build_registrant_store(settings)
    app.state.store = store

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")
    close = getattr(store, "close", None)
    if close is not None:
        close()
        logger.info("Registrant store closed")


app = FastAPI(
    title="regform",
    description="Registration Form API - Validates personal data and stores accepted registrations",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check(request: Request) -> dict[str, str]:
    """Health check endpoint reporting the backend of the store in use."""
    store = getattr(request.app.state, "store", None)
    return {"status": "healthy", "storage": getattr(store, "backend", "unknown")}
