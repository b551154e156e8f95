"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures routes and lifespan events, and provides the
uvicorn entry point.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from src.api.models import HealthResponse
from src.api.routes import router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "gcd",
        "description": "GCD Calculator - HTML form and greatest common divisor computation",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    The application holds no resources; startup and shutdown are only logged.
    """
    logger.info("Starting application...")
    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")


app = FastAPI(
    title="gcdserve",
    description="GCD Calculator - Computes the greatest common divisor of numbers submitted through an HTML form",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

app.include_router(router)


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Health check endpoint.

    Returns 200 OK while the application is serving requests.
    """
    return HealthResponse(status="healthy")


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    settings = get_settings()
    print(f"Serving on http://{settings.host}:{settings.port}...")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)
