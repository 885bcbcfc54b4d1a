#!/usr/bin/env python3
"""
GreenCare API - HTTP API layer for the GreenCare camp management system.

This is the main FastAPI application. It owns:
- The PocketBase store handle (acquired on startup, released on shutdown)
- Mapping of domain errors to HTTP responses
- Resource routers (users, camps, participants, payments, feedback)
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from greencare.errors import GreenCareError, NotFoundError, ProcessorError, StoreError, ValidationError
from greencare.logging_config import configure_logging, get_logger
from greencare.store import StoreHandle

from .settings import get_settings

# Format: 2026-01-06T14:05:52Z [api] LEVEL message
configure_logging(source="api")
logger = get_logger(__name__)

ERROR_STATUS: dict[type[GreenCareError], int] = {
    NotFoundError: 404,
    ValidationError: 422,
    StoreError: 500,
    ProcessorError: 500,
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifecycle - acquire the store on startup, release on shutdown."""
    settings = get_settings()

    store = StoreHandle.connect(
        settings.pocketbase_url,
        settings.pocketbase_admin_email,
        settings.pocketbase_admin_password,
    )
    if settings.skip_pb_auth:
        logger.warning("Skipping PocketBase authentication (SKIP_PB_AUTH=true)")
    await store.acquire(authenticate=not settings.skip_pb_auth)
    app.state.store = store

    logger.info(f"GreenCare API started (PocketBase at {settings.pocketbase_url})")

    yield

    await store.release()
    app.state.store = None
    logger.info("GreenCare API stopped")


async def greencare_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render a domain error as `{"detail": message}` with its mapped status."""
    status_code = next(
        (code for error_type, code in ERROR_STATUS.items() if isinstance(exc, error_type)),
        500,
    )
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {type(exc).__name__}: {exc}")
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="GreenCare API",
        description="Camp registration, payments and feedback",
        lifespan=lifespan,
    )

    app.add_exception_handler(GreenCareError, greencare_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)

    settings = get_settings()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    from .routers import camps, feedback, participants, payments, users

    app.include_router(users.router)
    app.include_router(camps.router)
    app.include_router(participants.router)
    app.include_router(payments.router)
    app.include_router(feedback.router)

    @app.get("/")
    async def root() -> str:
        return "GreenCare Server is running..."

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "service": "greencare-api"}

    return app


# Create app instance for uvicorn
app = create_app()
