"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, syllabus_hub.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import logging
from syllabus_hub import __version__
from syllabus_hub.api.deps.dependencies import get_service_cache
from syllabus_hub.boundary.db.create_tables import create_all_tables
from syllabus_hub.configs import get_settings
from syllabus_hub.models.common import ErrorResponse
from syllabus_hub.observability import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
    configure_logging,
)
from syllabus_hub.observability.log_utils import log_exception_with_context
from .routers import courses_router, health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    # Startup
    if settings.database.auto_create_tables:
        logger.info("Creating database tables if missing...")
        await create_all_tables()

    yield

    # Shutdown
    get_service_cache().clear()
    logger.info("Service cache cleared")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler so every failure leaves as an ErrorResponse."""
    log_exception_with_context(
        logger,
        "Unhandled exception",
        exc,
        method=request.method,
        path=request.url.path,
    )
    details = None
    if not get_settings().is_production:
        details = {"error_type": type(exc).__name__, "error": str(exc)}
    body = ErrorResponse(error="Internal server error", details=details)
    return JSONResponse(status_code=500, content=body.model_dump(mode="json"))


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="Syllabus Hub API",
        description="Turns uploaded course syllabus PDFs into structured course records",
        version=__version__,
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(courses_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "syllabus_hub.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
