"""Main entry point for the CloudDrive session API.

This module creates and configures the FastAPI app that exposes the drive
view-state engine to the browser UI.

To run the development server:
    uv run uvicorn main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from pydantic import ValidationError

from api.dependencies import initialize_session, shutdown_session
from api.exceptions import (
    drive_validation_handler,
    generic_exception_handler,
    not_found_handler,
    validation_exception_handler,
    value_error_handler,
)
from api.routes import drive as drive_routes
from api.routes import items as items_routes
from api.routes import navigation as navigation_routes
from api.routes import selection as selection_routes
from api.routes import view as view_routes
from models.exceptions import NotFoundError
from models.exceptions import ValidationError as DriveValidationError
from models.settings import DriveSettings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the drive session at startup and tear it down at shutdown.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to FastAPI to handle requests.
    """
    settings = DriveSettings()
    logging.basicConfig(level=settings.log_level.upper())

    logger.info(f"Starting CloudDrive session from '{settings.seed}' seed")
    initialize_session(settings)

    yield

    shutdown_session()
    logger.info("CloudDrive session closed")


app = FastAPI(
    title="CloudDrive",
    description="Session API for the CloudDrive file-management UI",
    version="0.1.0",
    lifespan=lifespan,
)

# Order matters: specific exceptions before general ones
app.add_exception_handler(NotFoundError, not_found_handler)
app.add_exception_handler(DriveValidationError, drive_validation_handler)
app.add_exception_handler(ValidationError, validation_exception_handler)
app.add_exception_handler(ValueError, value_error_handler)
app.add_exception_handler(Exception, generic_exception_handler)

app.include_router(drive_routes.router)
app.include_router(items_routes.router)
app.include_router(selection_routes.router)
app.include_router(view_routes.router)
app.include_router(navigation_routes.router)


@app.get("/")
async def root():
    """Root endpoint - returns a welcome message."""
    return {
        "message": "Welcome to the CloudDrive API",
        "version": "0.1.0",
        "docs_url": "/docs",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy"}
