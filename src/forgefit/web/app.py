"""FastAPI application for the forgefit JSON API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import Settings, get_settings
from ..context import AppContext
from ..errors import ValidationError
from .routers import exercises, goals, session, stats

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Start an application context unless one was handed to ``create_app``."""
    owned = app.state.context is None
    if owned:
        app.state.context = AppContext(app.state.settings)
        await app.state.context.start()
    yield
    if owned:
        await app.state.context.stop()
        app.state.context = None


def create_app(settings: Settings | None = None, context: AppContext | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings for the context built on startup
        context: An already started context to serve instead
    """
    app = FastAPI(
        title="forgefit",
        description="Workout log with personal records, goals and levels",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings or get_settings()
    app.state.context = context

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=400, content={"error": str(exc)})

    # Include routers
    app.include_router(session.router)
    app.include_router(goals.router)
    app.include_router(stats.router)
    app.include_router(exercises.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
