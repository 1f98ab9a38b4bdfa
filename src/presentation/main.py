"""
FastAPI Application Entry Point.

This is the main entry point for the Codex History API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.infrastructure.config.logging_config import setup_logging
from src.infrastructure.config.settings import get_settings
from src.presentation.api.routers import path_reference_router, session_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    # Startup
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("Starting Codex History on %s:%s", settings.host, settings.port)
    logger.info("Reading sessions from %s", settings.codex_sessions_dir)

    yield

    # Shutdown
    logger.info("Shutting down Codex History")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Codex History",
        description="Codex session history and editor path references",
        version="1.0.0",
        lifespan=lifespan,
        debug=settings.debug,
    )

    # Consumers are local tool windows and webviews
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(session_router)
    app.include_router(path_reference_router)

    @app.get("/health", tags=["health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get("/", tags=["root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "Codex History",
            "version": "1.0.0",
            "docs": "/docs",
            "health": "/health",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "src.presentation.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
