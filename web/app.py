"""
FastAPI application for the underwriting lifecycle service.

Production deployment configuration via environment variables.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from utils.config import Config
from web.lifecycle_routes import router as lifecycle_router


logger = logging.getLogger(__name__)

APP_VERSION = "0.1.0"


def create_app(config: Optional[Config] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    config = config or Config.load()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Lifecycle service started (%s)",
            "production" if config.production else "development",
        )
        yield

    app = FastAPI(
        title="Buddy Underwriter Lifecycle",
        description="Deal intake lifecycle, underwriting gate, and submission readiness",
        version=APP_VERSION,
        # Production settings: disable docs/redoc for private deployment
        docs_url=None if config.production else "/docs",
        redoc_url=None if config.production else "/redoc",
        openapi_url=None if config.production else "/openapi.json",
        debug=config.debug,
        lifespan=lifespan,
    )

    # Healthcheck endpoints first. No dependencies, no IO.
    @app.get("/", include_in_schema=False)
    def root():
        """Root healthcheck."""
        return {"status": "ok"}

    @app.get("/health", include_in_schema=False)
    def health():
        """Secondary health endpoint."""
        return {
            "status": "healthy",
            "version": APP_VERSION,
            "environment": "production" if config.production else "development",
        }

    # CORS middleware - locked down for production
    if config.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.allowed_origins,
            allow_credentials=True,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

    app.include_router(lifecycle_router)

    return app


app = create_app()
