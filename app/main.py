"""
==============================================================================
Products Comparison API - Application Entry Point
==============================================================================

FastAPI application serving read-only product queries:
- Product lookup, filtered listing, search and comparison
- Category and brand facets
- Health checks

The product catalog is loaded once at startup; every request is answered
from memory through the query mediator.

Usage:
------
    # Development
    uvicorn app.main:app --reload

    # Production
    uvicorn app.main:app --host 0.0.0.0 --port 8080

==============================================================================
"""

from __future__ import annotations

import json
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from pydantic import ValidationError

from app.api.router import api_router
from app.catalog.catalog import init_catalog, reset_catalog
from app.config import get_settings
from app.core.exceptions import AppException, register_exception_handlers
from app.core.middleware import register_middleware
from app.handlers.registry import init_mediator, reset_mediator


# ============================================================================
# LOGGING SETUP
# ============================================================================

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)

logger = logging.getLogger(__name__)


# ============================================================================
# APPLICATION FACTORY
# ============================================================================

class Application:
    """
    FastAPI application factory and manager.

    Handles application lifecycle including:
    - Catalog loading and handler registration at startup
    - Middleware configuration
    - Router registration
    - Exception handler setup
    """

    def __init__(self):
        """Initialize the application."""
        self._settings = get_settings()
        self._app = self._create_app()

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=self._settings.app_name,
            version=self._settings.app_version,
            description="Product lookup, search and comparison API",
            lifespan=self._lifespan,
            docs_url="/docs",
            redoc_url="/redoc",
        )

        self._configure_middleware(app)
        register_exception_handlers(app)
        app.include_router(api_router)
        self._register_root(app)

        return app

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        """Application lifespan manager."""
        self._startup()
        yield
        self._shutdown()

    def _startup(self) -> None:
        """Application startup tasks."""
        logger.info("=" * 60)
        logger.info(f"Starting {self._settings.app_name} ({self._settings.app_env})")
        logger.info("=" * 60)

        self._load_catalog()

        logger.info(f"{self._settings.app_name} ready")
        logger.info(f"API Docs: http://{self._settings.host}:{self._settings.port}/docs")

    def _shutdown(self) -> None:
        """Application shutdown tasks."""
        logger.info("Shutting down...")
        reset_mediator()
        reset_catalog()
        logger.info("Shutdown complete")

    def _load_catalog(self) -> None:
        """Load the product catalog and register query handlers."""
        products_path = self._settings.products_path
        if not products_path.exists():
            logger.warning(f"Products file not found: {products_path}")
            return

        try:
            catalog = init_catalog(products_path)
        except (json.JSONDecodeError, ValidationError, AppException) as e:
            logger.error(f"Failed to load catalog: {e}")
            return

        init_mediator(catalog)

    def _configure_middleware(self, app: FastAPI) -> None:
        """Configure application middleware."""
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.cors_origins_list,
            allow_credentials=True,
            allow_methods=["GET", "OPTIONS"],
            allow_headers=["*"],
        )
        # Added last so it wraps CORS and preflight replies get its headers
        register_middleware(app)

    def _register_root(self, app: FastAPI) -> None:
        """Register root endpoint."""

        @app.get("/", include_in_schema=False)
        async def root():
            """Redirect to the API documentation."""
            return RedirectResponse(url="/docs")

    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self._app


# ============================================================================
# APPLICATION INSTANCE
# ============================================================================

application = Application()
app = application.app


# ============================================================================
# ENTRY POINT
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
