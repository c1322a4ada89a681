"""
==============================================================================
Supermarket Produce API - Application Entry Point
==============================================================================

FastAPI application with:
- RESTful endpoints over an in-memory produce catalog
- Consistent JSON error responses
- Environment-driven configuration

Usage:
------
    # Development
    uvicorn supermarket.main:app --reload

    # Production
    uvicorn supermarket.main:app --host 0.0.0.0 --port 8080

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from supermarket import __version__
from supermarket.config import Settings, get_settings
from supermarket.core.exceptions import register_exception_handlers
from supermarket.api.router import create_api_router
from supermarket.catalog.catalog import CatalogStore, create_catalog


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
    - Catalog creation and seeding
    - Middleware configuration
    - Router registration
    - Exception handler setup

    Each Application owns its own catalog, so two instances never share
    items.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize the application.

        Args:
            settings: Settings to use (defaults to the cached global settings)
        """
        self._settings = settings or get_settings()
        self._catalog = create_catalog(
            seed=self._settings.seed_catalog,
            seed_file=self._settings.seed_path,
        )
        self._app = self._create_app()

    def _create_app(self) -> FastAPI:
        """Create and configure the FastAPI application."""
        app = FastAPI(
            title=self._settings.app_name,
            version=__version__,
            description="In-memory produce catalog keyed by produce code",
            lifespan=self._lifespan,
            docs_url=None if self._settings.is_production else "/docs",
            redoc_url=None if self._settings.is_production else "/redoc",
        )

        app.state.catalog = self._catalog

        # Configure middleware
        self._configure_middleware(app)

        # Register exception handlers
        register_exception_handlers(app)

        # Register routers
        self._register_routers(app)

        return app

    @asynccontextmanager
    async def _lifespan(self, app: FastAPI):
        """Application lifespan manager."""
        # Startup
        self._startup()
        yield
        # Shutdown
        self._shutdown()

    def _startup(self) -> None:
        """Application startup tasks."""
        logger.info("=" * 60)
        logger.info(f"🚀 Starting {self._settings.app_name}")
        logger.info(f"✅ Catalog ready with {len(self._catalog)} items")
        logger.info(f"📍 Running on http://{self._settings.host}:{self._settings.port}")
        if not self._settings.is_production:
            logger.info(f"📖 API Docs: http://{self._settings.host}:{self._settings.port}/docs")
        logger.info("=" * 60)

    def _shutdown(self) -> None:
        """Application shutdown tasks."""
        logger.info("🛑 Shutting down...")
        logger.info("✅ Shutdown complete")

    def _configure_middleware(self, app: FastAPI) -> None:
        """Configure application middleware."""
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self._settings.cors_origins_list,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    def _register_routers(self, app: FastAPI) -> None:
        """Register API routers."""
        app.include_router(create_api_router(self._settings.api_prefix))

    @property
    def app(self) -> FastAPI:
        """Get the FastAPI application instance."""
        return self._app

    @property
    def catalog(self) -> CatalogStore:
        """Get the catalog owned by this application."""
        return self._catalog


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create a new application with its own catalog."""
    return Application(settings).app


# ============================================================================
# APPLICATION INSTANCE
# ============================================================================

application = Application()
app = application.app


# ============================================================================
# ENTRY POINT
# ============================================================================

def run() -> None:
    """Run the server with uvicorn."""
    import uvicorn

    uvicorn.run(
        "supermarket.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug and settings.is_development,
        log_level="debug" if settings.debug else "info"
    )


if __name__ == "__main__":
    run()
