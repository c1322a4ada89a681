"""
==============================================================================
Main API Router
==============================================================================

Combines all v1 API routes under the configured prefix (``/api/v1``).

==============================================================================
"""

from fastapi import APIRouter

from supermarket.api.v1 import health, items


class MainAPIRouter:
    """
    Main API router combining all versioned routes.

    Provides a single entry point for all API endpoints.
    """

    def __init__(self, prefix: str = "/api/v1"):
        """Initialize the main router with all sub-routers."""
        self._router = APIRouter(prefix=prefix)
        self._include_routers()

    def _include_routers(self) -> None:
        """Include all v1 routers."""
        self._router.include_router(health.router)
        self._router.include_router(items.router)

    @property
    def router(self) -> APIRouter:
        """Get the FastAPI router instance."""
        return self._router


def create_api_router(prefix: str = "/api/v1") -> APIRouter:
    """Build the API router for the given path prefix."""
    return MainAPIRouter(prefix).router
