"""
==============================================================================
Health Check Endpoints
==============================================================================

Liveness and status endpoints for monitoring and orchestration.

==============================================================================
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from supermarket.catalog.catalog import CatalogStore
from supermarket.core.dependencies import get_catalog
from supermarket.schemas.common import HealthResponse


router = APIRouter(tags=["Health"])


class HealthController:
    """Controller for health check operations."""

    def __init__(self, catalog: CatalogStore):
        self._catalog = catalog

    def get_health(self) -> HealthResponse:
        """Get health status with the current catalog size."""
        return HealthResponse(status="healthy", items=len(self._catalog))


@router.get("/ping", response_class=PlainTextResponse)
async def ping():
    """Ping endpoint."""
    return "pong"


@router.get("/health", response_model=HealthResponse)
async def health_check(catalog: CatalogStore = Depends(get_catalog)):
    """
    Health check endpoint.

    Returns service status and the number of catalog items.
    """
    controller = HealthController(catalog)
    return controller.get_health()


@router.get("/health/ready")
async def readiness_check():
    """Readiness check for container orchestration."""
    return {"ready": True}


@router.get("/health/live")
async def liveness_check():
    """Liveness check for container orchestration."""
    return {"alive": True}
