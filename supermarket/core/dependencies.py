"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection for request handlers.

The catalog is owned by the application instance (``app.state.catalog``)
and handed to each handler through ``get_catalog``; there is no
module-level catalog.

Usage Examples:
--------------
    @router.get("/items")
    async def list_items(catalog: CatalogStore = Depends(get_catalog)):
        return catalog.list()

==============================================================================
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Request

if TYPE_CHECKING:
    from supermarket.catalog.catalog import CatalogStore


def get_catalog(request: Request) -> "CatalogStore":
    """
    Get the catalog of the application serving this request.

    Args:
        request: Incoming request

    Returns:
        CatalogStore attached at startup
    """
    return request.app.state.catalog
