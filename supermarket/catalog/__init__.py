"""
==============================================================================
Catalog Package - Produce Items
==============================================================================

In-memory produce catalog keyed by produce code.

Classes:
--------
- Item: Pydantic model for stored items
- ItemResponse: API representation of an item
- CatalogStore: Lock-guarded catalog with add/get/delete/list

==============================================================================
"""

from .models import Item, ItemResponse
from .catalog import CatalogStore, DEFAULT_ITEMS, create_catalog

__all__ = [
    "Item",
    "ItemResponse",
    "CatalogStore",
    "DEFAULT_ITEMS",
    "create_catalog",
]
