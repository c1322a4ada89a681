"""
==============================================================================
Produce Item Endpoints
==============================================================================

Endpoints for listing, adding, looking up and deleting catalog items.

Status Codes:
------------
- POST /add             201 when something new was stored, 200 when every
                        submitted code already existed, 400 on invalid input
- GET  /item/{code}     200 with the item, or 200 with a "code not found"
                        payload; 400 on a malformed code
- GET  /delete/{code}   200 whether or not the code was stored; 400 on a
  DELETE /item/{code}   malformed code

==============================================================================
"""

from typing import List, Union

from fastapi import APIRouter, Depends, Response, status

from supermarket.catalog.catalog import CatalogStore
from supermarket.catalog.models import ItemResponse
from supermarket.core.dependencies import get_catalog
from supermarket.schemas.common import ErrorResponse, NotFoundResponse, StatusResponse
from supermarket.schemas.item import ItemCreate


router = APIRouter(tags=["Items"])

STATUS_ADDED = "item added"
STATUS_EXISTS = "item exist, not added"
STATUS_DELETED = "item deleted"


class ItemController:
    """Controller for catalog item operations."""

    def __init__(self, catalog: CatalogStore):
        self._catalog = catalog

    def list_items(self) -> List[ItemResponse]:
        """List all items with display prices."""
        return [ItemResponse.from_item(item) for item in self._catalog.list()]

    def add_items(self, items: List[ItemCreate], response: Response) -> StatusResponse:
        """Add a batch; the status code tells new items from duplicates."""
        if self._catalog.add(items):
            response.status_code = status.HTTP_201_CREATED
            return StatusResponse(status=STATUS_ADDED)

        response.status_code = status.HTTP_200_OK
        return StatusResponse(status=STATUS_EXISTS)

    def get_item(self, code: str) -> Union[ItemResponse, NotFoundResponse]:
        """Get item by produce code."""
        item = self._catalog.get(code)

        if item is None:
            return NotFoundResponse.for_code(code)

        return ItemResponse.from_item(item)

    def delete_item(self, code: str) -> StatusResponse:
        """Delete item by produce code."""
        self._catalog.delete(code)
        return StatusResponse(status=STATUS_DELETED)


@router.get("/items", response_model=List[ItemResponse])
async def list_items(catalog: CatalogStore = Depends(get_catalog)):
    """List all items ordered by produce code."""
    controller = ItemController(catalog)
    return controller.list_items()


@router.post(
    "/add",
    response_model=StatusResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        200: {"model": StatusResponse, "description": "All codes already existed"},
        400: {"model": ErrorResponse, "description": "Invalid item"},
    },
)
async def add_items(
    items: List[ItemCreate],
    response: Response,
    catalog: CatalogStore = Depends(get_catalog)
):
    """Add one or more items; nothing is stored if any item is invalid."""
    controller = ItemController(catalog)
    return controller.add_items(items, response)


@router.get(
    "/item/{code}",
    response_model=None,
    responses={
        200: {"model": ItemResponse, "description": "Item, or a \"code not found\" payload"},
        400: {"model": ErrorResponse, "description": "Malformed produce code"},
    },
)
async def get_item(code: str, catalog: CatalogStore = Depends(get_catalog)):
    """Get item by produce code."""
    controller = ItemController(catalog)
    return controller.get_item(code)


@router.get(
    "/delete/{code}",
    response_model=StatusResponse,
    responses={400: {"model": ErrorResponse, "description": "Malformed produce code"}},
)
async def delete_item(code: str, catalog: CatalogStore = Depends(get_catalog)):
    """Delete item by produce code."""
    controller = ItemController(catalog)
    return controller.delete_item(code)


@router.delete(
    "/item/{code}",
    response_model=StatusResponse,
    responses={400: {"model": ErrorResponse, "description": "Malformed produce code"}},
)
async def remove_item(code: str, catalog: CatalogStore = Depends(get_catalog)):
    """Delete item by produce code."""
    controller = ItemController(catalog)
    return controller.delete_item(code)
