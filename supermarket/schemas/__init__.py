"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Request and response schemas using Pydantic for validation.

This package provides:
- Common: Shared response schemas
- Item: Produce item submission schema

==============================================================================
"""

from .common import StatusResponse, ErrorResponse, HealthResponse, NotFoundResponse
from .item import ItemCreate

__all__ = [
    # Common
    "StatusResponse",
    "ErrorResponse",
    "HealthResponse",
    "NotFoundResponse",
    # Item
    "ItemCreate",
]
