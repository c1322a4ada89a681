"""
==============================================================================
Utilities Package
==============================================================================

Utility classes and functions for the application.

Modules:
--------
- validators: Produce code, item name and unit price validation

==============================================================================
"""

from .validators import (
    FieldError,
    ItemValidator,
    ProduceCodeValidator,
    ItemNameValidator,
    UnitPriceValidator,
)

__all__ = [
    "FieldError",
    "ItemValidator",
    "ProduceCodeValidator",
    "ItemNameValidator",
    "UnitPriceValidator",
]
