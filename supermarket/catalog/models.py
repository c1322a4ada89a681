"""
==============================================================================
Produce Item Models Module
==============================================================================

Pydantic models for catalog items.

==============================================================================
"""

from pydantic import BaseModel, ConfigDict, Field

from supermarket.utils.validators import UnitPriceValidator


class Item(BaseModel):
    """
    Produce item stored in the catalog.

    Items are immutable once stored; the price is held in cents.

    Attributes:
        code: Produce code (XXXX-XXXX-XXXX-XXXX)
        name: Item display name
        price_cents: Unit price in cents
    """

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., min_length=19, max_length=19, description="Produce code")
    name: str = Field(..., min_length=1, description="Item name")
    price_cents: int = Field(..., ge=0, description="Unit price in cents")

    @property
    def display_price(self) -> str:
        """Unit price with the currency symbol ("$3.41")."""
        return UnitPriceValidator.display(self.price_cents)


class ItemResponse(BaseModel):
    """Item response schema for API endpoints."""

    code: str
    name: str
    price: str

    @classmethod
    def from_item(cls, item: Item) -> "ItemResponse":
        """Create response from Item model."""
        return cls(
            code=item.code,
            name=item.name,
            price=item.display_price,
        )
