"""
==============================================================================
Item Schemas Module
==============================================================================

Request schemas for produce item submissions.

Field values must arrive as JSON strings; a number (e.g. ``"price": 9.41``)
is a type error rejected before any item validation runs. A missing key is
read as an empty string so that it is reported as "required".

==============================================================================
"""

from pydantic import BaseModel, Field, StrictStr


class ItemCreate(BaseModel):
    """Submitted item record."""
    code: StrictStr = Field(default="", description="Produce code, XXXX-XXXX-XXXX-XXXX")
    name: StrictStr = Field(default="", description="Letters, digits and spaces")
    price: StrictStr = Field(default="", description="Unit price with two decimals, e.g. 3.41")
