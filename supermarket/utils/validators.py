"""
==============================================================================
Validation Utilities Module
==============================================================================

Validation classes for produce item input data.

This module implements:
- ProduceCodeValidator: Validates produce codes
- ItemNameValidator: Validates item display names
- UnitPriceValidator: Validates and parses unit-price strings
- ItemValidator: Runs all field checks for one submitted item

Validation Rules:
----------------
- Code:  XXXX-XXXX-XXXX-XXXX, X in A-Z or 0-9 (case-sensitive)
- Name:  letters, digits and spaces only
- Price: digits, a decimal point, exactly two digits (e.g. "3.41")

Every field is first checked for presence (empty string -> "required"),
then for format. Errors of one item are collected, not short-circuited.

==============================================================================
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple


# Field names, in the order they are checked and reported
FIELD_CODE = "code"
FIELD_NAME = "name"
FIELD_PRICE = "price"

REASON_REQUIRED = "required"
REASON_INVALID = "invalid"


@dataclass(frozen=True)
class FieldError:
    """Single failed check on one field of a submitted item."""

    field: str
    reason: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "reason": self.reason, "message": self.message}


def validate_required(field: str, value: str) -> Optional[FieldError]:
    """Return a "required" error when the field value is empty."""
    if not value:
        return FieldError(field, REASON_REQUIRED, f"{field} is required")
    return None


class ProduceCodeValidator:
    """
    Validator for produce codes.

    A produce code is four groups of four uppercase letters or digits
    separated by hyphens.

    Example:
        >>> validator = ProduceCodeValidator()
        >>> validator.is_valid("A12T-4GH7-QPL9-3N4M")
        True
        >>> validator.is_valid("a12t-4gh7-qpl9-3n4m")
        False
    """

    PATTERN = re.compile(r"[A-Z0-9]{4}-[A-Z0-9]{4}-[A-Z0-9]{4}-[A-Z0-9]{4}")

    def validate(self, code: str) -> Optional[FieldError]:
        """
        Check the format of a non-empty produce code.

        Args:
            code: Candidate produce code

        Returns:
            None if valid, otherwise the FieldError describing the failure
        """
        if self.PATTERN.fullmatch(code) is None:
            return FieldError(
                FIELD_CODE,
                REASON_INVALID,
                f"code '{code}' is not a valid produce code (expected XXXX-XXXX-XXXX-XXXX)",
            )
        return None

    def is_valid(self, code: str) -> bool:
        """Quick validation check."""
        return self.validate(code) is None


class ItemNameValidator:
    """Validator for item names: letters, digits and spaces."""

    PATTERN = re.compile(r"[A-Za-z0-9 ]+")

    def validate(self, name: str) -> Optional[FieldError]:
        if self.PATTERN.fullmatch(name) is None:
            return FieldError(
                FIELD_NAME,
                REASON_INVALID,
                f"name '{name}' may only contain letters, digits and spaces",
            )
        return None


class UnitPriceValidator:
    """
    Validator and parser for unit-price strings.

    Prices are kept as integer cents so that "3.41" is stored as 341 and
    renders back as "3.41" without floating point rounding.

    Example:
        >>> validator = UnitPriceValidator()
        >>> validator.parse("3.41")
        (341, None)
        >>> UnitPriceValidator.display(341)
        '$3.41'
    """

    PATTERN = re.compile(r"([0-9]+)\.([0-9]{2})")
    CURRENCY_SYMBOL = "$"

    def parse(self, price: str) -> Tuple[Optional[int], Optional[FieldError]]:
        """
        Parse a unit-price string into cents.

        Args:
            price: Price string such as "9.99"

        Returns:
            Tuple of (cents, error)
            - If valid: (999, None)
            - If invalid: (None, FieldError)
        """
        match = self.PATTERN.fullmatch(price)
        if match is None:
            return None, FieldError(
                FIELD_PRICE,
                REASON_INVALID,
                f"price '{price}' must have exactly two decimal places (e.g. 3.41)",
            )

        dollars, cents = match.groups()
        return int(dollars) * 100 + int(cents), None

    def is_valid(self, price: str) -> bool:
        """Quick validation check."""
        _, error = self.parse(price)
        return error is None

    @staticmethod
    def format(cents: int) -> str:
        """Render cents as a plain decimal string ("3.41")."""
        if cents < 0:
            raise ValueError(f"Price cannot be negative: {cents}")
        return f"{cents // 100}.{cents % 100:02d}"

    @classmethod
    def display(cls, cents: int) -> str:
        """Render cents with the currency symbol ("$3.41")."""
        return f"{cls.CURRENCY_SYMBOL}{cls.format(cents)}"


class ItemValidator:
    """
    Runs every field check for a submitted item.

    Presence is checked first for code, name and price (in that order);
    format is then checked for each field that is present. All errors of
    the item are returned together.

    Example:
        >>> validator = ItemValidator()
        >>> cents, errors = validator.validate("", "", "3.41")
        >>> [(e.field, e.reason) for e in errors]
        [('code', 'required'), ('name', 'required')]
    """

    def __init__(self) -> None:
        self._code = ProduceCodeValidator()
        self._name = ItemNameValidator()
        self._price = UnitPriceValidator()

    def validate(
        self,
        code: str,
        name: str,
        price: str
    ) -> Tuple[Optional[int], List[FieldError]]:
        """
        Validate one item.

        Args:
            code: Produce code
            name: Item name
            price: Unit price string

        Returns:
            Tuple of (cents, errors); cents is None unless errors is empty
        """
        errors: List[FieldError] = []
        cents = None

        # A missing field skips its format check
        error = validate_required(FIELD_CODE, code) or self._code.validate(code)
        if error:
            errors.append(error)

        error = validate_required(FIELD_NAME, name) or self._name.validate(name)
        if error:
            errors.append(error)

        error = validate_required(FIELD_PRICE, price)
        if error is None:
            cents, error = self._price.parse(price)
        if error:
            errors.append(error)

        if errors:
            return None, errors
        return cents, errors


def combine_errors(errors: Sequence[FieldError]) -> str:
    """Join the messages of one item's errors, one per line."""
    return "\n".join(error.message for error in errors)


# Module-level shortcuts

_code_validator = ProduceCodeValidator()
_name_validator = ItemNameValidator()
_price_validator = UnitPriceValidator()


def validate_code(code: str) -> Optional[FieldError]:
    """Check a produce code, reporting "required" for an empty string."""
    return validate_required(FIELD_CODE, code) or _code_validator.validate(code)


def validate_name(name: str) -> Optional[FieldError]:
    """Check an item name, reporting "required" for an empty string."""
    return validate_required(FIELD_NAME, name) or _name_validator.validate(name)


def validate_price(price: str) -> Tuple[Optional[int], Optional[FieldError]]:
    """Parse a unit price into cents, reporting "required" for an empty string."""
    error = validate_required(FIELD_PRICE, price)
    if error:
        return None, error
    return _price_validator.parse(price)


format_price = UnitPriceValidator.format
display_price = UnitPriceValidator.display
