"""
==============================================================================
Validator Tests
==============================================================================

Tests for produce code, item name and unit price validation.

==============================================================================
"""

import pytest

from supermarket.utils.validators import (
    ItemValidator,
    ProduceCodeValidator,
    UnitPriceValidator,
    combine_errors,
    display_price,
    format_price,
    validate_code,
    validate_name,
    validate_price,
)


class TestProduceCode:
    """Tests for produce code validation."""

    @pytest.mark.parametrize("code", [
        "A12T-4GH7-QPL9-3N4M",
        "0000-0000-0000-0000",
        "ZZZZ-ZZZZ-ZZZZ-ZZZZ",
    ])
    def test_valid(self, code: str):
        assert validate_code(code) is None

    @pytest.mark.parametrize("code", [
        "A12T-4GH7-QPL9-3N4M1",   # one character too long
        "A12T-4GH7-QPL9-3N4",     # one character too short
        "A12T-4GH7-QPL93N4M",     # missing hyphen
        "A12T4-GH7-QPL9-3N4M",    # hyphen misplaced
        "a12t-4gh7-qpl9-3n4m",    # lowercase
        "A12T-4GH7-QPL9-3N4m",
        "A12T_4GH7_QPL9_3N4M",
        " A12T-4GH7-QPL9-3N4M",
        "A12T-4GH7-QPL9-3N4M\n",
        "A12T-4GH7-QPL9-3N4M-AAAA",
    ])
    def test_invalid(self, code: str):
        error = validate_code(code)
        assert error is not None
        assert (error.field, error.reason) == ("code", "invalid")

    def test_empty_is_required(self):
        error = validate_code("")
        assert (error.field, error.reason) == ("code", "required")

    def test_is_valid(self):
        validator = ProduceCodeValidator()
        assert validator.is_valid("A12T-4GH7-QPL9-3N4M")
        assert not validator.is_valid("A12T-4GH7-QPL9-3N4M1")


class TestItemName:
    """Tests for item name validation."""

    @pytest.mark.parametrize("name", ["Lettuce", "Gala Apple", "Lettuces1", "7 Up"])
    def test_valid(self, name: str):
        assert validate_name(name) is None

    @pytest.mark.parametrize("name", ["Lettuce-", "-Lettuce", "Gala_Apple", "Peach!", "Jalapeño"])
    def test_invalid(self, name: str):
        error = validate_name(name)
        assert (error.field, error.reason) == ("name", "invalid")

    def test_empty_is_required(self):
        assert validate_name("").reason == "required"


class TestUnitPrice:
    """Tests for unit price parsing and rendering."""

    @pytest.mark.parametrize("price, cents", [
        ("3.41", 341),
        ("0.79", 79),
        ("0.00", 0),
        ("9.99", 999),
        ("10.05", 1005),
        ("03.41", 341),
        ("123456789.01", 12345678901),
    ])
    def test_parse(self, price: str, cents: int):
        assert validate_price(price) == (cents, None)

    @pytest.mark.parametrize("price", [
        "3.41-", "9.411", "9411", "9.4", "9.", "9", ".99", "$3.41", "3,41", " 3.41", "3.41 ", "-3.41", "1e2.00",
    ])
    def test_invalid(self, price: str):
        cents, error = validate_price(price)
        assert cents is None
        assert (error.field, error.reason) == ("price", "invalid")

    def test_unicode_digits_rejected(self):
        """Test only ASCII digits are accepted."""
        assert not UnitPriceValidator().is_valid("٣.41")

    def test_empty_is_required(self):
        cents, error = validate_price("")
        assert cents is None
        assert error.reason == "required"

    @pytest.mark.parametrize("cents, plain, shown", [
        (0, "0.00", "$0.00"),
        (5, "0.05", "$0.05"),
        (79, "0.79", "$0.79"),
        (341, "3.41", "$3.41"),
        (100000, "1000.00", "$1000.00"),
    ])
    def test_render(self, cents: int, plain: str, shown: str):
        assert format_price(cents) == plain
        assert display_price(cents) == shown

    def test_round_trip(self):
        """Test rendering then parsing returns the same cents."""
        validator = UnitPriceValidator()
        for cents in (0, 1, 9, 10, 99, 100, 101, 999, 1000, 123456):
            assert validator.parse(format_price(cents)) == (cents, None)

    def test_negative_cannot_render(self):
        with pytest.raises(ValueError):
            format_price(-1)


class TestItemValidator:
    """Tests for whole-item validation."""

    def test_valid_item(self):
        cents, errors = ItemValidator().validate("ZRT6-72AS-K736-L4AZ", "Greener Pepper", "9.99")
        assert cents == 999
        assert errors == []

    def test_all_required(self):
        cents, errors = ItemValidator().validate("", "", "")
        assert cents is None
        assert [(e.field, e.reason) for e in errors] == [
            ("code", "required"),
            ("name", "required"),
            ("price", "required"),
        ]

    def test_errors_are_collected_in_field_order(self):
        cents, errors = ItemValidator().validate("bad", "", "9.4")
        assert cents is None
        assert [(e.field, e.reason) for e in errors] == [
            ("code", "invalid"),
            ("name", "required"),
            ("price", "invalid"),
        ]

    def test_combine_errors(self):
        _, errors = ItemValidator().validate("", "", "3.41")
        assert combine_errors(errors) == "code is required\nname is required"
