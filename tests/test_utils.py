"""
==============================================================================
Utility Tests
==============================================================================

Tests for input parsers and product table rendering.

==============================================================================
"""

import pytest

from product_manager.catalog import Product
from product_manager.utils import (
    PriceParser,
    ProductIdParser,
    ProductTableFormatter,
    clean_text,
    parse_available,
)


class TestProductIdParser:
    """Tests for ProductIdParser."""

    def test_valid_id(self):
        """Test whitespace is ignored."""
        assert ProductIdParser().parse("  42 ") == (True, 42, None)

    def test_negative_id_parses(self):
        """Test sign is kept; positivity is the catalog's concern."""
        assert ProductIdParser().parse("-3") == (True, -3, None)

    @pytest.mark.parametrize("raw", ["", "   ", "4.5", "abc"])
    def test_invalid_id(self, raw):
        """Test non-integer text is rejected with a message."""
        is_valid, value, error = ProductIdParser().parse(raw)
        assert is_valid is False
        assert value is None
        assert error


class TestPriceParser:
    """Tests for PriceParser."""

    @pytest.mark.parametrize("raw,expected", [("9.99", 9.99), (" 5 ", 5.0), ("0", 0.0)])
    def test_valid_price(self, raw, expected):
        """Test decimal text is parsed."""
        assert PriceParser().parse(raw) == (True, expected, None)

    @pytest.mark.parametrize("raw", ["", "cheap", "inf", "nan"])
    def test_invalid_price(self, raw):
        """Test non-numeric and non-finite text is rejected."""
        is_valid, value, error = PriceParser().parse(raw)
        assert is_valid is False
        assert value is None
        assert error


class TestTextHelpers:
    """Tests for availability and text helpers."""

    @pytest.mark.parametrize("raw,expected", [
        ("true", True), ("True", True), (" TRUE ", True),
        ("false", False), ("yes", False), ("", False),
    ])
    def test_parse_available(self, raw, expected):
        """Test only the literal 'true' means available."""
        assert parse_available(raw) is expected

    def test_clean_text(self):
        """Test surrounding whitespace is stripped."""
        assert clean_text("  Widget \n") == "Widget"


class TestProductTableFormatter:
    """Tests for ProductTableFormatter."""

    def test_empty(self):
        """Test the empty notice."""
        assert ProductTableFormatter().format([]) == "No products found."

    def test_table_layout(self):
        """Test header, separator, rows and count."""
        products = [
            Product(id=1, name="Widget", category="Hardware", price=9.99, available=True),
            Product(id=12, name="Lamp", category="Lighting", price=20, available=False),
        ]

        lines = ProductTableFormatter().format(products).splitlines()

        assert lines[0].split(" | ") == ["ID", "Name  ", "Category", "Price", "Available"]
        assert set(lines[1]) == {"-", "+"}
        assert lines[2].split(" | ") == ["1 ", "Widget", "Hardware", "9.99 ", "yes"]
        assert lines[3].split(" | ") == ["12", "Lamp  ", "Lighting", "20   ", "no"]
        assert lines[4] == "(2 products)"
