"""
==============================================================================
Input Parsing Utilities Module
==============================================================================

Parsers that turn raw menu input into typed product values.

The catalog never sees raw text; the interactive session runs these first
and passes the typed result on.

Parsing Rules:
-------------
- Product id: base-10 integer, surrounding whitespace ignored
- Price: decimal number, finite
- Availability: true only for the literal "true" (any case)
- Text fields: surrounding whitespace stripped

==============================================================================
"""

from __future__ import annotations

import math
from typing import Optional, Tuple


class ProductIdParser:
    """
    Parser for product id input.

    Example:
        >>> ProductIdParser().parse(" 42 ")
        (True, 42, None)
    """

    def parse(self, raw: str) -> Tuple[bool, Optional[int], Optional[str]]:
        """
        Parse a product id.

        Args:
            raw: Raw input line

        Returns:
            Tuple of (is_valid, value, error_message)
        """
        text = (raw or "").strip()
        if not text:
            return False, None, "Product ID is required"

        try:
            value = int(text)
        except ValueError:
            return False, None, f"Product ID must be a whole number, got '{text}'"

        return True, value, None


class PriceParser:
    """
    Parser for price input.

    Range checks are left to the catalog; this only guarantees a number.
    """

    def parse(self, raw: str) -> Tuple[bool, Optional[float], Optional[str]]:
        """
        Parse a price.

        Args:
            raw: Raw input line

        Returns:
            Tuple of (is_valid, value, error_message)
        """
        text = (raw or "").strip()
        if not text:
            return False, None, "Price is required"

        try:
            value = float(text)
        except ValueError:
            return False, None, f"Price must be a number, got '{text}'"

        if not math.isfinite(value):
            return False, None, "Price must be a finite number"

        return True, value, None


def parse_available(raw: str) -> bool:
    """Interpret a yes/no answer; only "true" means available."""
    return (raw or "").strip().lower() == "true"


def clean_text(raw: str) -> str:
    """Strip surrounding whitespace from a text answer."""
    return (raw or "").strip()
