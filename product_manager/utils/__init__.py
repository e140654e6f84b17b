"""
==============================================================================
Utilities Package
==============================================================================

Utility classes and functions for the interactive session.

Modules:
--------
- validators: Raw-text parsing of menu input
- product_table: Text table rendering of product listings

==============================================================================
"""

from .validators import PriceParser, ProductIdParser, clean_text, parse_available
from .product_table import ProductTableFormatter

__all__ = [
    "PriceParser",
    "ProductIdParser",
    "ProductTableFormatter",
    "clean_text",
    "parse_available",
]
