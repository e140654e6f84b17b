"""
==============================================================================
Catalog Package - Product Management
==============================================================================

In-memory product catalog persisted to a JSON file.

Classes:
--------
- Product: Pydantic model for products
- ProductCatalog: Catalog manager with validation, mutation and filters
- JsonFileStore: Whole-file JSON backing store

==============================================================================
"""

from .models import REQUIRED_FIELDS, Product
from .storage import JsonFileStore
from .catalog import ProductCatalog, ProductStore

__all__ = [
    "REQUIRED_FIELDS",
    "Product",
    "ProductCatalog",
    "ProductStore",
    "JsonFileStore",
]
