"""
==============================================================================
Core Package
==============================================================================

Cross-cutting error types shared by the catalog and the session.

==============================================================================
"""

from .exceptions import (
    AppException,
    PersistenceError,
    ProductUpdateError,
    ProductValidationError,
)

__all__ = [
    "AppException",
    "PersistenceError",
    "ProductUpdateError",
    "ProductValidationError",
]
