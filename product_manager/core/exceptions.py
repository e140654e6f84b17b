"""
Application Exception Handling

AppException base class for all product manager errors, with one subclass per
error family and factory functions for each error code.
"""

from typing import Any, Dict, Optional


class AppException(Exception):
    """
    Unified application exception for all error scenarios.

    Provides a consistent error format for the catalog and the session.

    Usage:
        raise AppException("Product not found", "PRODUCT_NOT_FOUND", {"id": 99})

    Error Codes:
        Validation (ProductValidationError):
            - INVALID_PRODUCT
            - MISSING_FIELD
            - INVALID_ID
            - INVALID_PRICE
            - INVALID_AVAILABLE_TYPE
            - INVALID_NAME
            - INVALID_CATEGORY
            - DUPLICATE_ID

        Update (ProductUpdateError):
            - PRODUCT_NOT_FOUND
            - INVALID_PRICE

        Persistence (PersistenceError):
            - PERSISTENCE_ERROR
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "DUPLICATE_ID")
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)


class ProductValidationError(AppException):
    """A product failed a structural, type, range or uniqueness check."""


class ProductUpdateError(AppException):
    """A price update was rejected."""


class PersistenceError(AppException):
    """The backing store could not be read or written."""


# ============================================
# VALIDATION FACTORY FUNCTIONS
# ============================================

def invalid_product(value: Any = None) -> ProductValidationError:
    """Create exception for a product that is not a key/value record."""
    return ProductValidationError(
        "Product must be an object",
        "INVALID_PRODUCT",
        {"type": type(value).__name__}
    )


def missing_field(field: str) -> ProductValidationError:
    """Create missing required field exception."""
    return ProductValidationError(
        f"Missing required field: {field}",
        "MISSING_FIELD",
        {"field": field}
    )


def invalid_id(value: Any = None) -> ProductValidationError:
    """Create invalid product id exception."""
    return ProductValidationError(
        "Invalid product ID",
        "INVALID_ID",
        {"value": repr(value)}
    )


def invalid_price(value: Any = None) -> ProductValidationError:
    """Create invalid price exception raised during validation."""
    return ProductValidationError(
        "Invalid price",
        "INVALID_PRICE",
        {"value": repr(value)}
    )


def invalid_available_type(value: Any = None) -> ProductValidationError:
    """Create non-boolean availability exception."""
    return ProductValidationError(
        "Available must be a boolean value",
        "INVALID_AVAILABLE_TYPE",
        {"value": repr(value)}
    )


def invalid_name(value: Any = None) -> ProductValidationError:
    """Create invalid product name exception."""
    return ProductValidationError(
        "Name must be a non-empty string",
        "INVALID_NAME",
        {"value": repr(value)}
    )


def invalid_category(value: Any = None) -> ProductValidationError:
    """Create invalid category exception."""
    return ProductValidationError(
        "Category must be a string",
        "INVALID_CATEGORY",
        {"value": repr(value)}
    )


def duplicate_id(product_id: int) -> ProductValidationError:
    """Create duplicate product id exception."""
    return ProductValidationError(
        f"Product ID {product_id} already exists",
        "DUPLICATE_ID",
        {"id": product_id}
    )


# ============================================
# UPDATE FACTORY FUNCTIONS
# ============================================

def invalid_price_value(value: Any = None) -> ProductUpdateError:
    """Create invalid price exception raised by a price update."""
    return ProductUpdateError(
        "Invalid price value",
        "INVALID_PRICE",
        {"value": repr(value)}
    )


def product_not_found(product_id: Any) -> ProductUpdateError:
    """Create product not found exception."""
    return ProductUpdateError(
        "Product not found",
        "PRODUCT_NOT_FOUND",
        {"id": product_id}
    )


# ============================================
# PERSISTENCE FACTORY FUNCTIONS
# ============================================

def persistence_error(path: Any, reason: str) -> PersistenceError:
    """Create backing store read/write failure exception."""
    return PersistenceError(
        f"Error saving JSON data: {reason}",
        "PERSISTENCE_ERROR",
        {"path": str(path), "reason": reason}
    )
