"""
==============================================================================
Common Schemas Module
==============================================================================

Outcome schema returned by every mutating catalog operation.

==============================================================================
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from product_manager.core.exceptions import AppException


class OperationResult(BaseModel):
    """
    Success/failure outcome of a catalog operation.

    ``persisted`` is False when the in-memory change (if any) did not reach
    the backing store.
    """
    success: bool = Field(default=True)
    message: str
    code: Optional[str] = Field(default=None)
    details: Dict[str, Any] = Field(default_factory=dict)
    persisted: bool = Field(default=True)

    @classmethod
    def ok(cls, message: str, persisted: bool = True) -> "OperationResult":
        """Factory for a successful outcome."""
        return cls(success=True, message=message, persisted=persisted)

    @classmethod
    def from_exception(cls, exc: AppException, persisted: bool = True) -> "OperationResult":
        """Factory converting an AppException into a failed outcome."""
        return cls(
            success=False,
            message=exc.message,
            code=exc.code,
            details=exc.details,
            persisted=persisted,
        )

    def __bool__(self) -> bool:
        return self.success
