"""
==============================================================================
Schemas Package
==============================================================================

Pydantic schemas for operation outcomes.

==============================================================================
"""

from .common import OperationResult

__all__ = [
    "OperationResult",
]
