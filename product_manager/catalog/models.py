"""
==============================================================================
Product Models Module
==============================================================================

Pydantic model for inventory catalog items.

==============================================================================
"""

import math
from typing import Any, Dict, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr, field_validator


# Serialized key order of a product record
REQUIRED_FIELDS: Tuple[str, ...] = ("id", "name", "category", "price", "available")


class Product(BaseModel):
    """
    Product model for catalog items.

    Strict types keep JSON numbers and booleans apart: ``True`` is not a valid
    id and ``1`` is not a valid availability flag. Integer prices stay
    integers so a load/save round trip does not rewrite ``5`` as ``5.0``.

    Attributes:
        id: Positive integer identity key
        name: Product display name
        category: Category label, matched case-insensitively
        price: Non-negative finite number
        available: In-stock flag
    """

    model_config = ConfigDict(
        extra="ignore",
        validate_assignment=True,
    )

    id: StrictInt = Field(..., gt=0, description="Unique product identifier")
    name: StrictStr = Field(..., min_length=1, description="Product name")
    category: StrictStr = Field(..., description="Product category")
    price: Union[StrictInt, StrictFloat] = Field(..., description="Unit price")
    available: StrictBool = Field(..., description="Whether the product is in stock")

    @field_validator("price")
    @classmethod
    def validate_price(cls, value: Union[int, float]) -> Union[int, float]:
        """Reject negative and non-finite prices."""
        if (isinstance(value, float) and not math.isfinite(value)) or value < 0:
            raise ValueError("price must be a finite number >= 0")
        return value

    def to_record(self) -> Dict[str, Any]:
        """Serializable dict with exactly the five product keys."""
        return self.model_dump()
