"""
Pydantic schemas for the sales resource.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class SaleCreate(BaseModel):
    """
    Schema for recording a new sale.

    ``value`` mirrors the NUMERIC(10,2) column: positive, at most two decimal places.
    """

    category_id: int = Field(..., ge=1, le=2**31 - 1, description="ID of an existing category")
    value: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2, description="Sale amount")


class SaleResponse(BaseModel):
    """
    Schema for sale response, joined with its category name.
    """

    id: int = Field(..., description="Sale ID")
    value: Decimal = Field(..., description="Sale amount")
    created_at: datetime = Field(..., description="Creation timestamp")
    category_id: int = Field(..., description="Category ID")
    category_name: str = Field(..., description="Category name")

    model_config = {
        "from_attributes": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": 1,
                    "value": "2500.00",
                    "created_at": "2024-01-01T12:00:00",
                    "category_id": 1,
                    "category_name": "Electronics",
                }
            ]
        },
    }
