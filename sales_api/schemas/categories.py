"""
Pydantic schemas for the categories resource.
"""

from pydantic import BaseModel, Field


class CategoryCreate(BaseModel):
    """
    Schema for creating a new category.
    """

    name: str = Field(..., min_length=1, description="Category name")


class CategoryResponse(BaseModel):
    """
    Schema for category response.
    """

    id: int = Field(..., description="Category ID")
    name: str = Field(..., description="Category name")

    model_config = {
        "from_attributes": True,
        "json_schema_extra": {"examples": [{"id": 1, "name": "Electronics"}]},
    }
