"""
Shared response models and OpenAPI error descriptions.
"""

from typing import Any

from fastapi import status
from pydantic import BaseModel, Field


class ErrorResponseModel(BaseModel):
    """Base model for error responses."""

    detail: str = Field(..., description="Additional error details")


class StatusResponse(BaseModel):
    """Service status returned by the root endpoint."""

    status: str = Field(..., description="Service status")
    message: str = Field(..., description="Service description")


# Define tags for route categorization
class Tags:
    """API route tags for documentation grouping."""

    ROOT = "Root"
    CATEGORIES = "Categories"
    SALES = "Sales"


read_error_responses: dict[int | str, dict[str, Any]] = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {
        "model": ErrorResponseModel,
        "description": "Internal Error – Unexpected server failure",
    },
}

write_error_responses: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {
        "model": ErrorResponseModel,
        "description": "Bad Request – Missing field or invalid reference",
    },
    **read_error_responses,
}
