from typing import List

from fastapi import APIRouter, Depends, status

from sales_api.api.dependencies import get_category_service
from sales_api.api.responses import Tags, read_error_responses, write_error_responses
from sales_api.schemas.categories import CategoryCreate, CategoryResponse
from sales_api.services.categories import CategoryService

router = APIRouter(prefix="/categories", tags=[Tags.CATEGORIES])


@router.get("", response_model=List[CategoryResponse], responses=read_error_responses)
async def list_categories(
    service: CategoryService = Depends(get_category_service),
) -> List[CategoryResponse]:
    """List all categories, oldest first."""
    return await service.get_categories()


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    responses=write_error_responses,
)
async def create_category(
    category_data: CategoryCreate,
    service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    """Create a category."""
    return await service.create_category(category_data)
