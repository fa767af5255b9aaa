from typing import List

from fastapi import APIRouter, Depends, status

from sales_api.api.dependencies import get_sale_service
from sales_api.api.responses import Tags, read_error_responses, write_error_responses
from sales_api.schemas.sales import SaleCreate, SaleResponse
from sales_api.services.sales import SaleService

router = APIRouter(prefix="/sales", tags=[Tags.SALES])


@router.get("", response_model=List[SaleResponse], responses=read_error_responses)
async def list_sales(
    service: SaleService = Depends(get_sale_service),
) -> List[SaleResponse]:
    """List all sales with their category name, newest first."""
    return await service.get_sales()


@router.post(
    "",
    response_model=SaleResponse,
    status_code=status.HTTP_201_CREATED,
    responses=write_error_responses,
)
async def create_sale(
    sale_data: SaleCreate,
    service: SaleService = Depends(get_sale_service),
) -> SaleResponse:
    """Record a sale for an existing category."""
    return await service.create_sale(sale_data)
