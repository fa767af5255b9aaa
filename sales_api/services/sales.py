"""Business logic for sales."""

from typing import List

from fastapi import HTTPException, status
from loguru import logger
from sqlalchemy import Select, insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from sales_api.api.errors import DatabaseError
from sales_api.db.models import Category, Sale
from sales_api.schemas.sales import SaleCreate, SaleResponse


def _sales_with_category() -> Select:
    return select(
        Sale.id,
        Sale.value,
        Sale.created_at,
        Sale.category_id,
        Category.name.label("category_name"),
    ).join(Category, Category.id == Sale.category_id)


class SaleService:
    """Service for sale-related operations."""

    def __init__(self, db: AsyncSession):
        """Initialize with database session."""
        self.db = db

    async def get_sales(self) -> List[SaleResponse]:
        """List all sales with their category name, newest first."""
        query = _sales_with_category().order_by(Sale.created_at.desc(), Sale.id.desc())
        try:
            result = await self.db.execute(query)
        except SQLAlchemyError as e:
            raise DatabaseError("Failed to fetch sales") from e

        return [SaleResponse.model_validate(row) for row in result.all()]

    async def create_sale(self, sale_data: SaleCreate) -> SaleResponse:
        """
        Record a sale for an existing category.

        The category check, the insert and the read-back of the joined row
        share one transaction.
        """
        try:
            category = await self.db.get(Category, sale_data.category_id)
            if category is None:
                await self.db.rollback()
                logger.info(f"Rejected sale for unknown category {sale_data.category_id}")
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="Invalid category",
                )

            result = await self.db.execute(
                insert(Sale)
                .values(category_id=sale_data.category_id, value=sale_data.value)
                .returning(Sale.id)
            )
            sale_id = result.scalar_one()

            sale = (await self.db.execute(_sales_with_category().where(Sale.id == sale_id))).one()
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise DatabaseError("Failed to create sale") from e

        logger.info(f"Created new sale with ID {sale_id}")
        return SaleResponse.model_validate(sale)
