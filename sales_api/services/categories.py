"""Business logic for categories."""

from typing import List

from loguru import logger
from sqlalchemy import insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from sales_api.api.errors import DatabaseError
from sales_api.db.models import Category
from sales_api.schemas.categories import CategoryCreate, CategoryResponse


class CategoryService:
    """Service for category-related operations."""

    def __init__(self, db: AsyncSession):
        """Initialize with database session."""
        self.db = db

    async def get_categories(self) -> List[CategoryResponse]:
        """List all categories ordered by ID."""
        try:
            result = await self.db.execute(select(Category).order_by(Category.id))
        except SQLAlchemyError as e:
            raise DatabaseError("Failed to fetch categories") from e

        return [CategoryResponse.model_validate(category) for category in result.scalars().all()]

    async def create_category(self, category_data: CategoryCreate) -> CategoryResponse:
        """Create a new category."""
        try:
            result = await self.db.execute(
                insert(Category).values(name=category_data.name).returning(Category.id, Category.name)
            )
            row = result.one()
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise DatabaseError("Failed to create category") from e

        logger.info(f"Created new category with ID {row.id}")
        return CategoryResponse.model_validate(row)
