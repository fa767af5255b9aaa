"""
FastAPI API dependencies.
"""

from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from sales_api.db.session import Database
from sales_api.services.categories import CategoryService
from sales_api.services.sales import SaleService


def get_database(request: Request) -> Database:
    """
    Return the database owned by the running application.
    """
    return request.app.state.database  # type: ignore[no-any-return]


async def get_db_session(database: Database = Depends(get_database)) -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for getting an async database session.
    """
    async with database.session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


def get_category_service(db: AsyncSession = Depends(get_db_session)) -> CategoryService:
    return CategoryService(db)


def get_sale_service(db: AsyncSession = Depends(get_db_session)) -> SaleService:
    return SaleService(db)
