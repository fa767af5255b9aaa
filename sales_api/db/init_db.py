"""
Schema creation and sample data seeding.

Both operations are safe to run on every startup: tables are only created
when missing, and sample rows are only inserted into an empty database.
"""

from datetime import timedelta
from decimal import Decimal
from typing import NamedTuple, Sequence

from loguru import logger
from sqlalchemy import func, insert, select

from sales_api.core.tracing import create_span
from sales_api.db.models import Category, Sale
from sales_api.db.models.sale import utcnow
from sales_api.db.session import Base, Database


class SampleSale(NamedTuple):
    category: str
    value: Decimal


SAMPLE_CATEGORIES: Sequence[str] = ("Electronics", "Clothing", "Food", "Books")

SAMPLE_SALES: Sequence[SampleSale] = (
    SampleSale("Electronics", Decimal("2500.00")),
    SampleSale("Electronics", Decimal("1999.99")),
    SampleSale("Electronics", Decimal("350.50")),
    SampleSale("Clothing", Decimal("120.00")),
    SampleSale("Clothing", Decimal("80.90")),
    SampleSale("Clothing", Decimal("200.00")),
    SampleSale("Food", Decimal("35.50")),
    SampleSale("Food", Decimal("89.10")),
    SampleSale("Food", Decimal("15.00")),
    SampleSale("Books", Decimal("59.90")),
    SampleSale("Books", Decimal("39.90")),
    SampleSale("Books", Decimal("89.90")),
    SampleSale("Electronics", Decimal("499.90")),
    SampleSale("Clothing", Decimal("60.00")),
    SampleSale("Food", Decimal("27.75")),
    SampleSale("Electronics", Decimal("799.90")),
    SampleSale("Food", Decimal("12.30")),
    SampleSale("Books", Decimal("24.90")),
    SampleSale("Clothing", Decimal("140.00")),
    SampleSale("Electronics", Decimal("150.00")),
)


async def ensure_schema(database: Database) -> None:
    """
    Create the ``categories`` and ``sales`` tables if they do not exist.
    """
    logger.info("Ensuring database tables exist...")
    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all, checkfirst=True)
    logger.info("Tables ensured (categories, sales)")


async def seed_if_empty(
    database: Database,
    categories: Sequence[str] = SAMPLE_CATEGORIES,
    sales: Sequence[SampleSale] = SAMPLE_SALES,
) -> bool:
    """
    Insert sample categories and sales when no category exists yet.

    Everything is written in a single transaction: any failure rolls the
    whole seed back and is re-raised to the caller.

    Returns:
        True if sample data was inserted, False if the seed was skipped.
    """
    async with database.session() as session:
        count = (await session.execute(select(func.count()).select_from(Category))).scalar_one()

    if count > 0:
        logger.info(f"Database already has {count} categories, skipping seed")
        return False

    logger.info("Seeding database with sample data...")
    with create_span("db.seed", {"categories": len(categories), "sales": len(sales)}) as span:
        try:
            async with database.session() as session, session.begin():
                category_ids = {}
                for name in categories:
                    result = await session.execute(
                        insert(Category).values(name=name).returning(Category.id, Category.name)
                    )
                    row = result.one()
                    category_ids[row.name] = row.id

                now = utcnow()
                for index, sale in enumerate(sales):
                    await session.execute(
                        insert(Sale).values(
                            category_id=category_ids[sale.category],
                            value=sale.value,
                            created_at=now - timedelta(hours=index),
                        )
                    )
        except Exception as e:
            logger.error(f"Error seeding database: {e!r}")
            raise

        span.add_event("seed_committed")

    logger.info(f"Seed complete: {len(categories)} categories, {len(sales)} sales")
    return True
