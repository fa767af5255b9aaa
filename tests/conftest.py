from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select
from sqlalchemy.pool import NullPool

from sales_api.core.metrics import Metrics
from sales_api.db.init_db import ensure_schema, seed_if_empty
from sales_api.db.models import Category, Sale
from sales_api.db.session import Database
from sales_api.main import create_application


async def count_rows(database: Database) -> tuple[int, int]:
    """Return the number of (categories, sales) rows."""
    async with database.session() as session:
        categories = (await session.execute(select(func.count()).select_from(Category))).scalar_one()
        sales = (await session.execute(select(func.count()).select_from(Sale))).scalar_one()
    return categories, sales


@pytest_asyncio.fixture(scope="function")
async def database(tmp_path: Path) -> AsyncGenerator[Database, None]:
    test_database = Database(f"sqlite+aiosqlite:///{tmp_path / 'sales.db'}", echo=False, poolclass=NullPool)
    yield test_database
    await test_database.dispose()


@pytest_asyncio.fixture(scope="function")
async def seeded_database(database: Database) -> Database:
    await ensure_schema(database)
    await seed_if_empty(database)
    return database


@pytest.fixture(scope="function")
def metrics() -> Metrics:
    return Metrics()


@pytest_asyncio.fixture(scope="function")
async def client(seeded_database: Database, metrics: Metrics) -> AsyncGenerator[AsyncClient, None]:
    app = create_application(database=seeded_database, metrics=metrics)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture(scope="function")
def row_counts():
    return count_rows
