"""
Application lifecycle event handlers.

These functions are executed during application startup and shutdown.
"""

import asyncio

from loguru import logger

from sales_api.core.config import settings
from sales_api.db.init_db import ensure_schema, seed_if_empty
from sales_api.db.session import Database


async def init_with_retry(
    database: Database,
    max_attempts: int = 10,
    delay: float = 5.0,
) -> None:
    """
    Create the schema and seed sample data, retrying while the database is unavailable.

    Each attempt runs schema creation followed by the seed as one unit. Failed
    attempts are retried after a fixed ``delay`` (no backoff). When every
    attempt fails the last error is re-raised.
    """
    for attempt in range(1, max_attempts + 1):
        try:
            logger.info(f"Initializing database (attempt {attempt}/{max_attempts})...")
            await ensure_schema(database)
            await seed_if_empty(database)
            logger.info("Database initialized successfully")
            return
        except Exception as e:
            logger.error(f"Database initialization failed: {e}")

            if attempt == max_attempts:
                logger.critical("Maximum initialization attempts reached, giving up")
                raise

            logger.info(f"Retrying in {delay}s...")
            await asyncio.sleep(delay)


async def connect_to_db(database: Database) -> None:
    """
    Prepare the database before the application starts serving.
    """
    logger.info("Connecting to PostgreSQL database...")
    await init_with_retry(database, settings.INIT_MAX_ATTEMPTS, settings.INIT_RETRY_DELAY)


async def close_db_connection(database: Database) -> None:
    """
    Close database connections.
    """
    try:
        logger.info("Closing database connections...")
        await database.dispose()
        logger.info("Database connections closed")
    except Exception as e:
        logger.error(f"Error closing database connections: {e}")
