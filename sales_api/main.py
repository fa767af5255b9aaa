"""
FastAPI application entry point.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

from sales_api.api.errors import register_exception_handlers
from sales_api.api.responses import Tags
from sales_api.api.routes.categories import router as categories_router
from sales_api.api.routes.root import router as root_router
from sales_api.api.routes.sales import router as sales_router
from sales_api.core.config import settings
from sales_api.core.events import close_db_connection, connect_to_db
from sales_api.core.logging import configure_logging
from sales_api.core.metrics import Metrics, setup_metrics
from sales_api.core.tracing import setup_tracing
from sales_api.db.session import Database, create_database


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan event handler for startup and shutdown events.

    The schema and seed data are in place before the first request is
    accepted; a failed initialization aborts startup.
    """
    if settings.SENTRY_DSN:
        sentry_logging = LoggingIntegration(level=logging.INFO, event_level=logging.ERROR)
        sentry_sdk.init(
            dsn=settings.SENTRY_DSN,
            integrations=[
                FastApiIntegration(),
                sentry_logging,
            ],
            environment=settings.ENVIRONMENT,
            traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
            release=f"{settings.PROJECT_NAME}@{settings.VERSION}",
        )
        logger.info("Sentry initialized")

    database: Database = app.state.database
    await connect_to_db(database)

    yield

    await close_db_connection(database)


def create_application(database: Optional[Database] = None, metrics: Optional[Metrics] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        database: Connection pool to serve from; built from settings when omitted
        metrics: Metrics registry to record into; a fresh one when omitted
    """
    configure_logging()

    application = FastAPI(
        title=settings.PROJECT_NAME,
        description=settings.PROJECT_DESCRIPTION,
        version=settings.VERSION,
        docs_url="/docs" if not settings.ENVIRONMENT == "production" else None,
        redoc_url="/redoc" if not settings.ENVIRONMENT == "production" else None,
        openapi_url="/openapi.json" if not settings.ENVIRONMENT == "production" else None,
        lifespan=lifespan,
        openapi_tags=[
            {"name": Tags.ROOT, "description": "Service status"},
            {"name": Tags.CATEGORIES, "description": "Sale categories"},
            {"name": Tags.SALES, "description": "Recorded sales"},
        ],
    )

    application.state.database = database or create_database()

    register_exception_handlers(application)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.CORS_ORIGINS_STR == "*" else settings.CORS_ORIGINS_STR.split(","),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.ENABLE_METRICS:
        setup_metrics(application, metrics or Metrics())
        logger.info("Prometheus metrics enabled")

    if settings.ENABLE_TRACING:
        setup_tracing(application, application.state.database.engine)
        logger.info("OpenTelemetry tracing enabled")

    application.include_router(root_router)
    application.include_router(categories_router)
    application.include_router(sales_router)

    return application


app = create_application()
