"""
OpenTelemetry distributed tracing configuration.
"""

from contextlib import contextmanager
from typing import Any, Dict, Generator, Optional

from fastapi import FastAPI
from loguru import logger
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.trace.sampling import ParentBasedTraceIdRatio
from opentelemetry.trace import Span, SpanKind, Tracer
from sqlalchemy.ext.asyncio import AsyncEngine

from sales_api.core.config import settings


def configure_tracer() -> TracerProvider:
    """
    Configure the global OpenTelemetry tracer provider.

    Spans go to the console in development and to the OTLP collector
    when ``OTLP_ENDPOINT`` is set.
    """
    resource = Resource.create(
        {
            "service.name": settings.PROJECT_NAME,
            "service.version": settings.VERSION,
            "deployment.environment": settings.ENVIRONMENT,
        }
    )

    tracer_provider = TracerProvider(
        resource=resource,
        sampler=ParentBasedTraceIdRatio(0.1),  # Sample 10% of traces
    )

    if settings.ENVIRONMENT == "development":
        tracer_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    if settings.OTLP_ENDPOINT:
        otlp_exporter = OTLPSpanExporter(endpoint=settings.OTLP_ENDPOINT)
        tracer_provider.add_span_processor(BatchSpanProcessor(otlp_exporter))

    trace.set_tracer_provider(tracer_provider)

    return tracer_provider


def setup_tracing(app: FastAPI, engine: AsyncEngine) -> None:
    """
    Set up OpenTelemetry tracing for the application.

    Every request opens a server span, every statement on ``engine`` a
    client span, and log records carry the active trace and span ids.

    Args:
        app: The FastAPI application to instrument
        engine: The async engine owned by the application's ``Database``
    """
    if not settings.ENABLE_TRACING:
        return

    try:
        tracer_provider = configure_tracer()

        FastAPIInstrumentor.instrument_app(
            app,
            tracer_provider=tracer_provider,
            excluded_urls="metrics",
        )

        # Instrumentation hooks the sync engine behind the async facade
        SQLAlchemyInstrumentor().instrument(
            engine=engine.sync_engine,
            tracer_provider=tracer_provider,
        )

        LoggingInstrumentor().instrument(tracer_provider=tracer_provider)

        logger.info("OpenTelemetry tracing configured successfully")
    except Exception as e:
        logger.error(f"Failed to setup OpenTelemetry tracing: {e}")


def get_tracer(name: str = "sales_api") -> Tracer:
    """Get a tracer for creating spans."""
    return trace.get_tracer(name)


@contextmanager
def create_span(
    name: str, attributes: Optional[Dict[str, Any]] = None, kind: Optional[SpanKind] = None
) -> Generator[Span, None, None]:
    """
    Create a new span (context manager).

    Example usage:
        with create_span("db.seed", {"categories": 4}) as span:
            span.add_event("seed_committed")
    """
    tracer = get_tracer()
    with tracer.start_as_current_span(
        name, attributes=attributes, kind=kind if kind is not None else SpanKind.INTERNAL
    ) as span:
        yield span
