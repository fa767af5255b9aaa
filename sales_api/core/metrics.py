"""
Prometheus metrics configuration.
"""

import time
from typing import Any, Callable, Optional, cast

from fastapi import FastAPI, Request, Response
from loguru import logger
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    GCCollector,
    Histogram,
    PlatformCollector,
    ProcessCollector,
    generate_latest,
)
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.routing import Match
from starlette.types import ASGIApp

LABELS = ["method", "route", "status_code"]

REQUEST_TIME_BUCKETS = (0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.0, 5.0)


class Metrics:
    """
    Request metrics bound to their own registry.

    Besides the HTTP counter and latency histogram, the registry carries the
    standard process, platform and garbage collector metrics.
    """

    def __init__(self, registry: Optional[CollectorRegistry] = None) -> None:
        self.registry = registry or CollectorRegistry()

        ProcessCollector(registry=self.registry)
        PlatformCollector(registry=self.registry)
        GCCollector(registry=self.registry)

        self.request_count = Counter(
            "http_requests_total",
            "Total HTTP requests count",
            LABELS,
            registry=self.registry,
        )
        self.request_time = Histogram(
            "http_request_duration_seconds",
            "HTTP request duration in seconds",
            LABELS,
            buckets=REQUEST_TIME_BUCKETS,
            registry=self.registry,
        )

    def observe(self, method: str, route: str, status_code: int, duration: float) -> None:
        """Record one finished request."""
        labels = {"method": method, "route": route, "status_code": str(status_code)}
        self.request_count.labels(**labels).inc()
        self.request_time.labels(**labels).observe(duration)

    def render(self) -> bytes:
        """Return the registry in the Prometheus text exposition format."""
        return cast(bytes, generate_latest(self.registry))


def route_template(request: Request) -> str:
    """
    Return the path template of the route handling ``request``.

    Falls back to the raw path when no route matches, e.g. for 404s.
    """
    for route in request.app.router.routes:
        match, _ = route.matches(request.scope)
        if match == Match.FULL:
            return cast(str, getattr(route, "path", request.url.path))
    return request.url.path


class PrometheusMiddleware(BaseHTTPMiddleware):
    """
    Middleware that collects Prometheus metrics for HTTP requests.
    """

    def __init__(self, app: ASGIApp, metrics: Metrics) -> None:
        super().__init__(app)
        self.metrics = metrics

    async def dispatch(self, request: Request, call_next: Callable[[Request], Any]) -> Response:
        """
        Process a request and collect metrics.
        """
        method = request.method
        route = route_template(request)
        start_time = time.perf_counter()
        status_code = 500

        try:
            response = cast(Response, await call_next(request))
            status_code = response.status_code
            return response
        except Exception as e:
            logger.exception(f"Request failed: {str(e)}")
            raise
        finally:
            self.metrics.observe(method, route, status_code, time.perf_counter() - start_time)


async def metrics_endpoint(request: Request) -> Response:
    """
    Endpoint for exposing Prometheus metrics.
    """
    try:
        data = request.app.state.metrics.render()
    except Exception as e:
        logger.exception(f"Error generating metrics: {e}")
        return Response(content="Error generating metrics", status_code=500, media_type="text/plain")

    return Response(content=data, headers={"Content-Type": CONTENT_TYPE_LATEST})


def setup_metrics(app: FastAPI, metrics: Metrics) -> None:
    """
    Set up Prometheus metrics and middleware for FastAPI application.
    """
    app.state.metrics = metrics

    app.add_middleware(PrometheusMiddleware, metrics=metrics)

    app.add_api_route(
        "/metrics", metrics_endpoint, methods=["GET"], include_in_schema=False, response_class=Response
    )

    logger.info("Prometheus metrics configured")
