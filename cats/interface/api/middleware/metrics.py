"""Prometheus HTTP metrics."""

import re
import time
from collections.abc import Callable, Mapping

from fastapi import APIRouter, FastAPI, Request, Response
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

from cats.config import MetricsSettings
from cats.util.error import ConfigurationError

# Labels every HTTP metric carries; static labels may not reuse them
RESERVED_LABEL_NAMES = ("method", "path", "status")

# Path label for requests no route matched, so stray URLs share one series
UNMATCHED_PATH_LABEL = "<unmatched>"

_NUMERIC_SEGMENT = re.compile(r"/\d+(?=/|\?|$)")


def normalize_path(path: str) -> str:
    """Collapse numeric path segments to ``:id``."""
    return _NUMERIC_SEGMENT.sub("/:id", path)


class HTTPMetrics:
    """Request counter and latency histogram on an app-owned registry.

    Args:
        settings: Buckets and static labels
        registry: Registry to register into, a fresh one if omitted
        dynamic_labels: Extra label names mapped to callables that derive the
            value from each request
    """

    def __init__(
        self,
        settings: MetricsSettings,
        registry: CollectorRegistry | None = None,
        dynamic_labels: Mapping[str, Callable[[Request], str]] | None = None,
    ) -> None:
        self.dynamic_labels = dict(dynamic_labels or {})
        for label in [*settings.static_labels, *self.dynamic_labels]:
            if label in RESERVED_LABEL_NAMES:
                raise ConfigurationError(f"Label '{label}' is reserved")

        self.registry = registry or CollectorRegistry()
        self.static_labels = dict(settings.static_labels)

        ProcessCollector(registry=self.registry)
        PlatformCollector(registry=self.registry)
        GCCollector(registry=self.registry)

        label_names = [*RESERVED_LABEL_NAMES, *self.static_labels, *self.dynamic_labels]
        self.requests_total = Counter(
            "http_requests_total",
            "Total HTTP requests count",
            label_names,
            registry=self.registry,
        )
        self.request_duration = Histogram(
            "http_request_duration_seconds",
            "HTTP request duration in seconds",
            label_names,
            buckets=settings.duration_buckets,
            registry=self.registry,
        )

    def request_labels(self, request: Request) -> dict[str, str]:
        """Evaluate the dynamic labels for one request."""
        return {name: str(derive(request)) for name, derive in self.dynamic_labels.items()}

    def observe(
        self,
        method: str,
        path: str,
        status: int,
        duration: float,
        labels: Mapping[str, str] | None = None,
    ) -> None:
        """Record one request. Dynamic labels missing from ``labels`` are empty."""
        values = {
            **{name: "" for name in self.dynamic_labels},
            **(labels or {}),
            "method": method,
            "path": normalize_path(path),
            "status": str(status),
            **self.static_labels,
        }
        self.requests_total.labels(**values).inc()
        self.request_duration.labels(**values).observe(duration)

    def render(self) -> bytes:
        return generate_latest(self.registry)


def _label_path(request: Request, use_route_path: bool) -> str:
    route = request.scope.get("route")
    if route is None:
        return UNMATCHED_PATH_LABEL
    if use_route_path and hasattr(route, "path"):
        return route.path
    return request.url.path


def install_metrics(app: FastAPI, metrics: HTTPMetrics, settings: MetricsSettings) -> None:
    """Record every request except scrapes of the metrics endpoint itself.

    Args:
        app: FastAPI application
        metrics: Metric set to record into
        settings: Metrics settings (endpoint path, labelling)
    """

    @app.middleware("http")
    async def metrics_middleware(request: Request, call_next):
        if request.url.path == settings.path:
            return await call_next(request)

        start = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            metrics.observe(
                request.method,
                _label_path(request, settings.use_route_path),
                status,
                time.perf_counter() - start,
                metrics.request_labels(request),
            )


def build_metrics_router(metrics: HTTPMetrics, path: str) -> APIRouter:
    """Router exposing the registry in Prometheus text format."""
    router = APIRouter(tags=["metrics"])

    @router.get(path, include_in_schema=False)
    async def scrape_metrics() -> Response:
        return Response(content=metrics.render(), media_type=CONTENT_TYPE_LATEST)

    return router
