"""FastAPI application."""

from collections.abc import Callable, Mapping
from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from cats.config import Settings
from cats.interface.api.middleware.access_log import install_access_log
from cats.interface.api.middleware.metrics import (
    HTTPMetrics,
    build_metrics_router,
    install_metrics,
)
from cats.interface.api.middleware.request_id import install_request_id
from cats.interface.api.routes import cats, health
from cats.interface.api.state import ServerState
from cats.interface.error import register_error_handlers
from cats.util.di.container import create_container, setup_di
from cats.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Flip readiness on start and run close callbacks on shutdown."""
    server: ServerState = app.state.server
    settings: Settings = app.state.settings

    logfire.info("Server starting", base_url=settings.base_url)
    if settings.shutdown.server_is_ready_on_start:
        server.set_ready()

    yield

    await server.shutdown()


def create_app(
    settings: Settings | None = None,
    container: AsyncContainer | None = None,
    metrics_labels: Mapping[str, Callable[[Request], str]] | None = None,
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it console-free.

    Args:
        settings: Application settings, loaded from the environment if omitted
        container: DI container, the production container if omitted
        metrics_labels: Per-request metric labels, name to value function

    Returns:
        Configured application
    """
    settings = settings or Settings()
    container = container or create_container(settings)

    app_instance = FastAPI(
        title="Cats API",
        description="CRUD service for cats",
        version=settings.version,
        lifespan=lifespan,
    )
    app_instance.state.settings = settings
    app_instance.state.server = ServerState()
    app_instance.state.server.add_close_callback(container.close)

    if settings.observability.instrument_fastapi:
        instrument_fastapi(
            app_instance,
            excluded_paths=[
                settings.metrics.path,
                settings.shutdown.liveness_endpoint,
                settings.shutdown.readiness_endpoint,
            ],
        )

    register_error_handlers(app_instance)

    # Middleware added last runs first: request ID wraps access log wraps metrics
    if settings.metrics.enabled:
        metrics = HTTPMetrics(settings.metrics, dynamic_labels=metrics_labels)
        app_instance.state.metrics = metrics
        install_metrics(app_instance, metrics, settings.metrics)
        app_instance.include_router(build_metrics_router(metrics, settings.metrics.path))

    install_access_log(app_instance, settings.http.logged_methods)
    install_request_id(app_instance, settings.http.request_id_header)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", settings.http.request_id_header],
        expose_headers=[settings.http.request_id_header],
    )

    setup_di(app_instance, container)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(
        health.build_probe_router(
            settings.shutdown.liveness_endpoint,
            settings.shutdown.readiness_endpoint,
        )
    )
    app_instance.include_router(cats.router)

    return app_instance
