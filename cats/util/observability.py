"""Logfire setup.

Modules log and trace through ``logfire`` directly:

    import logfire

    logfire.info("Cat created", cat_id=str(cat.id))

    with logfire.span("create_cat.execute", name=request.name):
        ...
"""

import logfire
from fastapi import FastAPI

from cats.config import ObservabilitySettings, Settings


def _should_send(observability: ObservabilitySettings) -> bool:
    # An explicit flag wins; otherwise a token alone turns cloud export on
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is built.

    Args:
        settings: Application settings
    """
    send_to_logfire = _should_send(settings.observability)

    logfire.configure(
        service_name="cats-api",
        service_version=settings.version,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request, attributes: dict) -> dict:
    """Tag request spans with the correlation ID set by the request ID middleware."""
    request_id = getattr(request.state, "request_id", None)
    if request_id is None:
        return attributes
    return {**attributes, "request_id": request_id}


def instrument_fastapi(app: FastAPI, excluded_paths: list[str] | None = None) -> None:
    """Trace every request handled by ``app``.

    Args:
        app: FastAPI application instance
        excluded_paths: Paths not worth a span (probes, metrics scrapes)
    """
    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_request_attributes,
        excluded_urls=",".join(excluded_paths) if excluded_paths else None,
    )
