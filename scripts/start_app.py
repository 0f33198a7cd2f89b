#!/usr/bin/env python3
"""Run the cats API under uvicorn.

Logfire is configured before the app is built so that failures while
wiring the container are reported too.
"""

import sys

import logfire
import uvicorn

from cats.config import Settings
from cats.interface.api.app import create_app
from cats.util.logging import setup_logging
from cats.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    try:
        app = create_app(settings)
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    logfire.info("Listening", base_url=settings.base_url)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.debug else "info",
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
