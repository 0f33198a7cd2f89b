"""Access log middleware."""

import time

import logfire
from fastapi import FastAPI, Request


def install_access_log(app: FastAPI, methods: list[str]) -> None:
    """Log each request on the way in and out.

    Args:
        app: FastAPI application
        methods: HTTP methods to log, others pass through silently
    """
    logged = {method.upper() for method in methods}

    @app.middleware("http")
    async def access_log_middleware(request: Request, call_next):
        if request.method not in logged:
            return await call_next(request)

        method = request.method
        path = request.url.path
        request_id = getattr(request.state, "request_id", None)
        start = time.perf_counter()

        logfire.info("<-- {method} {path}", method=method, path=path, request_id=request_id)

        try:
            response = await call_next(request)
        except Exception as e:
            elapsed_ms = round((time.perf_counter() - start) * 1000)
            logfire.error(
                "--> {method} {path} 500 in {elapsed_ms} ms",
                method=method,
                path=path,
                elapsed_ms=elapsed_ms,
                request_id=request_id,
                error=str(e),
            )
            raise

        elapsed_ms = round((time.perf_counter() - start) * 1000)
        log = logfire.error if response.status_code >= 500 else logfire.info
        log(
            "--> {method} {path} {status} in {elapsed_ms} ms",
            method=method,
            path=path,
            status=response.status_code,
            elapsed_ms=elapsed_ms,
            request_id=request_id,
        )
        return response
