"""Interface layer error handling."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


def route_not_found_body(method: str, path: str) -> dict:
    return {
        "error": True,
        "message": f"Route not found: {method} {path}",
        "code": "NOT_FOUND",
        "statusCode": status.HTTP_404_NOT_FOUND,
    }


async def _http_error_handler(request: Request, exc: StarletteHTTPException):
    # Only router misses carry the default detail; handler-raised 404s keep theirs
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=route_not_found_body(request.method, request.url.path),
        )
    return await http_exception_handler(request, exc)


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unhandled error",
        method=request.method,
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"status": "error", "message": "Internal Server Error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the unmatched-route and last-resort 500 handlers.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
