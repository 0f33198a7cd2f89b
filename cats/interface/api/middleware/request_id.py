"""Request ID propagation."""

from collections.abc import Callable
from uuid import uuid4

from fastapi import FastAPI, Request


def install_request_id(
    app: FastAPI,
    header: str = "X-Request-ID",
    generate: Callable[[], str] = lambda: str(uuid4()),
) -> None:
    """Reuse or assign a request ID for every request.

    The ID is taken from ``header`` when the client sent one, otherwise
    generated. It is stored on ``request.state.request_id`` and echoed back
    in the response under the same header.

    Args:
        app: FastAPI application
        header: Header carrying the ID
        generate: ID factory for requests that arrive without one
    """

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        request_id = request.headers.get(header) or generate()
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers[header] = request_id
        return response
