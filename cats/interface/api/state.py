"""Readiness and graceful shutdown state."""

import asyncio
import time
from collections.abc import Awaitable, Callable

import logfire


class ServerState:
    """Per-app readiness flag and shutdown hooks.

    One instance is created by ``create_app`` and stored on ``app.state``.
    The readiness probe reports ``is_ready``; shutdown flips it back and
    awaits every close callback.
    """

    def __init__(self) -> None:
        self.is_ready = False
        self.started_at = time.monotonic()
        self._on_ready: list[Callable[[], None]] = []
        self._close_callbacks: list[Callable[[], Awaitable[None]]] = []

    def on_ready(self, hook: Callable[[], None]) -> None:
        """Run ``hook`` once, the first time the server becomes ready."""
        self._on_ready.append(hook)

    def add_close_callback(self, callback: Callable[[], Awaitable[None]]) -> None:
        """Await ``callback`` during shutdown."""
        self._close_callbacks.append(callback)

    def set_ready(self) -> None:
        """Mark the server ready to take traffic."""
        if self.is_ready:
            return
        self.is_ready = True
        logfire.info("Server ready")
        hooks, self._on_ready = self._on_ready, []
        for hook in hooks:
            hook()

    def uptime(self) -> int:
        """Seconds since the state was created."""
        return round(time.monotonic() - self.started_at)

    async def shutdown(self) -> None:
        """Stop reporting ready and run the close callbacks concurrently."""
        self.is_ready = False
        logfire.info("Server shutting down", close_callbacks=len(self._close_callbacks))

        results = await asyncio.gather(
            *(callback() for callback in self._close_callbacks),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, Exception):
                logfire.error(
                    "Close callback failed",
                    error=str(result),
                    error_type=type(result).__name__,
                )

        logfire.info("Server shut down")
