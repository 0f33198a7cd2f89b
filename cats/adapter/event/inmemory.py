"""In-memory event bus."""

import asyncio
from collections.abc import Awaitable, Callable, Sequence

import logfire

from cats.domain.event import DomainEvent, DomainEventSubscriber, EventBus

SubscriberCallback = Callable[[DomainEvent], Awaitable[None]]


class InMemoryEventBus(EventBus):
    """Routes events to subscribers registered when the bus is built.

    All callbacks matching a publish call run concurrently and the call waits
    for every one of them. A failing subscriber is logged and skipped; it never
    fails the publisher. Nothing is retried or persisted, so events are lost
    if the process dies mid-publish.
    """

    def __init__(self, subscribers: Sequence[DomainEventSubscriber]) -> None:
        self._subscriptions: dict[str, list[tuple[str, SubscriberCallback]]] = {}
        for subscriber in subscribers:
            for event_name in subscriber.subscribed_to():
                self._subscriptions.setdefault(event_name, []).append(
                    (subscriber.name(), subscriber.on)
                )

    def subscriptions(self) -> dict[str, list[str]]:
        """Subscriber names per event name (read-only view for diagnostics)."""
        return {
            event_name: [name for name, _ in callbacks]
            for event_name, callbacks in self._subscriptions.items()
        }

    async def publish(self, events: Sequence[DomainEvent]) -> None:
        """Deliver events to every matching subscriber.

        Args:
            events: Events in the order they were recorded
        """
        executions = []
        for event in events:
            for subscriber_name, callback in self._subscriptions.get(event.event_name, []):
                executions.append(self._deliver(subscriber_name, callback, event))

        if not executions:
            return

        await asyncio.gather(*executions)

    @staticmethod
    async def _deliver(
        subscriber_name: str, callback: SubscriberCallback, event: DomainEvent
    ) -> None:
        try:
            await callback(event)
        except Exception as e:
            logfire.error(
                "Event subscriber failed",
                subscriber=subscriber_name,
                event_name=event.event_name,
                error=str(e),
                error_type=type(e).__name__,
            )
