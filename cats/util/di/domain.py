"""Domain layer DI providers."""

from dishka import Scope, provide

from cats.adapter.event import InMemoryEventBus
from cats.application.subscriber import CatActivityLogger
from cats.domain.event import DomainEventSubscriber, EventBus
from cats.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Event bus and its subscribers.

    APP-scoped: the subscriber list is fixed when the container is built and
    the bus is shared by every request.
    """

    scope = Scope.APP

    @provide
    def get_subscribers(self) -> list[DomainEventSubscriber]:
        """Provide the subscribers registered on the event bus."""
        return [CatActivityLogger()]

    @provide
    def get_event_bus(self, subscribers: list[DomainEventSubscriber]) -> EventBus:
        """Provide the in-memory event bus."""
        return InMemoryEventBus(subscribers)
