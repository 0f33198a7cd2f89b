"""Domain event subscriber interface."""

from abc import ABC, abstractmethod

from cats.domain.event.base import DomainEvent


class DomainEventSubscriber(ABC):
    """Reacts to published domain events.

    Implementations live in the application layer and are handed to the
    event bus when it is built.
    """

    @abstractmethod
    async def on(self, event: DomainEvent) -> None:
        """Handle one event."""
        pass

    @abstractmethod
    def subscribed_to(self) -> list[str]:
        """Names of the events this subscriber wants."""
        pass

    def name(self) -> str:
        return type(self).__name__
