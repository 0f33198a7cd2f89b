"""Event bus interface."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from cats.domain.event.base import DomainEvent


class EventBus(ABC):
    """Delivers domain events to their subscribers."""

    @abstractmethod
    async def publish(self, events: Sequence[DomainEvent]) -> None:
        """Publish events.

        Args:
            events: Events to deliver, usually pulled from an aggregate
        """
        pass
