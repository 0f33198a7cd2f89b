"""Domain events and the contracts for delivering them."""

from cats.domain.event.base import DomainEvent
from cats.domain.event.bus import EventBus
from cats.domain.event.cat import CatCreated, CatDeleted, CatUpdated
from cats.domain.event.subscriber import DomainEventSubscriber

__all__ = [
    "DomainEvent",
    "DomainEventSubscriber",
    "EventBus",
    "CatCreated",
    "CatUpdated",
    "CatDeleted",
]
