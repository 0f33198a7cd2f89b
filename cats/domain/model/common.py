"""Base models for all domain entities."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from cats.domain.error import InvalidOperationError
from cats.domain.event.base import DomainEvent
from cats.domain.value.common import ValueObject
from cats.domain.value.identifiers import UniqueEntityID

P = TypeVar("P", bound=ValueObject)


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


class Entity(DomainModel, Generic[P]):
    """Object with an identity that outlives changes to its properties.

    Properties are a frozen value object; changing them means building a new
    entity with the same id. Two entities are equal when their ids are.
    """

    id: UniqueEntityID = Field(default_factory=UniqueEntityID)
    props: P

    def __init__(self, **data: Any) -> None:
        if data.get("props") is None:
            raise InvalidOperationError("Entity props must not be None.")
        super().__init__(**data)

    def equals(self, other: "Entity[Any] | None") -> bool:
        if other is None:
            return False
        if self is other:
            return True
        if not isinstance(other, Entity):
            return False
        return self.id == other.id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self.id)


class AggregateRoot(Entity[P], Generic[P]):
    """Entity that records domain events for later dispatch."""

    _domain_events: list[DomainEvent] = PrivateAttr(default_factory=list)

    def record(self, event: DomainEvent) -> None:
        self._domain_events.append(event)

    def pull_domain_events(self) -> list[DomainEvent]:
        """Return pending events in recording order and forget them."""
        events = list(self._domain_events)
        self._domain_events.clear()
        return events
