"""Cat lifecycle events."""

from typing import ClassVar

from cats.domain.event.base import DomainEvent


class CatCreated(DomainEvent):
    EVENT_NAME: ClassVar[str] = "cat.created"

    event_name: str = EVENT_NAME
    cat_id: str
    name: str


class CatUpdated(DomainEvent):
    EVENT_NAME: ClassVar[str] = "cat.updated"

    event_name: str = EVENT_NAME
    cat_id: str
    changed_fields: list[str]


class CatDeleted(DomainEvent):
    EVENT_NAME: ClassVar[str] = "cat.deleted"

    event_name: str = EVENT_NAME
    cat_id: str
