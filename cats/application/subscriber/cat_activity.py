"""Cat activity log subscriber."""

import logfire

from cats.domain.event import CatCreated, CatDeleted, CatUpdated, DomainEvent, DomainEventSubscriber


class CatActivityLogger(DomainEventSubscriber):
    """Writes every cat lifecycle event to the log."""

    def subscribed_to(self) -> list[str]:
        return [CatCreated.EVENT_NAME, CatUpdated.EVENT_NAME, CatDeleted.EVENT_NAME]

    async def on(self, event: DomainEvent) -> None:
        logfire.info(
            "Cat activity: {event_name}",
            event_name=event.event_name,
            occurred_on=event.occurred_on.isoformat(),
            **event.model_dump(exclude={"event_name", "occurred_on"}),
        )
