"""Test configuration and fixtures."""

import logfire
import pytest

from cats.domain.event import DomainEvent, EventBus
from cats.domain.model.cat import Cat

# Keep Logfire local and quiet for the whole session
logfire.configure(send_to_logfire=False, console=False)


class RecordingEventBus(EventBus):
    """Event bus that keeps every published event for assertions."""

    def __init__(self) -> None:
        self.published: list[DomainEvent] = []

    async def publish(self, events) -> None:
        self.published.extend(events)

    def names(self) -> list[str]:
        return [event.event_name for event in self.published]


def make_cat(name: str = "Tom", age: int | float = 3, breed: str = "Siamese") -> Cat:
    """Helper to build a valid cat with its creation event already drained.

    Args:
        name: Cat name (at least two characters)
        age: Non-negative age
        breed: Breed

    Returns:
        Valid Cat aggregate with no pending events
    """
    cat = Cat.create(name=name, age=age, breed=breed).get_value()
    cat.pull_domain_events()
    return cat


@pytest.fixture
def cat() -> Cat:
    return make_cat()
