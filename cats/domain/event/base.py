"""Base class for domain events."""

from datetime import UTC, datetime
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class DomainEvent(BaseModel):
    """Something of domain significance that happened.

    Concrete events set ``EVENT_NAME``; subscribers register against that
    name.
    """

    model_config = ConfigDict(frozen=True)

    EVENT_NAME: ClassVar[str] = "domain.event"

    event_name: str = EVENT_NAME
    occurred_on: datetime = Field(default_factory=lambda: datetime.now(UTC))
