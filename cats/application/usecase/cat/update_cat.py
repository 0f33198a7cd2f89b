"""Update cat use case."""

import logfire
from pydantic import BaseModel

from cats.application.usecase.base import BaseUseCase
from cats.application.usecase.cat.error import CatNotFoundError
from cats.application.usecase.error import ValidationError
from cats.domain.event import EventBus
from cats.domain.repository import CatRepository
from cats.domain.result import Either, left, right
from cats.domain.value import CatId


class UpdateCatRequest(BaseModel):
    """Update cat request. Omitted fields keep their current value."""

    cat_id: str
    name: str | None = None
    age: int | float | None = None
    breed: str | None = None


UpdateCatResponse = Either[ValidationError | CatNotFoundError, None]


class UpdateCatUseCase(BaseUseCase[UpdateCatRequest, UpdateCatResponse]):
    """Use case for partially updating a cat."""

    def __init__(self, cat_repository: CatRepository, event_bus: EventBus) -> None:
        """Initialize update cat use case.

        Args:
            cat_repository: Cat repository
            event_bus: Bus receiving the CatUpdated event
        """
        self.cat_repository = cat_repository
        self.event_bus = event_bus

    async def execute(self, request: UpdateCatRequest) -> UpdateCatResponse:
        """Execute update cat flow.

        Steps:
        1. Validate the ID
        2. Load the existing cat
        3. Build the updated cat (full re-validation in the aggregate)
        4. Save it and publish its events

        Returns:
            Right(None) on success, Left(ValidationError) or
            Left(CatNotFoundError) otherwise
        """
        with logfire.span("update_cat.execute", cat_id=request.cat_id):
            if not CatId.is_valid(request.cat_id):
                return left(ValidationError("Invalid cat id"))

            existing = await self.cat_repository.find_by_id(CatId(request.cat_id))
            if existing is None:
                logfire.warn("Cat not found", cat_id=request.cat_id)
                return left(CatNotFoundError(request.cat_id))

            updated_result = existing.update(
                name=request.name, age=request.age, breed=request.breed
            )
            if updated_result.is_failure:
                logfire.info("Cat update rejected", reason=updated_result.get_error_value())
                return left(ValidationError(updated_result.get_error_value()))

            updated = updated_result.get_value()
            await self.cat_repository.save(updated)
            await self.event_bus.publish(updated.pull_domain_events())

            logfire.info("Cat updated", cat_id=request.cat_id)
            return right(None)
