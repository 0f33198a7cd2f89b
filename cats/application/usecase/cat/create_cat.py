"""Create cat use case."""

import logfire
from pydantic import BaseModel

from cats.application.mapper.cat import CatDTO, CatMapper
from cats.application.usecase.base import BaseUseCase
from cats.application.usecase.error import ValidationError
from cats.domain.event import EventBus
from cats.domain.model.cat import Cat
from cats.domain.repository import CatRepository
from cats.domain.result import Either, left, right


class CreateCatRequest(BaseModel):
    """Create cat request."""

    name: str
    age: int | float
    breed: str


CreateCatResponse = Either[ValidationError, CatDTO]


class CreateCatUseCase(BaseUseCase[CreateCatRequest, CreateCatResponse]):
    """Use case for registering a new cat."""

    def __init__(self, cat_repository: CatRepository, event_bus: EventBus) -> None:
        """Initialize create cat use case.

        Args:
            cat_repository: Cat repository
            event_bus: Bus receiving the CatCreated event
        """
        self.cat_repository = cat_repository
        self.event_bus = event_bus

    async def execute(self, request: CreateCatRequest) -> CreateCatResponse:
        """Execute create cat flow.

        Steps:
        1. Build the Cat (validation happens in the aggregate)
        2. Save it
        3. Publish its pending events

        Returns:
            Right with the created cat, or Left(ValidationError)
        """
        with logfire.span("create_cat.execute", name=request.name, breed=request.breed):
            cat_result = Cat.create(name=request.name, age=request.age, breed=request.breed)
            if cat_result.is_failure:
                logfire.info("Cat rejected", reason=cat_result.get_error_value())
                return left(ValidationError(cat_result.get_error_value()))

            cat = cat_result.get_value()
            await self.cat_repository.save(cat)
            await self.event_bus.publish(cat.pull_domain_events())

            logfire.info("Cat created", cat_id=str(cat.id))
            return right(CatMapper.to_dto(cat))
