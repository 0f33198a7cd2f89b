"""Delete cat use case."""

import logfire
from pydantic import BaseModel

from cats.application.usecase.base import BaseUseCase
from cats.application.usecase.cat.error import CatNotFoundError
from cats.application.usecase.error import ValidationError
from cats.domain.event import EventBus
from cats.domain.repository import CatRepository
from cats.domain.result import Either, left, right
from cats.domain.value import CatId


class DeleteCatRequest(BaseModel):
    """Delete cat request."""

    cat_id: str


DeleteCatResponse = Either[ValidationError | CatNotFoundError, None]


class DeleteCatUseCase(BaseUseCase[DeleteCatRequest, DeleteCatResponse]):
    """Use case for removing a cat."""

    def __init__(self, cat_repository: CatRepository, event_bus: EventBus) -> None:
        self.cat_repository = cat_repository
        self.event_bus = event_bus

    async def execute(self, request: DeleteCatRequest) -> DeleteCatResponse:
        """Execute delete cat flow.

        Returns:
            Right(None) on success, Left(ValidationError) or
            Left(CatNotFoundError) otherwise
        """
        with logfire.span("delete_cat.execute", cat_id=request.cat_id):
            if not CatId.is_valid(request.cat_id):
                return left(ValidationError("Invalid cat id"))

            cat = await self.cat_repository.find_by_id(CatId(request.cat_id))
            if cat is None:
                logfire.warn("Cat not found", cat_id=request.cat_id)
                return left(CatNotFoundError(request.cat_id))

            await self.cat_repository.delete(cat.id)
            cat.mark_deleted()
            await self.event_bus.publish(cat.pull_domain_events())

            logfire.info("Cat deleted", cat_id=request.cat_id)
            return right(None)
