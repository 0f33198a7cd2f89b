"""Get cat use case."""

from pydantic import BaseModel

from cats.application.mapper.cat import CatDTO, CatMapper
from cats.application.usecase.base import BaseUseCase
from cats.application.usecase.cat.error import CatNotFoundError
from cats.application.usecase.error import ValidationError
from cats.domain.repository import CatRepository
from cats.domain.result import Either, left, right
from cats.domain.value import CatId


class GetCatByIdRequest(BaseModel):
    """Get cat request."""

    cat_id: str


GetCatByIdResponse = Either[ValidationError | CatNotFoundError, CatDTO]


class GetCatByIdUseCase(BaseUseCase[GetCatByIdRequest, GetCatByIdResponse]):
    """Use case for retrieving a cat by ID."""

    def __init__(self, cat_repository: CatRepository) -> None:
        """Initialize get cat use case.

        Args:
            cat_repository: Cat repository
        """
        self.cat_repository = cat_repository

    async def execute(self, request: GetCatByIdRequest) -> GetCatByIdResponse:
        """Execute get cat flow.

        Returns:
            Right with the cat, Left(ValidationError) for a malformed ID, or
            Left(CatNotFoundError)
        """
        if not CatId.is_valid(request.cat_id):
            return left(ValidationError("Invalid cat id"))

        cat = await self.cat_repository.find_by_id(CatId(request.cat_id))
        if cat is None:
            return left(CatNotFoundError(request.cat_id))

        return right(CatMapper.to_dto(cat))
