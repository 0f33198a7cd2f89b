"""List cats use case."""

import logfire

from cats.application.mapper.cat import CatDTO, CatMapper
from cats.application.usecase.base import BaseUseCase
from cats.domain.repository import CatRepository


class ListCatsUseCase(BaseUseCase[None, list[CatDTO]]):
    """Use case for listing every cat."""

    def __init__(self, cat_repository: CatRepository) -> None:
        self.cat_repository = cat_repository

    async def execute(self, request: None = None) -> list[CatDTO]:
        """Return all cats in repository order."""
        cats = await self.cat_repository.find_all()
        logfire.info("Cats listed", count=len(cats))
        return CatMapper.to_dto_list(cats)
