"""Application layer DI providers."""

from dishka import Scope, provide

from cats.application.usecase.cat import (
    CreateCatUseCase,
    DeleteCatUseCase,
    GetCatByIdUseCase,
    ListCatsUseCase,
    UpdateCatUseCase,
)
from cats.domain.event import EventBus
from cats.domain.repository import CatRepository
from cats.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_create_cat_use_case(
        self, cat_repository: CatRepository, event_bus: EventBus
    ) -> CreateCatUseCase:
        """Provide create cat use case."""
        return CreateCatUseCase(cat_repository=cat_repository, event_bus=event_bus)

    @provide(scope=Scope.REQUEST)
    def get_list_cats_use_case(self, cat_repository: CatRepository) -> ListCatsUseCase:
        """Provide list cats use case."""
        return ListCatsUseCase(cat_repository=cat_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_cat_by_id_use_case(
        self, cat_repository: CatRepository
    ) -> GetCatByIdUseCase:
        """Provide get cat by ID use case."""
        return GetCatByIdUseCase(cat_repository=cat_repository)

    @provide(scope=Scope.REQUEST)
    def get_update_cat_use_case(
        self, cat_repository: CatRepository, event_bus: EventBus
    ) -> UpdateCatUseCase:
        """Provide update cat use case."""
        return UpdateCatUseCase(cat_repository=cat_repository, event_bus=event_bus)

    @provide(scope=Scope.REQUEST)
    def get_delete_cat_use_case(
        self, cat_repository: CatRepository, event_bus: EventBus
    ) -> DeleteCatUseCase:
        """Provide delete cat use case."""
        return DeleteCatUseCase(cat_repository=cat_repository, event_bus=event_bus)
