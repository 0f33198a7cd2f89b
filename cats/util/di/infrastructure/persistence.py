"""Persistence infrastructure providers."""

from dishka import Scope, provide

from cats.domain.repository import CatRepository
from cats.persistence.repository.inmemory import InMemoryCatRepository
from cats.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider.

    The in-memory store is APP-scoped so every request sees the same cats
    for the lifetime of the process.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_cat_repository(self) -> CatRepository:
        """Provide Cat repository."""
        return InMemoryCatRepository()
