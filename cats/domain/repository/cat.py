"""Cat repository interface."""

from cats.domain.model.cat import Cat
from cats.domain.repository.base import Repository
from cats.domain.value import CatId


class CatRepository(Repository[Cat, CatId]):
    """Repository for the Cat aggregate."""

    pass
