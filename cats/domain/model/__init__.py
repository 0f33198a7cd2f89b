"""Domain model entities."""

from cats.domain.model.cat import Cat, CatProps
from cats.domain.model.common import AggregateRoot, DomainModel, Entity

__all__ = [
    "DomainModel",
    "Entity",
    "AggregateRoot",
    "Cat",
    "CatProps",
]
