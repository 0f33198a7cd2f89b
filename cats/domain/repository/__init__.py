"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from cats.domain.repository.base import Repository
from cats.domain.repository.cat import CatRepository

__all__ = [
    "Repository",
    "CatRepository",
]
