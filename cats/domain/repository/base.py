"""Generic repository interface."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from cats.domain.model.common import Entity
from cats.domain.value.identifiers import UniqueEntityID

E = TypeVar("E", bound=Entity)
ID = TypeVar("ID", bound=UniqueEntityID)


class Repository(ABC, Generic[E, ID]):
    """Persistence contract for one aggregate type.

    Implementations live in the persistence layer. Backend faults surface as
    ``StorageError``; a missing entity is not an error at this layer.
    """

    @abstractmethod
    async def save(self, entity: E) -> None:
        """Save an entity (create or replace).

        Raises:
            StorageError: If the backing store fails
        """
        pass

    @abstractmethod
    async def find_by_id(self, entity_id: ID) -> Optional[E]:
        """Find an entity by ID.

        Returns:
            The entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[E]:
        """Return every stored entity."""
        pass

    @abstractmethod
    async def delete(self, entity_id: ID) -> None:
        """Delete an entity. Deleting an unknown ID is a no-op.

        Raises:
            StorageError: If the backing store fails
        """
        pass
