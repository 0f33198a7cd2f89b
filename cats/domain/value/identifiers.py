"""Typed identifiers for domain entities.

Identifiers of different classes never compare equal, even when they wrap the
same raw value, so a ``CatId`` cannot be mistaken for some other entity's id.
"""

from typing import Any, Generic, TypeVar
from uuid import uuid4

from pydantic import ConfigDict, RootModel

from cats.domain.error import InvalidIdentifierError

T = TypeVar("T")


class Identifier(RootModel[T], Generic[T]):
    """Immutable wrapper around a single identity value."""

    model_config = ConfigDict(frozen=True)

    def __init__(self, root: T) -> None:
        if root is None:
            raise InvalidIdentifierError(root)
        super().__init__(root)

    def to_value(self) -> T:
        return self.root

    def equals(self, other: "Identifier[Any] | None") -> bool:
        if other is None or type(other) is not type(self):
            return False
        return other.root == self.root

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Identifier):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.root))

    def __str__(self) -> str:
        return str(self.root)


class UniqueEntityID(Identifier[str]):
    """String identity, generated when not supplied."""

    def __init__(self, root: str | None = None) -> None:
        if root is None:
            root = uuid4().hex
        elif not UniqueEntityID.is_valid(root):
            raise InvalidIdentifierError(root)
        super().__init__(root)

    @staticmethod
    def is_valid(value: Any) -> bool:
        return isinstance(value, str) and len(value) > 0


class CatId(UniqueEntityID):
    """Identity of a Cat aggregate."""

    pass
