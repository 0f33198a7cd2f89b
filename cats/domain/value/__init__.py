"""Domain value objects."""

from cats.domain.value.common import ValueObject, canonical_form, structurally_equal
from cats.domain.value.identifiers import CatId, Identifier, UniqueEntityID

__all__ = [
    # Identifiers
    "Identifier",
    "UniqueEntityID",
    "CatId",
    # Value objects
    "ValueObject",
    "canonical_form",
    "structurally_equal",
]
