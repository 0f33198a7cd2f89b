"""Base class for value objects."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict


def _kind(value: Any) -> str:
    if isinstance(value, Mapping):
        return "map"
    if isinstance(value, list):
        return "list"
    if isinstance(value, tuple):
        return "tuple"
    if isinstance(value, (set, frozenset)):
        return "set"
    return "leaf"


def _is_hashable(value: Any) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True


def canonical_form(value: Any) -> Any:
    """Reduce a property bag to a hashable, order-independent form.

    Every container node is tagged with its kind, so a mapping never matches
    a set of pairs and a list never matches a tuple. Mapping key order is
    ignored. Unhashable leaves contribute only their type, which keeps the
    form consistent with ``structurally_equal``.
    """
    if isinstance(value, BaseModel):
        value = value.model_dump()
    kind = _kind(value)
    if kind == "map":
        return (kind, frozenset((key, canonical_form(item)) for key, item in value.items()))
    if kind in ("list", "tuple"):
        return (kind, tuple(canonical_form(item) for item in value))
    if kind == "set":
        return (kind, frozenset(canonical_form(item) for item in value))
    if not _is_hashable(value):
        return ("unhashable", type(value).__qualname__)
    return value


def structurally_equal(a: Any, b: Any) -> bool:
    """Deep structural comparison ignoring mapping key order."""
    if isinstance(a, BaseModel):
        a = a.model_dump()
    if isinstance(b, BaseModel):
        b = b.model_dump()
    kind = _kind(a)
    if kind != _kind(b):
        return False
    if kind == "map":
        return a.keys() == b.keys() and all(structurally_equal(a[key], b[key]) for key in a)
    if kind in ("list", "tuple"):
        return len(a) == len(b) and all(structurally_equal(x, y) for x, y in zip(a, b))
    if kind == "set":
        # Set members are hashable, so their canonical forms are too
        return {canonical_form(item) for item in a} == {canonical_form(item) for item in b}
    return _is_hashable(a) == _is_hashable(b) and a == b


class ValueObject(BaseModel):
    """Base class for all value objects.

    Value objects are immutable and compared by value, not identity: two value
    objects are equal when their property bags are structurally equal.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )

    @property
    def props(self) -> dict[str, Any]:
        return self.model_dump()

    def equals(self, other: "ValueObject | None") -> bool:
        if other is None or not isinstance(other, ValueObject):
            return False
        return structurally_equal(self.props, other.props)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueObject):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(canonical_form(self.props))
