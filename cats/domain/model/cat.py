"""Cat aggregate root.

Cats are only built through ``Cat.create`` and changed through ``Cat.update``,
both of which validate the full property set and return a ``Result``, so an
invalid Cat can never exist.
"""

from pydantic import Field

from cats.domain import guard
from cats.domain.event.cat import CatCreated, CatDeleted, CatUpdated
from cats.domain.model.common import AggregateRoot
from cats.domain.result import Result
from cats.domain.value.common import ValueObject
from cats.domain.value.identifiers import CatId

MIN_NAME_LENGTH = 2


class CatProps(ValueObject):
    """Properties of a cat."""

    name: str
    age: int | float
    breed: str


class Cat(AggregateRoot[CatProps]):
    """Cat aggregate root."""

    id: CatId = Field(default_factory=CatId)

    @property
    def name(self) -> str:
        return self.props.name

    @property
    def age(self) -> int | float:
        return self.props.age

    @property
    def breed(self) -> str:
        return self.props.breed

    @staticmethod
    def _validate(props: CatProps) -> Result[None]:
        return guard.combine(
            [
                guard.against_at_least(MIN_NAME_LENGTH, props.name, "name"),
                guard.against_non_finite(props.age, "age"),
                guard.against_negative(props.age, "age"),
            ]
        )

    @classmethod
    def create(
        cls, name: str, age: int | float, breed: str, cat_id: CatId | None = None
    ) -> Result["Cat"]:
        """Validate the properties and build a new cat.

        Args:
            name: At least two characters
            age: Finite and non-negative
            breed: Free text
            cat_id: Identity to reuse, generated when omitted

        Returns:
            Success with the new cat (carrying a CatCreated event), or a
            failure naming the broken rule
        """
        props = CatProps(name=name, age=age, breed=breed)
        validation = cls._validate(props)
        if validation.is_failure:
            return Result.fail(validation.get_error_value())

        cat = cls(id=cat_id or CatId(), props=props)
        cat.record(CatCreated(cat_id=str(cat.id), name=cat.name))
        return Result.ok(cat)

    def update(
        self,
        name: str | None = None,
        age: int | float | None = None,
        breed: str | None = None,
    ) -> Result["Cat"]:
        """Return a new cat with the given fields replaced.

        The merged properties are validated as a whole. This cat is left
        untouched either way.
        """
        changes = {
            key: value
            for key, value in {"name": name, "age": age, "breed": breed}.items()
            if value is not None
        }
        props = self.props.model_copy(update=changes)

        validation = self._validate(props)
        if validation.is_failure:
            return Result.fail(validation.get_error_value())

        updated = Cat(id=self.id, props=props)
        updated.record(CatUpdated(cat_id=str(self.id), changed_fields=sorted(changes)))
        return Result.ok(updated)

    def mark_deleted(self) -> None:
        """Record that this cat has been removed from storage."""
        self.record(CatDeleted(cat_id=str(self.id)))
