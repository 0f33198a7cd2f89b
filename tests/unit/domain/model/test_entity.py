"""Unit tests for Entity and AggregateRoot."""

import pytest

from cats.domain.error import InvalidOperationError
from cats.domain.event import DomainEvent
from cats.domain.model.common import AggregateRoot, Entity
from cats.domain.value import UniqueEntityID, ValueObject


class CollarProps(ValueObject):
    colour: str


class Collar(Entity[CollarProps]):
    pass


class Basket(AggregateRoot[CollarProps]):
    pass


class BasketMoved(DomainEvent):
    pass


class TestEntity:
    """Tests for identity-based equality."""

    def test_generates_id_when_omitted(self):
        """Should assign an identity automatically."""
        collar = Collar(props=CollarProps(colour="red"))

        assert isinstance(collar.id, UniqueEntityID)

    def test_same_id_different_props_are_equal(self):
        """Equality ignores props."""
        # Arrange
        entity_id = UniqueEntityID("collar-1")

        # Act
        red = Collar(id=entity_id, props=CollarProps(colour="red"))
        blue = Collar(id=entity_id, props=CollarProps(colour="blue"))

        # Assert
        assert red == blue
        assert hash(red) == hash(blue)

    def test_same_props_different_id_are_not_equal(self):
        """Equal props do not make equal entities."""
        first = Collar(props=CollarProps(colour="red"))
        second = Collar(props=CollarProps(colour="red"))

        assert first != second

    def test_equals_none(self):
        """Should be false against None."""
        assert not Collar(props=CollarProps(colour="red")).equals(None)

    def test_equals_self(self):
        """An entity always equals itself."""
        collar = Collar(props=CollarProps(colour="red"))

        assert collar.equals(collar)

    def test_missing_props_rejected(self):
        """Props are required."""
        with pytest.raises(InvalidOperationError):
            Collar(props=None)


class TestAggregateRoot:
    """Tests for pending event bookkeeping."""

    def test_pull_returns_events_in_order_and_clears(self):
        """Should drain events in recording order."""
        # Arrange
        basket = Basket(props=CollarProps(colour="red"))
        first = BasketMoved()
        second = BasketMoved()
        basket.record(first)
        basket.record(second)

        # Act
        pulled = basket.pull_domain_events()

        # Assert
        assert pulled == [first, second]
        assert basket.pull_domain_events() == []

    def test_events_are_per_instance(self):
        """Two aggregates never share an event list."""
        # Arrange
        first = Basket(props=CollarProps(colour="red"))
        second = Basket(props=CollarProps(colour="blue"))

        # Act
        first.record(BasketMoved())

        # Assert
        assert second.pull_domain_events() == []
