"""Unit tests for identifiers."""

import pytest

from cats.domain.error import InvalidIdentifierError
from cats.domain.value import CatId, UniqueEntityID


class TestUniqueEntityID:
    """Tests for UniqueEntityID and CatId."""

    def test_generates_value_when_omitted(self):
        """Should generate a non-empty, unique value."""
        # Act
        first = UniqueEntityID()
        second = UniqueEntityID()

        # Assert
        assert UniqueEntityID.is_valid(first.to_value())
        assert first != second

    def test_wraps_given_value(self):
        """Should keep a supplied value as-is."""
        cat_id = CatId("abc")

        assert cat_id.to_value() == "abc"
        assert str(cat_id) == "abc"

    def test_same_type_same_value_are_equal(self):
        """Equality is by type and value."""
        assert CatId("abc") == CatId("abc")
        assert hash(CatId("abc")) == hash(CatId("abc"))

    def test_different_types_never_equal(self):
        """A CatId is never equal to a plain UniqueEntityID."""
        assert CatId("abc") != UniqueEntityID("abc")
        assert not CatId("abc").equals(UniqueEntityID("abc"))

    def test_equals_none(self):
        """Should be false against None."""
        assert not CatId("abc").equals(None)

    def test_empty_value_rejected(self):
        """Should reject empty strings."""
        with pytest.raises(InvalidIdentifierError):
            CatId("")

    def test_non_string_rejected(self):
        """Should reject non-string values."""
        with pytest.raises(InvalidIdentifierError):
            CatId(123)  # type: ignore[arg-type]

    def test_is_valid(self):
        """Should only accept non-empty strings."""
        assert CatId.is_valid("x")
        assert not CatId.is_valid("")
        assert not CatId.is_valid(None)
        assert not CatId.is_valid(42)

    def test_identifier_is_immutable(self):
        """Should not allow changing the wrapped value."""
        cat_id = CatId("abc")

        with pytest.raises(Exception):
            cat_id.root = "def"

    def test_usable_as_dict_key(self):
        """Equal ids hash to the same slot."""
        lookup = {CatId("abc"): "Tom"}

        assert lookup[CatId("abc")] == "Tom"

