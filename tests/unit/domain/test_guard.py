"""Unit tests for argument guards."""

import pytest

from cats.domain import guard
from cats.domain.guard import GuardArgument


class TestGuard:
    """Tests for the guard functions."""

    def test_against_at_least_accepts_exact_length(self):
        """Should accept text of exactly the minimum length."""
        assert guard.against_at_least(2, "Ab", "name").is_success

    def test_against_at_least_rejects_short_text(self):
        """Should name the argument and the limit."""
        # Act
        result = guard.against_at_least(2, "A", "name")

        # Assert
        assert result.is_failure
        assert result.get_error_value() == "name must be at least 2 characters long"

    def test_against_at_least_rejects_empty_text(self):
        """Should reject an empty string."""
        assert guard.against_at_least(1, "", "name").is_failure

    def test_against_at_most(self):
        """Should reject text over the maximum length."""
        assert guard.against_at_most(3, "abc").is_success

        result = guard.against_at_most(3, "abcd")
        assert result.get_error_value() == "text must be at most 3 characters long"

    def test_against_negative_accepts_zero(self):
        """Zero is not negative."""
        assert guard.against_negative(0, "age").is_success

    def test_against_negative_rejects_negative(self):
        """Should reject negatives and include the value."""
        # Act
        result = guard.against_negative(-1, "age")

        # Assert
        assert result.is_failure
        assert result.get_error_value() == "age must be a non-negative number, got -1"

    @pytest.mark.parametrize("number", [float("inf"), float("-inf"), float("nan")])
    def test_against_non_finite_rejects(self, number):
        """Should reject infinities and NaN."""
        result = guard.against_non_finite(number, "age")

        assert result.is_failure
        assert "age must be a finite number" in result.get_error_value()

    def test_against_non_finite_accepts_numbers(self):
        """Ints of any size and ordinary floats pass."""
        assert guard.against_non_finite(10**400, "age").is_success
        assert guard.against_non_finite(2.5, "age").is_success

    def test_greater_than(self):
        """Should be strict."""
        assert guard.greater_than(1, 2).is_success
        assert guard.greater_than(1, 1).is_failure

    def test_against_none(self):
        """Should reject None but accept falsy values."""
        assert guard.against_none(0, "count").is_success
        assert guard.against_none("", "name").is_success
        assert guard.against_none(None, "name").get_error_value() == "name is required"

    def test_against_none_bulk_reports_first_missing(self):
        """Should stop at the first None argument."""
        # Act
        result = guard.against_none_bulk(
            [
                GuardArgument(argument="Tom", argument_name="name"),
                GuardArgument(argument=None, argument_name="age"),
                GuardArgument(argument=None, argument_name="breed"),
            ]
        )

        # Assert
        assert result.get_error_value() == "age is required"

    def test_is_one_of(self):
        """Should accept members and reject others."""
        assert guard.is_one_of("a", ["a", "b"], "letter").is_success
        assert guard.is_one_of("c", ["a", "b"], "letter").is_failure

    def test_in_range_is_inclusive(self):
        """Both bounds are part of the range."""
        assert guard.in_range(1, 1, 3, "n").is_success
        assert guard.in_range(3, 1, 3, "n").is_success
        assert guard.in_range(4, 1, 3, "n").is_failure

    def test_all_in_range(self):
        """Should fail when any number is out of range."""
        assert guard.all_in_range([1, 2, 3], 1, 3, "n").is_success
        assert guard.all_in_range([1, 5], 1, 3, "n").is_failure

    def test_combine_returns_first_failure(self):
        """Should report the earliest violation."""
        # Act
        result = guard.combine(
            [
                guard.against_at_least(2, "A", "name"),
                guard.against_negative(-1, "age"),
            ]
        )

        # Assert
        assert result.get_error_value() == "name must be at least 2 characters long"
