"""Explicit success/failure values.

``Result`` carries a value or an error message and is what domain factories
return. ``Either`` carries a typed error (``Left``) or a value (``Right``) and
is what use cases return, so callers branch on the outcome instead of
catching exceptions.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from cats.domain.error import InvalidOperationError

T = TypeVar("T")
L = TypeVar("L")
R = TypeVar("R")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a domain operation.

    Build with ``Result.ok(value)`` or ``Result.fail(message)``; the
    constructor rejects a success carrying an error and a failure without one.
    """

    is_success: bool
    error: str | None = None
    _value: Any = None

    def __post_init__(self) -> None:
        if self.is_success and self.error:
            raise InvalidOperationError(
                "A result cannot be successful and contain an error"
            )
        if not self.is_success and not self.error:
            raise InvalidOperationError(
                "A failing result needs to contain an error message"
            )

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    def get_value(self) -> T:
        """Return the carried value.

        Raises:
            InvalidOperationError: If this is a failure result
        """
        if not self.is_success:
            raise InvalidOperationError(
                "Can't get the value of an error result. Use 'get_error_value' instead."
            )
        return self._value

    def get_error_value(self) -> str:
        """Return the failure message.

        Raises:
            InvalidOperationError: If this is a success result
        """
        if self.is_success or self.error is None:
            raise InvalidOperationError(
                "Can't get the error value of a successful result."
            )
        return self.error

    @staticmethod
    def ok(value: Any = None) -> "Result[Any]":
        return Result(is_success=True, _value=value)

    @staticmethod
    def fail(error: str) -> "Result[Any]":
        return Result(is_success=False, error=error)

    @staticmethod
    def combine(results: Iterable["Result[Any]"]) -> "Result[Any]":
        """Return the first failure in order, or a bare success."""
        for result in results:
            if result.is_failure:
                return result
        return Result.ok()


@dataclass(frozen=True)
class Left(Generic[L]):
    """Failure branch of an Either."""

    value: L

    def is_left(self) -> bool:
        return True

    def is_right(self) -> bool:
        return False


@dataclass(frozen=True)
class Right(Generic[R]):
    """Success branch of an Either."""

    value: R

    def is_left(self) -> bool:
        return False

    def is_right(self) -> bool:
        return True


Either = Union[Left[L], Right[R]]


def left(value: L) -> Left[L]:
    return Left(value)


def right(value: R) -> Right[R]:
    return Right(value)
