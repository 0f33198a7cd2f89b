"""Argument guards for domain factories.

Each guard returns a ``Result`` instead of raising, so factories can combine
several checks and report the first violation.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from cats.domain.result import Result


@dataclass(frozen=True)
class GuardArgument:
    argument: Any
    argument_name: str


def combine(guard_results: Sequence[Result[Any]]) -> Result[Any]:
    return Result.combine(guard_results)


def greater_than(min_value: float, actual_value: float) -> Result[str]:
    if actual_value > min_value:
        return Result.ok()
    return Result.fail(f"Number given {actual_value} is not greater than {min_value}")


def against_negative(number: float, argument_name: str) -> Result[str]:
    if number >= 0:
        return Result.ok()
    return Result.fail(f"{argument_name} must be a non-negative number, got {number}")


def against_non_finite(number: float, argument_name: str) -> Result[str]:
    if isinstance(number, int) or math.isfinite(number):
        return Result.ok()
    return Result.fail(f"{argument_name} must be a finite number, got {number}")


def against_at_least(num_chars: int, text: str, argument_name: str = "text") -> Result[str]:
    if len(text) >= num_chars:
        return Result.ok()
    return Result.fail(f"{argument_name} must be at least {num_chars} characters long")


def against_at_most(num_chars: int, text: str, argument_name: str = "text") -> Result[str]:
    if len(text) <= num_chars:
        return Result.ok()
    return Result.fail(f"{argument_name} must be at most {num_chars} characters long")


def against_none(argument: Any, argument_name: str) -> Result[str]:
    if argument is None:
        return Result.fail(f"{argument_name} is required")
    return Result.ok()


def against_none_bulk(args: Sequence[GuardArgument]) -> Result[str]:
    for arg in args:
        result = against_none(arg.argument, arg.argument_name)
        if result.is_failure:
            return result
    return Result.ok()


def is_one_of(value: Any, valid_values: Sequence[Any], argument_name: str) -> Result[str]:
    if value in valid_values:
        return Result.ok()
    return Result.fail(
        f"{argument_name} isn't one of the correct values in {list(valid_values)!r}. Got {value!r}."
    )


def in_range(num: float, minimum: float, maximum: float, argument_name: str) -> Result[str]:
    if minimum <= num <= maximum:
        return Result.ok()
    return Result.fail(f"{argument_name} is not within range {minimum} to {maximum}.")


def all_in_range(
    numbers: Sequence[float], minimum: float, maximum: float, argument_name: str
) -> Result[str]:
    for num in numbers:
        if in_range(num, minimum, maximum, argument_name).is_failure:
            return Result.fail(f"{argument_name} is not within the range.")
    return Result.ok()
