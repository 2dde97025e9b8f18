"""Input coercion and measurement validation.

Scorers take plain numbers. Values typed into a form or posted as JSON arrive
as strings, blanks or garbage, so this module is the boundary that turns them
into numbers (or None) and checks that a measurement is physically plausible
before it reaches a scorer. Nothing here raises: failures come back as a
``ValidationResult``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, TypeVar

from .constants import MeasurementLimits


__all__ = [
    "MeasurementIssue",
    "ValidationResult",
    "coerce_number",
    "coerce_age",
    "check_bounds",
    "validate_measurement",
    "validate_strength_reps",
    "describe_issues",
]


T = TypeVar("T")
N = TypeVar("N", int, float)


@dataclass(frozen=True)
class MeasurementIssue:
    """Why one measurement was rejected; ``limit`` reads like ``<=10``."""

    field: str
    message: str
    value: Any
    limit: str

    def __str__(self) -> str:
        return f"{self.field}={self.value!r} rejected: {self.message} ({self.limit})"


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Coerced value on success, otherwise the issues found.

    ``value`` is None whenever ``is_valid`` is False.
    """

    is_valid: bool
    value: T | None = None
    issues: tuple[MeasurementIssue, ...] = field(default_factory=tuple)

    @classmethod
    def accept(cls, value: T) -> ValidationResult[T]:
        return cls(True, value)

    @classmethod
    def reject(cls, *issues: MeasurementIssue) -> ValidationResult[T]:
        return cls(False, None, tuple(issues))


def coerce_number(value: Any) -> float | None:
    """Turn user input into a finite float.

    Accepts ints, floats and numeric strings (surrounding whitespace is
    ignored). Blanks, bools, NaN/inf and anything unparseable give None.

    Examples:
        >>> coerce_number(" 82.5 ")
        82.5
        >>> coerce_number("abc") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def coerce_age(value: Any) -> int | None:
    """Coerce an age to whole years (truncated), None when not positive."""
    number = coerce_number(value)
    if number is None or number <= 0:
        return None
    return int(number)


def check_bounds(value: N, low: N | None = None, high: N | None = None, name: str = "value") -> ValidationResult[N]:
    """Inclusive bounds check; either bound may be None."""
    if low is not None and value < low:
        return ValidationResult.reject(MeasurementIssue(name, f"below minimum {low}", value, f">={low}"))
    if high is not None and value > high:
        return ValidationResult.reject(MeasurementIssue(name, f"above maximum {high}", value, f"<={high}"))
    return ValidationResult.accept(value)


def validate_measurement(kind: str, value: Any) -> ValidationResult[float]:
    """Coerce and range-check one measurement.

    Args:
        kind: One of ``weight`` (kg), ``reps``, ``distance`` (km),
            ``duration`` (seconds), ``height`` (cm) or ``age`` (years)
        value: Raw input

    Returns:
        ValidationResult carrying the coerced float when valid
    """
    bounds = MeasurementLimits.RANGES.get(kind)
    if bounds is None:
        known = ", ".join(sorted(MeasurementLimits.RANGES))
        return ValidationResult.reject(
            MeasurementIssue(kind, f"unknown measurement kind '{kind}'", value, f"one of {known}")
        )

    number = coerce_number(value)
    if number is None:
        return ValidationResult.reject(MeasurementIssue(kind, "not a number", value, "numeric"))

    low, high = bounds
    return check_bounds(number, low, high, name=kind)


def validate_strength_reps(value: Any) -> ValidationResult[float]:
    """Reps for a strength set: a valid rep count of at most 10."""
    result = validate_measurement("reps", value)
    if not result.is_valid:
        return result
    return check_bounds(result.value, high=MeasurementLimits.MAX_STRENGTH_REPS, name="reps")


def describe_issues(results: Iterable[ValidationResult[Any]], prefix: str = "Invalid input") -> str:
    """One line naming every issue across ``results``; empty when all passed."""
    issues = [str(issue) for result in results for issue in result.issues]
    if not issues:
        return ""
    return f"{prefix}: " + "; ".join(issues)
