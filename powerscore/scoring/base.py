"""Shared types and numeric helpers for the assessment scorers.

Every scorer returns a frozen dataclass derived from ``BaseScoreResult`` so the
trust protocol, the persistence adapter and the HTTP layer can treat results
uniformly: each exposes a ``raw_score`` (``None`` when the assessment cannot be
scored) and a ``to_dict()`` for serialization.
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable


class Sex(str, Enum):
    """Biological sex used to pick standards rows and formula constants."""

    MALE = "male"
    FEMALE = "female"


_SEX_ALIASES: dict[str, Sex] = {
    "male": Sex.MALE,
    "m": Sex.MALE,
    "男": Sex.MALE,
    "男性": Sex.MALE,
    "female": Sex.FEMALE,
    "f": Sex.FEMALE,
    "女": Sex.FEMALE,
    "女性": Sex.FEMALE,
}


def normalize_sex(value: Any) -> Sex | None:
    """Normalize a free-form sex label.

    Accepts ``Sex`` members, ``male``/``female`` in any case, the single
    letters ``m``/``f`` and the Chinese profile labels.

    Returns:
        The matching ``Sex`` or None when the label is missing or unknown.
    """
    if isinstance(value, Sex):
        return value
    if not isinstance(value, str):
        return None
    return _SEX_ALIASES.get(value.strip().lower())


class Orientation(str, Enum):
    """Direction in which a metric improves."""

    INCREASING = "increasing"  # more is better (jump distance, SMM)
    DECREASING = "decreasing"  # less is better (sprint time)


def is_positive_number(value: Any) -> bool:
    """True for finite int/float values above zero (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


def round_half_up(value: float, digits: int = 2) -> float:
    """Round to ``digits`` decimals with halves rounded up (toward +inf)."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def mean_of(values: Iterable[float | None]) -> float | None:
    """Arithmetic mean of the present values, None when none are present."""
    present = [v for v in values if v is not None]
    if not present:
        return None
    return sum(present) / len(present)


@dataclass(frozen=True)
class BaseScoreResult:
    """Base for all scorer results.

    Attributes:
        raw_score: Uncapped score, None when the assessment could not be scored
    """

    raw_score: float | None

    @property
    def is_scored(self) -> bool:
        return self.raw_score is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert the result to a JSON-friendly dictionary."""
        out: dict[str, Any] = {}
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Enum):
                value = value.value
            elif isinstance(value, BaseScoreResult):
                value = value.to_dict()
            elif isinstance(value, tuple):
                value = [v.to_dict() if isinstance(v, BaseScoreResult) else v for v in value]
            out[f.name] = value
        return out
