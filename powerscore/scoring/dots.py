"""DOTS bodyweight normalization.

``dots = lifted * 500 / poly(bodyweight)`` with a sex-specific quartic
polynomial. The coefficients come from the standards catalog so they can be
swapped without touching code.
"""

from __future__ import annotations

import math

from .base import Sex, is_positive_number
from .constants import DotsLimits
from .standards import StandardsCatalog, get_standards


def dots(
    bodyweight_kg: float,
    lifted_kg: float,
    sex: Sex | str | None,
    catalog: StandardsCatalog | None = None,
) -> float:
    """DOTS score of a single lift or total.

    Returns:
        0 for non-positive/non-finite input, unknown sex, or a near-zero
        polynomial.
    """
    if not is_positive_number(bodyweight_kg) or not is_positive_number(lifted_kg):
        return 0.0

    coefficients = (catalog or get_standards()).dots_coefficients(sex)
    if coefficients is None:
        return 0.0

    denominator = coefficients.denominator(bodyweight_kg)
    if not math.isfinite(denominator) or abs(denominator) < DotsLimits.MIN_DENOMINATOR:
        return 0.0
    return lifted_kg * DotsLimits.NUMERATOR_FACTOR / denominator


def total_dots(
    squat_kg: float,
    bench_kg: float,
    deadlift_kg: float,
    bodyweight_kg: float,
    sex: Sex | str | None,
    catalog: StandardsCatalog | None = None,
) -> float:
    """DOTS of a powerlifting total; lifts that are missing count as 0 kg."""
    total = sum(lift for lift in (squat_kg, bench_kg, deadlift_kg) if is_positive_number(lift))
    return dots(bodyweight_kg, total, sex, catalog)
