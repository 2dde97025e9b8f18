"""Percentile interpolation against a standards ladder.

A measured value is placed on the 0-100 scale by linear interpolation between
the two deciles that bracket it. Values past the 100th percentile keep earning
points (a "Limit Break"). Increasing metrics extrapolate at the slope of the
last decile and slow to half rate above 120, so one extreme result cannot
dominate a composite score. Decreasing metrics (sprint time) earn a flat 20
points per unit faster than the 100th percentile, with no damping.
"""

from __future__ import annotations

from .base import Orientation, is_positive_number, round_half_up
from .constants import Extrapolation, PERCENTILES
from .standards import StandardsRow


def _damp(score: float) -> float:
    if score > Extrapolation.DAMPING_THRESHOLD:
        return (
            Extrapolation.DAMPING_THRESHOLD
            + (score - Extrapolation.DAMPING_THRESHOLD) * Extrapolation.DAMPING_FACTOR
        )
    return score


def score_increasing(value: float, row: StandardsRow) -> float:
    """Score a "more is better" value against ``row``.

    Args:
        value: Measured value (cm, kg, percent, ...).
        row: Ladder for the user's sex and age bracket.

    Returns:
        0 for invalid or sub-floor values, the interpolated score otherwise.
    """
    if not is_positive_number(value):
        return 0.0

    top = row[100]
    if value >= top:
        last_decile = top - row[90]
        slope = Extrapolation.DECILE_POINTS / last_decile if last_decile > 0 else 0.0
        extended = Extrapolation.CEILING + (value - top) * slope
        return round_half_up(_damp(extended))

    if value <= row[0]:
        return 0.0

    for upper in PERCENTILES[1:]:
        if value < row[upper]:
            break
    lower = upper - 10
    lower_value, upper_value = row[lower], row[upper]
    if upper_value == lower_value:
        return float(upper)
    return round_half_up(lower + (value - lower_value) / (upper_value - lower_value) * (upper - lower))


def score_decreasing(value: float, row: StandardsRow) -> float:
    """Score a "less is better" value (times) against ``row``.

    Mirrors ``score_increasing``; past the 100th percentile every unit below
    ``row[100]`` is worth a flat 20 points; the bonus is not damped.
    """
    if not is_positive_number(value):
        return 0.0

    best = row[100]
    if value <= best:
        return round_half_up(Extrapolation.CEILING + (best - value) * Extrapolation.DECREASING_BONUS_PER_UNIT)

    if value >= row[0]:
        return 0.0

    for upper in PERCENTILES[1:]:
        if value > row[upper]:
            break
    lower = upper - 10
    lower_value, upper_value = row[lower], row[upper]
    if upper_value == lower_value:
        return float(upper)
    return round_half_up(lower + (lower_value - value) / (lower_value - upper_value) * (upper - lower))


def score_from_standard(value: float, row: StandardsRow, orientation: Orientation) -> float:
    """Dispatch to the scorer matching the metric's orientation."""
    match orientation:
        case Orientation.INCREASING:
            return score_increasing(value, row)
        case Orientation.DECREASING:
            return score_decreasing(value, row)
