"""Cardio scorer.

Two independent tests feed the cardio score:

- Cooper 12-minute run: a two-point rule anchored on the 60th and 100th
  percentile distances of the user's sex/age row. Running the 60th percentile
  distance is worth 60 points and the 100th percentile distance 100 points;
  the line continues past 100 without damping.
- 5 km run: finishing in 20:00 is worth 100 points, 45:00 or slower 0. Every
  10 seconds under 20:00 adds one point.

The composite cardio score is whichever test was taken last.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from powerscore.core.logging import get_logger

from .base import BaseScoreResult, Sex, is_positive_number, round_half_up
from .constants import CardioBenchmarks
from .standards import Metric, StandardsCatalog, get_standards

logger = get_logger(__name__)


class CardioTest(str, Enum):
    COOPER = "cooper"
    FIVE_KM = "five_km"


@dataclass(frozen=True)
class CardioResult(BaseScoreResult):
    """Cardio score.

    Attributes:
        raw_score: Score of the test selected as latest, None without input
        test: Which test ``raw_score`` comes from
        cooper_score: Cooper score when a distance was given
        five_km_score: 5 km score when a time was given
    """

    test: CardioTest | None = None
    distance_m: float | None = None
    total_seconds: int | None = None
    cooper_score: float | None = None
    five_km_score: float | None = None


def cooper_two_point_score(distance_m: float, score_60_value: float, score_100_value: float) -> float:
    """Two-point Cooper rule: ``60 + (d - p60) / (p100 - p60) * 40``.

    Returns:
        The rounded score, floored at 0; 0 for invalid input or when the two
        anchor distances do not increase.
    """
    if not is_positive_number(distance_m):
        return 0.0
    span = score_100_value - score_60_value
    if not math.isfinite(span) or span <= 0:
        return 0.0
    score = (
        CardioBenchmarks.COOPER_LOWER_SCORE
        + (distance_m - score_60_value) / span * CardioBenchmarks.COOPER_SPAN
    )
    return round_half_up(max(0.0, score))


def cooper_score(
    distance_m: float,
    sex: Sex | str | None,
    age: float | None,
    catalog: StandardsCatalog | None = None,
) -> float:
    """Score a Cooper distance in meters; 0 when no row covers the user."""
    row = (catalog or get_standards()).row_for(Metric.COOPER, sex, age)
    if row is None:
        logger.warning("cooper_row_missing", sex=str(sex), age=age)
        return 0.0
    score = cooper_two_point_score(
        distance_m,
        row[CardioBenchmarks.COOPER_LOWER_PERCENTILE],
        row[CardioBenchmarks.COOPER_UPPER_PERCENTILE],
    )
    logger.debug("cooper_scored", distance_m=distance_m, score=score)
    return score


def five_km_score(total_seconds: float) -> float:
    """Score a 5 km time given in seconds (fractions are truncated)."""
    if not is_positive_number(total_seconds):
        return 0.0
    seconds = int(total_seconds)
    benchmark = CardioBenchmarks.FIVE_KM_BENCHMARK_SECONDS
    baseline = CardioBenchmarks.FIVE_KM_BASELINE_SECONDS

    if seconds <= benchmark:
        score = 100 + (benchmark - seconds) / CardioBenchmarks.FIVE_KM_BONUS_SECONDS_PER_POINT
    elif seconds >= baseline:
        score = 0.0
    else:
        score = (baseline - seconds) / (baseline - benchmark) * 100
    return round_half_up(score)


def _parse_test(value: CardioTest | str | None) -> CardioTest | None:
    if value is None:
        return None
    try:
        return CardioTest(value)
    except ValueError:
        logger.warning("unknown_cardio_test", latest=str(value))
        return None


def score_cardio(
    distance_m: float | None = None,
    total_seconds: float | None = None,
    sex: Sex | str | None = None,
    age: float | None = None,
    latest: CardioTest | str | None = None,
    catalog: StandardsCatalog | None = None,
) -> CardioResult:
    """Score whichever cardio tests were entered.

    Args:
        distance_m: Cooper 12-minute distance in meters.
        total_seconds: 5 km finishing time in seconds.
        latest: Test taken most recently. Defaults to the 5 km run when both
            tests are given.
    """
    cooper = None
    if distance_m is not None:
        cooper = cooper_score(distance_m, sex, age, catalog)
    five_km = None
    if total_seconds is not None:
        five_km = five_km_score(total_seconds)

    scores = {CardioTest.COOPER: cooper, CardioTest.FIVE_KM: five_km}
    chosen = _parse_test(latest)
    if chosen is None or scores[chosen] is None:
        chosen = next((test for test in (CardioTest.FIVE_KM, CardioTest.COOPER) if scores[test] is not None), None)

    return CardioResult(
        raw_score=scores[chosen] if chosen is not None else None,
        test=chosen,
        distance_m=distance_m,
        total_seconds=int(total_seconds) if is_positive_number(total_seconds) else None,
        cooper_score=cooper,
        five_km_score=five_km,
    )
