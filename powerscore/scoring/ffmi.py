"""FFMI (fat-free mass index) scorer.

``ffmi = weight * (1 - bf / 100) / height_m ** 2`` with the usual tall-lifter
adjustment of ``6.0 * (height_m - 1.8)`` above 1.80 m. The score maps the
adjusted FFMI onto three segments: 0-60 up to a sex-specific base FFMI, 60-100
up to the natural maximum, then 5 points per unit beyond it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from powerscore.core.logging import get_logger

from .base import BaseScoreResult, Sex, is_positive_number, normalize_sex, round_half_up
from .constants import FFMIScoring

logger = get_logger(__name__)


@dataclass(frozen=True)
class FFMIResult(BaseScoreResult):
    """FFMI score.

    Attributes:
        raw_score: Score of the adjusted FFMI, None when inputs are invalid
        ffmi: Adjusted FFMI rounded to 2 decimals
        adjusted_ffmi: Unrounded adjusted FFMI used for scoring
        category: Category key (``lean`` ... ``monster``)
    """

    ffmi: float | None = None
    adjusted_ffmi: float | None = None
    category: str | None = None


def calculate_ffmi(height_cm: float, weight_kg: float, body_fat_percent: float | None) -> float | None:
    """Height-adjusted FFMI, None for invalid input or body fat outside [0, 100)."""
    if not is_positive_number(height_cm) or not is_positive_number(weight_kg):
        return None
    if (
        body_fat_percent is None
        or isinstance(body_fat_percent, bool)
        or not isinstance(body_fat_percent, (int, float))
        or not math.isfinite(body_fat_percent)
        or not 0 <= body_fat_percent < 100
    ):
        return None

    height_m = height_cm / 100
    fat_free_mass = weight_kg * (1 - body_fat_percent / 100)
    ffmi = fat_free_mass / height_m ** 2
    if height_m > FFMIScoring.TALL_HEIGHT_M:
        ffmi += FFMIScoring.TALL_ADJUSTMENT_PER_M * (height_m - FFMIScoring.TALL_HEIGHT_M)
    return ffmi


def ffmi_score(sex: Sex | str | None, adjusted_ffmi: float | None) -> float:
    """Score an adjusted FFMI; 0 for non-positive values or unknown sex."""
    normalized = normalize_sex(sex)
    if normalized is None or not is_positive_number(adjusted_ffmi):
        return 0.0

    base, maximum = FFMIScoring.THRESHOLDS[normalized.value]
    if adjusted_ffmi <= base:
        score = adjusted_ffmi / base * FFMIScoring.BASE_SEGMENT_POINTS
    elif adjusted_ffmi < maximum:
        score = (
            FFMIScoring.BASE_SEGMENT_POINTS
            + (adjusted_ffmi - base) / (maximum - base) * FFMIScoring.MAX_SEGMENT_POINTS
        )
    else:
        score = (
            FFMIScoring.BASE_SEGMENT_POINTS
            + FFMIScoring.MAX_SEGMENT_POINTS
            + (adjusted_ffmi - maximum) * FFMIScoring.POINTS_PER_UNIT_BEYOND_MAX
        )
    return round_half_up(score)


def ffmi_category(sex: Sex | str | None, adjusted_ffmi: float | None) -> str | None:
    normalized = normalize_sex(sex)
    if normalized is None or not is_positive_number(adjusted_ffmi):
        return None
    for upper, category in FFMIScoring.CATEGORIES[normalized.value]:
        if upper is None or adjusted_ffmi < upper:
            return category
    return None


def score_ffmi(
    height_cm: float,
    weight_kg: float,
    body_fat_percent: float | None,
    sex: Sex | str | None,
) -> FFMIResult:
    """Compute FFMI, its score and category in one call."""
    adjusted = calculate_ffmi(height_cm, weight_kg, body_fat_percent)
    if adjusted is None or normalize_sex(sex) is None:
        return FFMIResult(raw_score=None)

    score = ffmi_score(sex, adjusted)
    logger.debug("ffmi_scored", ffmi=adjusted, score=score)
    return FFMIResult(
        raw_score=score,
        ffmi=round_half_up(adjusted),
        adjusted_ffmi=adjusted,
        category=ffmi_category(sex, adjusted),
    )
