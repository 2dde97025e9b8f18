"""Age correction for strength scores (McCulloch-style coefficients)."""

from __future__ import annotations

from .base import is_positive_number
from .constants import AgeCorrection


def age_coefficient(age: float | None) -> float:
    """Multiplier applied to DOTS for lifters outside the 24-40 peak.

    Juniors get a flat 1.23 below 14 that tapers linearly to 1.00 at 23;
    masters climb in five-year steps from 1.045 (41-44) to 1.45 (80+).
    Missing or invalid ages are neutral (1.0).
    """
    if not is_positive_number(age):
        return AgeCorrection.NEUTRAL

    if age < AgeCorrection.YOUTH_TAPER_START:
        return AgeCorrection.YOUTH
    if age <= AgeCorrection.YOUTH_TAPER_END:
        span = AgeCorrection.YOUTH_TAPER_END - AgeCorrection.YOUTH_TAPER_START
        progress = (age - AgeCorrection.YOUTH_TAPER_START) / span
        return AgeCorrection.YOUTH - (AgeCorrection.YOUTH - AgeCorrection.NEUTRAL) * progress
    if age <= AgeCorrection.PEAK_END:
        return AgeCorrection.NEUTRAL

    for upper, coefficient in AgeCorrection.MASTERS_BANDS:
        if age < upper:
            return coefficient
    return AgeCorrection.OLDEST
