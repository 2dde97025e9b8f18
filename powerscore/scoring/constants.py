"""Constants for assessment scoring.

This module centralizes the magic numbers used across the scorers. Most of
them are game-balance values that decide how far past 100 a performance can
climb; they are kept as literals so that every deployment ranks users the same
way.

Constants are organized by functional area:
- Percentile ladder: decile layout and extrapolation/damping breakpoints
- Age correction: strength multiplier by age band
- Strength: anomaly bound and composite membership
- Cardio: 5 km benchmark and baseline times
- Muscle: SMM weighting
- FFMI: score segments and category buckets
- Capping: submission ceilings
- Levels: score level labels
- Measurement limits: plausible input ranges
"""

from __future__ import annotations

# =============================================================================
# Percentile Ladder Constants
# =============================================================================

PERCENTILES: tuple[int, ...] = tuple(range(0, 101, 10))


class Extrapolation:
    """Breakpoints for scores beyond the 100th percentile."""

    CEILING = 100.0
    DAMPING_THRESHOLD = 120.0  # growth above this point is halved
    DAMPING_FACTOR = 0.5
    DECILE_POINTS = 10.0  # points spanned by one decile
    DECREASING_BONUS_PER_UNIT = 20.0  # sprint: points per unit faster than the 100th percentile


# =============================================================================
# Age Correction Constants
# =============================================================================

class AgeCorrection:
    """McCulloch-style age multipliers applied to DOTS."""

    NEUTRAL = 1.0
    YOUTH = 1.23  # flat below YOUTH_TAPER_START
    YOUTH_TAPER_START = 14
    YOUTH_TAPER_END = 23
    PEAK_END = 40

    # (exclusive upper age, coefficient) for masters bands after the peak
    MASTERS_BANDS: tuple[tuple[int, float], ...] = (
        (45, 1.045),
        (50, 1.11),
        (55, 1.15),
        (60, 1.20),
        (65, 1.25),
        (70, 1.30),
        (75, 1.35),
        (80, 1.40),
    )
    OLDEST = 1.45  # 80 and above


# =============================================================================
# DOTS Constants
# =============================================================================

class DotsLimits:
    """Numeric guards for the DOTS polynomial."""

    NUMERATOR_FACTOR = 500.0
    MIN_DENOMINATOR = 1e-4


# =============================================================================
# Strength Constants
# =============================================================================

class StrengthLimits:
    """Anomaly bound for a single exercise score."""

    MAX_PLAUSIBLE_SCORE = 500.0
    ANOMALY_SCORE = 0.0


# =============================================================================
# Cardio Constants
# =============================================================================

class CardioBenchmarks:
    """Cooper two-point rule and 5 km time benchmarks."""

    COOPER_LOWER_PERCENTILE = 60
    COOPER_UPPER_PERCENTILE = 100
    COOPER_LOWER_SCORE = 60.0
    COOPER_SPAN = 40.0

    FIVE_KM_BENCHMARK_SECONDS = 20 * 60  # 100 points
    FIVE_KM_BASELINE_SECONDS = 45 * 60  # 0 points
    FIVE_KM_BONUS_SECONDS_PER_POINT = 10.0


# =============================================================================
# Muscle Constants
# =============================================================================

SMM_WEIGHT = 1.25  # absolute SMM counts 25% more than SMM%


# =============================================================================
# FFMI Constants
# =============================================================================

class FFMIScoring:
    """Segment thresholds for the FFMI score."""

    TALL_HEIGHT_M = 1.8
    TALL_ADJUSTMENT_PER_M = 6.0
    BASE_SEGMENT_POINTS = 60.0
    MAX_SEGMENT_POINTS = 40.0
    POINTS_PER_UNIT_BEYOND_MAX = 5.0

    # sex -> (base ffmi, max ffmi)
    THRESHOLDS: dict[str, tuple[float, float]] = {
        "male": (18.5, 25.0),
        "female": (15.5, 21.0),
    }

    # sex -> ordered (exclusive upper ffmi, category); last entry has no bound
    CATEGORIES: dict[str, tuple[tuple[float | None, str], ...]] = {
        "male": (
            (18.0, "lean"),
            (20.0, "average"),
            (22.0, "athletic"),
            (23.0, "elite"),
            (26.0, "extreme"),
            (28.0, "superhuman"),
            (None, "monster"),
        ),
        "female": (
            (15.0, "lean"),
            (17.0, "average"),
            (19.0, "athletic"),
            (22.0, "elite"),
            (None, "extreme"),
        ),
    }


# =============================================================================
# Capping Constants
# =============================================================================

class CappingLimits:
    """Ceilings applied when a score is persisted."""

    FLOOR = 0.0
    UNVERIFIED_CEILING = 100.0
    VERIFIED_CEILING = 200.0
    LIMIT_BREAK_THRESHOLD = 100.0


# =============================================================================
# Level Constants
# =============================================================================

class ScoreLevels:
    """Level labels, highest first."""

    LEVELS: tuple[tuple[float, str], ...] = (
        (100.0, "legend"),
        (90.0, "apex"),
        (80.0, "elite"),
        (60.0, "steel"),
        (40.0, "growth"),
    )
    LOWEST = "potential"


# =============================================================================
# Measurement Limits
# =============================================================================

class MeasurementLimits:
    """Plausible input ranges enforced by the input adapter (inclusive)."""

    RANGES: dict[str, tuple[float, float]] = {
        "weight": (0.1, 1000.0),  # kg
        "reps": (1, 1000),
        "distance": (0.01, 1000.0),  # km
        "duration": (1, 24 * 60 * 60),  # seconds
        "height": (50.0, 300.0),  # cm
        "age": (1, 150),
    }
    MAX_STRENGTH_REPS = 10
