"""Strength scorer.

Each lift is turned into a Brzycki 1RM, normalized for bodyweight with DOTS,
corrected for age, and expressed as a percentage of the exercise's anchor
DOTS (the performance worth 100 points):

    score = dots(bodyweight, one_rm, sex) * age_coefficient(age) / anchor * 100

The composite strength score is the mean of the barbell and cable lifts that
were entered. Pull-ups are scored on their own (bodyweight plus added load)
and stay out of the composite.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from powerscore.core.logging import get_logger

from .age import age_coefficient
from .base import BaseScoreResult, Sex, is_positive_number, mean_of, normalize_sex
from .constants import StrengthLimits
from .dots import dots
from .one_rep_max import brzycki, estimate_one_rep_max
from .standards import StandardsCatalog, get_standards

logger = get_logger(__name__)


class Exercise(str, Enum):
    BENCH_PRESS = "bench_press"
    SQUAT = "squat"
    DEADLIFT = "deadlift"
    LAT_PULLDOWN = "lat_pulldown"
    OVERHEAD_PRESS = "overhead_press"
    PULL_UPS = "pull_ups"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def is_bodyweight(self) -> bool:
        return self is Exercise.PULL_UPS

    @classmethod
    def parse(cls, value: Exercise | str) -> Exercise | None:
        """Accept enum members, keys (``bench_press``) or display names."""
        if isinstance(value, Exercise):
            return value
        if not isinstance(value, str):
            return None
        key = value.strip()
        for exercise in cls:
            if key == exercise.value or key.lower() == exercise.display_name.lower():
                return exercise
        return None


_DISPLAY_NAMES: dict[Exercise, str] = {
    Exercise.BENCH_PRESS: "Bench Press",
    Exercise.SQUAT: "Squat",
    Exercise.DEADLIFT: "Deadlift",
    Exercise.LAT_PULLDOWN: "Lat Pulldown",
    Exercise.OVERHEAD_PRESS: "Overhead Press",
    Exercise.PULL_UPS: "Pull-ups",
}

COMPOSITE_EXERCISES: frozenset[Exercise] = frozenset({
    Exercise.BENCH_PRESS,
    Exercise.SQUAT,
    Exercise.DEADLIFT,
    Exercise.LAT_PULLDOWN,
    Exercise.OVERHEAD_PRESS,
})


@dataclass(frozen=True)
class StrengthEntry:
    """One entered set: load in kg (added load for pull-ups) and reps."""

    exercise: Exercise
    weight: float
    reps: float


@dataclass(frozen=True)
class ExerciseScore(BaseScoreResult):
    """Score of one lift.

    Attributes:
        raw_score: Uncapped score, None when inputs were missing or invalid
        exercise: The lift, None when the name was not recognized
        lifted_kg: Load moved (bodyweight plus added load for pull-ups)
        one_rep_max: Brzycki 1RM used for scoring
        estimated_one_rep_max: Average-formula 1RM shown to the user
        dots: DOTS of the Brzycki 1RM
        age_coefficient: Multiplier applied to DOTS
    """

    exercise: Exercise | None
    lifted_kg: float | None = None
    one_rep_max: float | None = None
    estimated_one_rep_max: float | None = None
    dots: float | None = None
    age_coefficient: float | None = None
    is_anomaly: bool = False


@dataclass(frozen=True)
class StrengthResult(BaseScoreResult):
    """Composite strength score plus the per-lift breakdown."""

    exercises: tuple[ExerciseScore, ...] = ()

    def score_for(self, exercise: Exercise) -> ExerciseScore | None:
        for item in self.exercises:
            if item.exercise is exercise:
                return item
        return None


def score_exercise(
    exercise: Exercise | str,
    weight: float,
    reps: float,
    bodyweight: float,
    sex: Sex | str | None,
    age: float | None,
    catalog: StandardsCatalog | None = None,
) -> ExerciseScore:
    """Score a single lift.

    Args:
        exercise: Lift, as enum, key or display name.
        weight: Load in kg; for pull-ups the load added to bodyweight (may be 0).
        reps: Completed repetitions.
        bodyweight: Lifter bodyweight in kg.
        sex: Lifter sex.
        age: Lifter age in years.

    Returns:
        ``ExerciseScore`` whose ``raw_score`` is None when any input is missing,
        or 0 when the computed score is an anomaly.
    """
    parsed = Exercise.parse(exercise)
    if parsed is None:
        logger.warning("unknown_exercise", exercise=str(exercise))
        return ExerciseScore(raw_score=None, exercise=None)

    normalized_sex = normalize_sex(sex)
    weight_ok = (
        is_positive_number(weight) or (parsed.is_bodyweight and weight == 0 and not isinstance(weight, bool))
    )
    if (
        not weight_ok
        or not is_positive_number(reps)
        or not is_positive_number(bodyweight)
        or not is_positive_number(age)
        or normalized_sex is None
    ):
        return ExerciseScore(raw_score=None, exercise=parsed)

    catalog = catalog or get_standards()
    anchor = catalog.anchor_dots.get(parsed.value)
    if anchor is None:
        logger.warning("anchor_dots_missing", exercise=parsed.value)
        return ExerciseScore(raw_score=None, exercise=parsed)

    lifted = bodyweight + weight if parsed.is_bodyweight else float(weight)
    one_rm = brzycki(lifted, reps)
    lift_dots = dots(bodyweight, one_rm, normalized_sex, catalog)
    coefficient = age_coefficient(age)
    score = lift_dots * coefficient / anchor * 100

    details = dict(
        exercise=parsed,
        lifted_kg=lifted,
        one_rep_max=one_rm,
        estimated_one_rep_max=estimate_one_rep_max(lifted, reps),
        dots=lift_dots,
        age_coefficient=coefficient,
    )

    if not math.isfinite(score) or score > StrengthLimits.MAX_PLAUSIBLE_SCORE:
        logger.warning(
            "strength_score_anomaly",
            exercise=parsed.value,
            score=score,
            weight=weight,
            reps=reps,
            bodyweight=bodyweight,
        )
        return ExerciseScore(raw_score=StrengthLimits.ANOMALY_SCORE, is_anomaly=True, **details)

    logger.debug("strength_scored", exercise=parsed.value, score=score)
    return ExerciseScore(raw_score=score, **details)


def score_strength(
    entries: Iterable[StrengthEntry],
    bodyweight: float,
    sex: Sex | str | None,
    age: float | None,
    catalog: StandardsCatalog | None = None,
) -> StrengthResult:
    """Score every entered lift and average the composite ones.

    Lifts without input are left out of the mean, not counted as zero. The
    composite is None when no composite lift could be scored.
    """
    catalog = catalog or get_standards()
    scores = tuple(
        score_exercise(entry.exercise, entry.weight, entry.reps, bodyweight, sex, age, catalog)
        for entry in entries
    )
    composite = mean_of(
        item.raw_score for item in scores if item.exercise in COMPOSITE_EXERCISES
    )
    return StrengthResult(raw_score=composite, exercises=scores)
