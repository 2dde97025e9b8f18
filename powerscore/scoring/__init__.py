"""Assessment scoring engine.

This package converts raw physical measurements into comparable 0-100+
scores.

Main exports:
    - StandardsLoader / get_standards: YAML-backed percentile ladders, DOTS
      coefficients and anchor DOTS
    - score_from_standard: Percentile interpolation with Limit Break
      extrapolation
    - estimate_one_rep_max / weight_for_reps: 1RM formulas and their inverse
    - dots / age_coefficient: Bodyweight and age normalization
    - score_strength, score_cardio, score_muscle, score_power, score_ffmi:
      Per-assessment scorers
    - cap_for_submission / submit: Trust and capping protocol
    - validate_measurement / coerce_number: Input adapter
    - to_score_document / from_score_document: Stored field mapping
"""
from .base import (
    BaseScoreResult,
    Orientation,
    Sex,
    mean_of,
    normalize_sex,
    round_half_up,
)

from .exceptions import (
    ScoringException,
    StandardsError,
    StandardsLoadError,
    StandardsNotFoundError,
    StandardsValidationError,
)

from .standards import (
    AgeBracket,
    DotsCoefficients,
    Metric,
    StandardsCatalog,
    StandardsLoader,
    StandardsRow,
    StandardsTable,
    get_standards,
    get_standards_loader,
    parse_standards,
    reset_standards_loader,
)

from .interpolation import (
    score_decreasing,
    score_from_standard,
    score_increasing,
)

from .one_rep_max import (
    OneRepMaxFormula,
    average,
    brzycki,
    epley,
    estimate_one_rep_max,
    lombardi,
    weight_for_reps,
)

from .dots import dots, total_dots
from .age import age_coefficient

from .strength import (
    COMPOSITE_EXERCISES,
    Exercise,
    ExerciseScore,
    StrengthEntry,
    StrengthResult,
    score_exercise,
    score_strength,
)

from .cardio import (
    CardioResult,
    CardioTest,
    cooper_score,
    cooper_two_point_score,
    five_km_score,
    score_cardio,
)

from .muscle import MuscleResult, score_muscle
from .power import PowerResult, score_power

from .ffmi import (
    FFMIResult,
    calculate_ffmi,
    ffmi_category,
    ffmi_score,
    score_ffmi,
)

from .trust import (
    AssessmentOutcome,
    Submission,
    TrustState,
    cap_for_submission,
    level_for_score,
    submit,
)

from .validators import (
    MeasurementIssue,
    ValidationResult,
    coerce_age,
    coerce_number,
    validate_measurement,
    validate_strength_reps,
)

from .persistence import from_score_document, to_score_document

__all__ = [
    # Shared types
    "BaseScoreResult",
    "Orientation",
    "Sex",
    "mean_of",
    "normalize_sex",
    "round_half_up",
    # Exceptions
    "ScoringException",
    "StandardsError",
    "StandardsLoadError",
    "StandardsNotFoundError",
    "StandardsValidationError",
    # Standards
    "AgeBracket",
    "DotsCoefficients",
    "Metric",
    "StandardsCatalog",
    "StandardsLoader",
    "StandardsRow",
    "StandardsTable",
    "get_standards",
    "get_standards_loader",
    "parse_standards",
    "reset_standards_loader",
    # Interpolation
    "score_decreasing",
    "score_from_standard",
    "score_increasing",
    # 1RM
    "OneRepMaxFormula",
    "average",
    "brzycki",
    "epley",
    "estimate_one_rep_max",
    "lombardi",
    "weight_for_reps",
    # Normalization
    "dots",
    "total_dots",
    "age_coefficient",
    # Scorers
    "COMPOSITE_EXERCISES",
    "Exercise",
    "ExerciseScore",
    "StrengthEntry",
    "StrengthResult",
    "score_exercise",
    "score_strength",
    "CardioResult",
    "CardioTest",
    "cooper_score",
    "cooper_two_point_score",
    "five_km_score",
    "score_cardio",
    "MuscleResult",
    "score_muscle",
    "PowerResult",
    "score_power",
    "FFMIResult",
    "calculate_ffmi",
    "ffmi_category",
    "ffmi_score",
    "score_ffmi",
    # Trust
    "AssessmentOutcome",
    "Submission",
    "TrustState",
    "cap_for_submission",
    "level_for_score",
    "submit",
    # Input adapter
    "MeasurementIssue",
    "ValidationResult",
    "coerce_age",
    "coerce_number",
    "validate_measurement",
    "validate_strength_reps",
    # Persistence
    "from_score_document",
    "to_score_document",
]
