"""Pydantic schemas for the assessment API endpoints.

Request bodies accept numbers or numeric strings; every measurement goes
through the scoring input adapter before it reaches a scorer, so a blank or
out-of-range value is rejected here with a 422.
"""
from typing import Any

from pydantic import BaseModel, Field, field_validator

from powerscore.scoring import (
    CardioTest,
    Exercise,
    OneRepMaxFormula,
    TrustState,
    coerce_number,
    normalize_sex,
    validate_measurement,
    validate_strength_reps,
)
from powerscore.scoring.constants import MeasurementLimits
from powerscore.scoring.validators import ValidationResult, describe_issues


def _unwrap(result: ValidationResult[float]) -> float:
    if not result.is_valid:
        raise ValueError(describe_issues([result], prefix="Invalid measurement"))
    return result.value


def _optional(kind: str, value: Any) -> float | None:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return _unwrap(validate_measurement(kind, value))


# ============== Shared ==============

class TrustFields(BaseModel):
    """Sex and trust flags sent with every assessment."""

    sex: str = Field(..., description="male/female (m/f and 男/女 accepted)")
    is_verified: bool = False
    email_verified: bool = False
    is_anonymous: bool = False

    @field_validator('sex', mode='before')
    @classmethod
    def validate_sex(cls, v: Any) -> str:
        normalized = normalize_sex(v)
        if normalized is None:
            raise ValueError(f"Unknown sex '{v}'. Must be male or female")
        return normalized.value

    @property
    def trust(self) -> TrustState:
        return TrustState(
            email_verified=self.email_verified,
            is_verified=self.is_verified,
            is_anonymous=self.is_anonymous,
        )


class ProfileFields(TrustFields):
    """Trust fields plus the age used to pick a standards bracket."""

    age: int = Field(..., description="Age in whole years")

    @field_validator('age', mode='before')
    @classmethod
    def validate_age(cls, v: Any) -> int:
        return int(_unwrap(validate_measurement("age", v)))


# ============== Strength ==============

class LiftInput(BaseModel):
    exercise: Exercise
    weight: float = Field(..., description="Load in kg; added load for pull-ups")
    reps: int

    @field_validator('exercise', mode='before')
    @classmethod
    def validate_exercise(cls, v: Any) -> Exercise:
        parsed = Exercise.parse(v)
        if parsed is None:
            valid = ", ".join(e.value for e in Exercise)
            raise ValueError(f"Unknown exercise '{v}'. Must be one of: {valid}")
        return parsed

    @field_validator('weight', mode='before')
    @classmethod
    def validate_weight(cls, v: Any) -> float:
        number = coerce_number(v)
        _, high = MeasurementLimits.RANGES["weight"]
        if number is None or not 0 <= number <= high:
            raise ValueError(f"Weight must be a number between 0 and {high}")
        return number

    @field_validator('reps', mode='before')
    @classmethod
    def validate_reps(cls, v: Any) -> int:
        return int(_unwrap(validate_strength_reps(v)))


class StrengthAssessmentRequest(ProfileFields):
    bodyweight: float
    lifts: list[LiftInput] = Field(..., min_length=1)

    @field_validator('bodyweight', mode='before')
    @classmethod
    def validate_bodyweight(cls, v: Any) -> float:
        return _unwrap(validate_measurement("weight", v))


# ============== Cardio ==============

class CardioAssessmentRequest(ProfileFields):
    distance_m: float | None = Field(None, description="Cooper 12-minute distance in meters")
    total_seconds: float | None = Field(None, description="5 km finishing time in seconds")
    latest: CardioTest | None = None

    @field_validator('distance_m', mode='before')
    @classmethod
    def validate_distance(cls, v: Any) -> float | None:
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        meters = coerce_number(v)
        if meters is None:
            raise ValueError("Distance must be a number")
        _unwrap(validate_measurement("distance", meters / 1000))
        return meters

    @field_validator('total_seconds', mode='before')
    @classmethod
    def validate_duration(cls, v: Any) -> float | None:
        return _optional("duration", v)


# ============== Muscle ==============

class MuscleAssessmentRequest(ProfileFields):
    smm_kg: float
    weight_kg: float

    @field_validator('smm_kg', 'weight_kg', mode='before')
    @classmethod
    def validate_mass(cls, v: Any) -> float:
        return _unwrap(validate_measurement("weight", v))


# ============== Power ==============

class PowerAssessmentRequest(ProfileFields):
    vertical_jump: float | None = Field(None, description="cm")
    standing_long_jump: float | None = Field(None, description="cm")
    sprint: float | None = Field(None, description="30 m time in seconds")

    @field_validator('vertical_jump', 'standing_long_jump', 'sprint', mode='before')
    @classmethod
    def validate_positive(cls, v: Any) -> float | None:
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        number = coerce_number(v)
        if number is None or number <= 0:
            raise ValueError("Value must be a positive number")
        return number


# ============== FFMI ==============

class FFMIAssessmentRequest(TrustFields):
    height_cm: float
    weight_kg: float
    body_fat_percent: float

    @field_validator('height_cm', mode='before')
    @classmethod
    def validate_height(cls, v: Any) -> float:
        return _unwrap(validate_measurement("height", v))

    @field_validator('weight_kg', mode='before')
    @classmethod
    def validate_weight(cls, v: Any) -> float:
        return _unwrap(validate_measurement("weight", v))

    @field_validator('body_fat_percent', mode='before')
    @classmethod
    def validate_body_fat(cls, v: Any) -> float:
        number = coerce_number(v)
        if number is None or not 0 <= number < 100:
            raise ValueError("Body fat must be a percentage in [0, 100)")
        return number


# ============== One-rep max ==============

class OneRepMaxRequest(BaseModel):
    weight: float
    reps: int
    formula: OneRepMaxFormula | None = None
    target_reps: int | None = Field(None, description="Also return the load for this many reps")

    @field_validator('weight', mode='before')
    @classmethod
    def validate_weight(cls, v: Any) -> float:
        return _unwrap(validate_measurement("weight", v))

    @field_validator('reps', 'target_reps', mode='before')
    @classmethod
    def validate_reps(cls, v: Any) -> int | None:
        if v is None:
            return None
        return int(_unwrap(validate_measurement("reps", v)))


class OneRepMaxResponse(BaseModel):
    formula: OneRepMaxFormula
    weight: float
    reps: int
    one_rep_max: float
    target_reps: int | None = None
    weight_for_target_reps: float | None = None
