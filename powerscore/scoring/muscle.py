"""Muscle scorer (skeletal muscle mass and SMM as a share of bodyweight)."""

from __future__ import annotations

from dataclasses import dataclass

from powerscore.core.logging import get_logger

from .base import BaseScoreResult, Orientation, Sex, is_positive_number, round_half_up
from .constants import SMM_WEIGHT
from .interpolation import score_from_standard
from .standards import Metric, StandardsCatalog, get_standards

logger = get_logger(__name__)


@dataclass(frozen=True)
class MuscleResult(BaseScoreResult):
    """Muscle score and its components; every field is None when unscored."""

    sm_percent: float | None = None
    smm_score: float | None = None
    sm_percent_score: float | None = None
    smm_score_weighted: float | None = None


def score_muscle(
    smm_kg: float,
    weight_kg: float,
    sex: Sex | str | None,
    age: float | None,
    catalog: StandardsCatalog | None = None,
) -> MuscleResult:
    """Score skeletal muscle mass against the SMM and SMM% ladders.

    The absolute SMM score is weighted by 1.25 and averaged with the SMM%
    score:

        final = round2((round2(smm_score * 1.25) + sm_percent_score) / 2)
    """
    if not is_positive_number(smm_kg) or not is_positive_number(weight_kg):
        return MuscleResult(raw_score=None)

    catalog = catalog or get_standards()
    smm_row = catalog.row_for(Metric.SMM, sex, age)
    percent_row = catalog.row_for(Metric.SMM_PERCENT, sex, age)
    if smm_row is None or percent_row is None:
        logger.warning("muscle_row_missing", sex=str(sex), age=age)
        return MuscleResult(raw_score=None)

    sm_percent = smm_kg / weight_kg * 100
    smm_score = score_from_standard(smm_kg, smm_row, Orientation.INCREASING)
    sm_percent_score = score_from_standard(sm_percent, percent_row, Orientation.INCREASING)
    weighted = round_half_up(smm_score * SMM_WEIGHT)
    final = round_half_up((weighted + sm_percent_score) / 2)

    logger.debug("muscle_scored", smm_kg=smm_kg, sm_percent=sm_percent, score=final)
    return MuscleResult(
        raw_score=final,
        sm_percent=round_half_up(sm_percent),
        smm_score=smm_score,
        sm_percent_score=sm_percent_score,
        smm_score_weighted=weighted,
    )
