"""Assessment scoring API endpoints.

Each endpoint validates the measurements, runs the matching scorer and applies
the trust/capping protocol. The response carries the uncapped ``raw_score``,
the ``score_to_save`` and the Limit Break flags next to the assessment fields.
"""
from typing import Any

from fastapi import APIRouter, Depends, Request

from powerscore.config.settings import get_settings
from powerscore.core.exceptions import UnscorableAssessmentError
from powerscore.core.logging import get_logger
from powerscore.schemas.assessments import (
    CardioAssessmentRequest,
    FFMIAssessmentRequest,
    MuscleAssessmentRequest,
    OneRepMaxRequest,
    OneRepMaxResponse,
    PowerAssessmentRequest,
    StrengthAssessmentRequest,
)
from powerscore.schemas.base import APIResponse, ResponseMeta
from powerscore.scoring import (
    BaseScoreResult,
    OneRepMaxFormula,
    StandardsCatalog,
    StrengthEntry,
    TrustState,
    estimate_one_rep_max,
    score_cardio,
    score_ffmi,
    score_muscle,
    score_power,
    score_strength,
    submit,
    weight_for_reps,
)
from powerscore.api.routes.dependencies import get_catalog

router = APIRouter()
logger = get_logger(__name__)


def _outcome_response(
    request: Request,
    assessment: str,
    result: BaseScoreResult,
    trust: TrustState,
    catalog: StandardsCatalog | None = None,
) -> APIResponse[dict[str, Any]]:
    if not result.is_scored:
        raise UnscorableAssessmentError(assessment)
    outcome = submit(result, trust)
    logger.info(
        "assessment_scored",
        assessment=assessment,
        raw_score=outcome.raw_score,
        score_to_save=outcome.submission.score_to_save,
        is_capped=outcome.submission.is_capped,
    )
    meta = ResponseMeta.for_request(request, standards_version=catalog.version if catalog else None)
    return APIResponse(data=outcome.to_dict(), meta=meta)


@router.post("/strength", response_model=APIResponse[dict[str, Any]])
async def assess_strength(
    request: Request,
    body: StrengthAssessmentRequest,
    catalog: StandardsCatalog = Depends(get_catalog),
):
    """Score the entered lifts; the composite averages the barbell and cable lifts."""
    entries = [StrengthEntry(exercise=lift.exercise, weight=lift.weight, reps=lift.reps) for lift in body.lifts]
    result = score_strength(entries, body.bodyweight, body.sex, body.age, catalog)
    return _outcome_response(request, "strength", result, body.trust, catalog)


@router.post("/cardio", response_model=APIResponse[dict[str, Any]])
async def assess_cardio(
    request: Request,
    body: CardioAssessmentRequest,
    catalog: StandardsCatalog = Depends(get_catalog),
):
    result = score_cardio(
        distance_m=body.distance_m,
        total_seconds=body.total_seconds,
        sex=body.sex,
        age=body.age,
        latest=body.latest,
        catalog=catalog,
    )
    return _outcome_response(request, "cardio", result, body.trust, catalog)


@router.post("/muscle", response_model=APIResponse[dict[str, Any]])
async def assess_muscle(
    request: Request,
    body: MuscleAssessmentRequest,
    catalog: StandardsCatalog = Depends(get_catalog),
):
    result = score_muscle(body.smm_kg, body.weight_kg, body.sex, body.age, catalog)
    return _outcome_response(request, "muscle", result, body.trust, catalog)


@router.post("/power", response_model=APIResponse[dict[str, Any]])
async def assess_power(
    request: Request,
    body: PowerAssessmentRequest,
    catalog: StandardsCatalog = Depends(get_catalog),
):
    result = score_power(
        vertical_jump=body.vertical_jump,
        standing_long_jump=body.standing_long_jump,
        sprint=body.sprint,
        sex=body.sex,
        age=body.age,
        catalog=catalog,
    )
    return _outcome_response(request, "power", result, body.trust, catalog)


@router.post("/ffmi", response_model=APIResponse[dict[str, Any]])
async def assess_ffmi(request: Request, body: FFMIAssessmentRequest):
    result = score_ffmi(body.height_cm, body.weight_kg, body.body_fat_percent, body.sex)
    return _outcome_response(request, "ffmi", result, body.trust)


@router.post("/one-rep-max", response_model=APIResponse[OneRepMaxResponse])
async def one_rep_max(request: Request, body: OneRepMaxRequest):
    """Estimate a 1RM; the formula defaults to the configured one."""
    formula = body.formula or OneRepMaxFormula(get_settings().default_one_rep_max_formula)
    estimate = estimate_one_rep_max(body.weight, body.reps, formula)
    target_weight = None
    if body.target_reps is not None:
        target_weight = weight_for_reps(estimate, body.target_reps, formula)

    response = OneRepMaxResponse(
        formula=formula,
        weight=body.weight,
        reps=body.reps,
        one_rep_max=estimate,
        target_reps=body.target_reps,
        weight_for_target_reps=target_weight,
    )
    return APIResponse(data=response, meta=ResponseMeta.for_request(request))
