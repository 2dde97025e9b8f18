"""Standards table lookup endpoints."""

from fastapi import APIRouter, Depends, Query, Request
from pydantic import BaseModel

from powerscore.core.exceptions import NotFoundError, ValidationError as DomainValidationError
from powerscore.schemas.base import APIResponse, ResponseMeta
from powerscore.scoring import StandardsCatalog, coerce_age, normalize_sex
from powerscore.api.routes.dependencies import get_catalog

router = APIRouter()


class MetricSummary(BaseModel):
    metric: str
    orientation: str
    unit: str
    description: str


class StandardsSummaryResponse(BaseModel):
    version: str
    description: str
    metrics: list[MetricSummary]
    anchor_dots: dict[str, float]


class StandardsRowResponse(BaseModel):
    metric: str
    orientation: str
    unit: str
    sex: str
    age: int
    age_bracket: str
    values: dict[str, float]


@router.get("", response_model=APIResponse[StandardsSummaryResponse])
async def list_standards(request: Request, catalog: StandardsCatalog = Depends(get_catalog)):
    """List the loaded metrics and the standards version."""
    summary = StandardsSummaryResponse(
        version=catalog.version,
        description=catalog.description,
        metrics=[
            MetricSummary(
                metric=table.metric,
                orientation=table.orientation.value,
                unit=table.unit,
                description=table.description,
            )
            for table in catalog.tables.values()
        ],
        anchor_dots=dict(catalog.anchor_dots),
    )
    return APIResponse(data=summary, meta=ResponseMeta.for_request(request, standards_version=catalog.version))


@router.get("/{metric}", response_model=APIResponse[StandardsRowResponse])
async def get_standards_row(
    request: Request,
    metric: str,
    sex: str = Query(..., description="male or female"),
    age: str = Query(..., description="Age in years"),
    catalog: StandardsCatalog = Depends(get_catalog),
):
    """Return the percentile ladder for a metric, sex and age.

    Raises:
        NotFoundError: Unknown metric or no bracket covering the age
        ValidationError: Unrecognized sex or age
    """
    table = catalog.table(metric)
    if table is None:
        raise NotFoundError("metric", f"Unknown metric '{metric}'", details={"metric": metric})

    normalized_sex = normalize_sex(sex)
    if normalized_sex is None:
        raise DomainValidationError("sex", f"unknown value '{sex}'")
    whole_age = coerce_age(age)
    if whole_age is None:
        raise DomainValidationError("age", f"unknown value '{age}'")

    entry = table.entry_for(normalized_sex, whole_age)
    if entry is None:
        raise NotFoundError(
            "standards_row",
            f"No {metric} standards for {normalized_sex.value} aged {whole_age}",
            details={"metric": metric, "sex": normalized_sex.value, "age": whole_age},
        )

    row = StandardsRowResponse(
        metric=table.metric,
        orientation=table.orientation.value,
        unit=table.unit,
        sex=normalized_sex.value,
        age=whole_age,
        age_bracket=entry.bracket.label,
        values={str(p): v for p, v in entry.row.to_dict().items()},
    )
    return APIResponse(data=row, meta=ResponseMeta.for_request(request, standards_version=catalog.version))
