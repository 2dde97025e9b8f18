"""Power scorer: vertical jump, standing long jump and 30 m sprint."""

from __future__ import annotations

from dataclasses import dataclass

from powerscore.core.logging import get_logger

from .base import BaseScoreResult, Sex, is_positive_number, mean_of
from .interpolation import score_from_standard
from .standards import Metric, StandardsCatalog, get_standards

logger = get_logger(__name__)

POWER_METRICS: tuple[Metric, ...] = (
    Metric.VERTICAL_JUMP,
    Metric.STANDING_LONG_JUMP,
    Metric.SPRINT,
)


@dataclass(frozen=True)
class PowerResult(BaseScoreResult):
    """Composite power score (mean of the entered tests)."""

    vertical_jump_score: float | None = None
    standing_long_jump_score: float | None = None
    sprint_score: float | None = None


def score_power(
    vertical_jump: float | None = None,
    standing_long_jump: float | None = None,
    sprint: float | None = None,
    sex: Sex | str | None = None,
    age: float | None = None,
    catalog: StandardsCatalog | None = None,
) -> PowerResult:
    """Score the entered power tests.

    Args:
        vertical_jump: Jump height in cm.
        standing_long_jump: Jump distance in cm.
        sprint: 30 m time in seconds (lower is better).

    Returns:
        ``PowerResult`` with a score per entered test. The composite is the
        mean of those scores, or None when nothing was entered or no bracket
        covers the user. Zero, negative or non-finite values count as not
        entered.
    """
    catalog = catalog or get_standards()
    inputs = dict(zip(POWER_METRICS, (vertical_jump, standing_long_jump, sprint)))

    scores: dict[Metric, float | None] = {}
    for metric, value in inputs.items():
        if not is_positive_number(value):
            scores[metric] = None
            continue
        table = catalog.table(metric)
        entry = table.entry_for(sex, age) if table is not None else None
        if entry is None:
            logger.warning("power_row_missing", metric=metric.value, sex=str(sex), age=age)
            return PowerResult(raw_score=None)
        scores[metric] = score_from_standard(value, entry.row, table.orientation)

    composite = mean_of(scores.values())
    if composite is not None:
        logger.debug("power_scored", score=composite)

    return PowerResult(
        raw_score=composite,
        vertical_jump_score=scores[Metric.VERTICAL_JUMP],
        standing_long_jump_score=scores[Metric.STANDING_LONG_JUMP],
        sprint_score=scores[Metric.SPRINT],
    )
