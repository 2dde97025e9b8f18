"""Trust/capping protocol.

Scorers always return the uncapped raw score. This module is the single place
that decides what gets persisted:

- Unverified accounts store at most 100 points.
- Verified accounts store up to 200 points (the document sanity bound).
- ``is_limit_broken`` reports a raw score above 100 regardless of trust, so a
  display can show the "Limit Break" badge even when the stored value is capped.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from powerscore.core.logging import get_logger

from .base import BaseScoreResult
from .constants import CappingLimits, ScoreLevels

logger = get_logger(__name__)


@dataclass(frozen=True)
class TrustState:
    """Account verification flags as read from the auth provider."""

    email_verified: bool = False
    is_verified: bool = False
    is_anonymous: bool = False

    @property
    def verified(self) -> bool:
        return (self.email_verified or self.is_verified) and not self.is_anonymous


@dataclass(frozen=True)
class Submission:
    raw_score: float
    score_to_save: float
    is_capped: bool
    is_limit_broken: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "raw_score": self.raw_score,
            "score_to_save": self.score_to_save,
            "is_capped": self.is_capped,
            "is_limit_broken": self.is_limit_broken,
        }


def _clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


def cap_for_submission(raw_score: Any, is_verified: bool) -> Submission:
    """Derive the score to persist from a raw score and the trust flag.

    Non-numeric or non-finite raw scores are treated as 0.
    """
    if isinstance(raw_score, bool) or not isinstance(raw_score, (int, float)) or not math.isfinite(raw_score):
        safe = 0.0
    else:
        safe = float(raw_score)

    ceiling = CappingLimits.VERIFIED_CEILING if is_verified else CappingLimits.UNVERIFIED_CEILING
    return Submission(
        raw_score=safe,
        score_to_save=_clamp(safe, CappingLimits.FLOOR, ceiling),
        is_capped=not is_verified and safe > CappingLimits.UNVERIFIED_CEILING,
        is_limit_broken=safe > CappingLimits.LIMIT_BREAK_THRESHOLD,
    )


def level_for_score(score: float | None) -> str:
    """Level label shown next to a score (``legend`` at 100 and above)."""
    value = score if isinstance(score, (int, float)) and math.isfinite(score) else 0.0
    for threshold, label in ScoreLevels.LEVELS:
        if value >= threshold:
            return label
    return ScoreLevels.LOWEST


@dataclass(frozen=True)
class AssessmentOutcome:
    """A scorer result paired with the submission derived from it."""

    result: BaseScoreResult
    submission: Submission
    level: str

    @property
    def raw_score(self) -> float | None:
        return self.result.raw_score

    def to_dict(self) -> dict[str, Any]:
        out = self.result.to_dict()
        out.update(
            score_to_save=self.submission.score_to_save,
            is_capped=self.submission.is_capped,
            is_limit_broken=self.submission.is_limit_broken,
            level=self.level,
        )
        return out


def submit(result: BaseScoreResult, trust: TrustState | bool) -> AssessmentOutcome:
    """Apply the capping protocol to any scorer result.

    ``raw_score`` keeps the scorer's value (None when it could not score);
    the submission treats a missing score as 0.
    """
    verified = trust.verified if isinstance(trust, TrustState) else bool(trust)
    submission = cap_for_submission(result.raw_score, verified)
    if submission.is_capped:
        logger.debug(
            "score_capped",
            raw_score=submission.raw_score,
            score_to_save=submission.score_to_save,
        )
    return AssessmentOutcome(
        result=result,
        submission=submission,
        level=level_for_score(result.raw_score),
    )
