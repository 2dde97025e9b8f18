"""Mapping between engine score names and stored score-document fields.

Stored user documents keep one number per assessment under historical field
names. The FFMI score in particular lives under ``bodyFat``. All renaming
happens here so scorers and the HTTP layer only ever use engine names.
"""

from __future__ import annotations

import math
from typing import Any, Mapping

from .base import round_half_up
from .constants import CappingLimits

# engine name -> stored field
SCORE_FIELDS: dict[str, str] = {
    "strength": "strength",
    "power": "explosivePower",
    "cardio": "cardio",
    "muscle": "muscleMass",
    "ffmi_score": "bodyFat",
}

# older documents used these names for explosivePower
LEGACY_ALIASES: dict[str, str] = {
    "explosive": "explosivePower",
    "power": "explosivePower",
}


def _clamp_score(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        return None
    bounded = min(CappingLimits.VERIFIED_CEILING, max(CappingLimits.FLOOR, float(value)))
    return round_half_up(bounded)


def to_score_document(
    scores: Mapping[str, float | None],
    existing: Mapping[str, Any] | None = None,
) -> dict[str, float]:
    """Build the stored scores mapping from engine-named scores.

    Missing or non-numeric values are dropped. Kept values are clamped to
    [0, 200] and rounded to 2 decimals, then merged over ``existing``.
    """
    document: dict[str, Any] = dict(existing or {})
    for name, value in scores.items():
        field = SCORE_FIELDS.get(name)
        if field is None:
            continue
        clamped = _clamp_score(value)
        if clamped is not None:
            document[field] = clamped
    return document


def from_score_document(document: Mapping[str, Any] | None) -> dict[str, float]:
    """Read a stored scores mapping back into engine names.

    ``explosive`` and ``power`` are accepted for ``explosivePower``; the
    canonical field wins when both are present.
    """
    if not document:
        return {}

    source: dict[str, Any] = {}
    for alias, field in LEGACY_ALIASES.items():
        if alias in document:
            source[field] = document[alias]
    source.update({k: v for k, v in document.items() if k in SCORE_FIELDS.values()})

    scores: dict[str, float] = {}
    for name, field in SCORE_FIELDS.items():
        clamped = _clamp_score(source.get(field))
        if clamped is not None:
            scores[name] = clamped
    return scores
