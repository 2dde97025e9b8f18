"""One-rep-max estimation.

Three independent prediction formulas over ``(weight, reps)`` plus their mean.
A single rep is its own 1RM under every formula, and non-positive input gives
0. The inverse direction (``weight_for_reps``) answers "what should I load for
N reps given this 1RM".
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from .base import is_positive_number

BRZYCKI_REP_LIMIT = 37  # denominator of the Brzycki formula reaches zero here


class OneRepMaxFormula(str, Enum):
    EPLEY = "epley"
    BRZYCKI = "brzycki"
    LOMBARDI = "lombardi"
    AVERAGE = "average"


def _valid(weight: float, reps: float) -> bool:
    return is_positive_number(weight) and is_positive_number(reps)


def epley(weight: float, reps: float) -> float:
    """``weight * (1 + reps / 30)``"""
    if not _valid(weight, reps):
        return 0.0
    if reps == 1:
        return float(weight)
    return weight * (1 + reps / 30)


def brzycki(weight: float, reps: float) -> float:
    """``weight * 36 / (37 - reps)``; returns ``weight`` from 37 reps up."""
    if not _valid(weight, reps):
        return 0.0
    if reps == 1 or reps >= BRZYCKI_REP_LIMIT:
        return float(weight)
    return weight * (36 / (BRZYCKI_REP_LIMIT - reps))


def lombardi(weight: float, reps: float) -> float:
    """``weight * reps ** 0.1``"""
    if not _valid(weight, reps):
        return 0.0
    if reps == 1:
        return float(weight)
    return weight * reps ** 0.1


def average(weight: float, reps: float) -> float:
    """Mean of the Epley, Brzycki and Lombardi estimates."""
    if not _valid(weight, reps):
        return 0.0
    if reps == 1:
        return float(weight)
    return (epley(weight, reps) + brzycki(weight, reps) + lombardi(weight, reps)) / 3


def formula_function(formula: OneRepMaxFormula) -> Callable[[float, float], float]:
    match formula:
        case OneRepMaxFormula.EPLEY:
            return epley
        case OneRepMaxFormula.BRZYCKI:
            return brzycki
        case OneRepMaxFormula.LOMBARDI:
            return lombardi
        case OneRepMaxFormula.AVERAGE:
            return average


def estimate_one_rep_max(
    weight: float,
    reps: float,
    formula: OneRepMaxFormula = OneRepMaxFormula.AVERAGE,
) -> float:
    """Estimate a 1RM with the chosen formula (average of three by default)."""
    return formula_function(formula)(weight, reps)


def weight_for_reps(
    one_rep_max: float,
    target_reps: float,
    formula: OneRepMaxFormula = OneRepMaxFormula.AVERAGE,
) -> float:
    """Load expected to allow exactly ``target_reps`` given a 1RM.

    Inverts the estimation formulas; never negative.
    """
    if not _valid(one_rep_max, target_reps):
        return 0.0
    if target_reps == 1:
        return float(one_rep_max)

    reps = max(1.0, float(target_reps))
    by_epley = one_rep_max / (1 + reps / 30)
    by_brzycki = one_rep_max * ((BRZYCKI_REP_LIMIT - reps) / 36)
    by_lombardi = one_rep_max / reps ** 0.1

    match formula:
        case OneRepMaxFormula.EPLEY:
            estimate = by_epley
        case OneRepMaxFormula.BRZYCKI:
            estimate = by_brzycki
        case OneRepMaxFormula.LOMBARDI:
            estimate = by_lombardi
        case OneRepMaxFormula.AVERAGE:
            estimate = (by_epley + by_brzycki + by_lombardi) / 3

    return max(0.0, estimate)
