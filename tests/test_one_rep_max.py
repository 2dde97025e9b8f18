"""Tests for one-rep-max estimation."""
import pytest

from powerscore.scoring import (
    OneRepMaxFormula,
    average,
    brzycki,
    epley,
    estimate_one_rep_max,
    lombardi,
    weight_for_reps,
)


class TestFormulas:
    """Test the individual 1RM formulas."""

    def test_epley(self):
        assert epley(100, 5) == pytest.approx(116.67, abs=0.01)

    def test_brzycki(self):
        assert brzycki(100, 5) == pytest.approx(112.5)

    def test_lombardi(self):
        assert lombardi(100, 5) == pytest.approx(100 * 5 ** 0.1)

    def test_average_is_mean_of_three(self):
        expected = (epley(100, 5) + brzycki(100, 5) + lombardi(100, 5)) / 3
        assert average(100, 5) == pytest.approx(expected)

    @pytest.mark.parametrize("formula", [epley, brzycki, lombardi, average])
    def test_single_rep_is_identity(self, formula):
        assert formula(142.5, 1) == 142.5

    @pytest.mark.parametrize("weight,reps", [(0, 5), (-10, 5), (100, 0), (100, -1), (None, 5)])
    def test_invalid_input_gives_zero(self, weight, reps):
        assert epley(weight, reps) == 0
        assert brzycki(weight, reps) == 0
        assert lombardi(weight, reps) == 0
        assert average(weight, reps) == 0

    def test_brzycki_at_rep_limit_returns_weight(self):
        assert brzycki(60, 37) == 60
        assert brzycki(60, 40) == 60


class TestEstimateOneRepMax:
    """Test formula selection."""

    def test_default_is_average(self):
        assert estimate_one_rep_max(100, 5) == pytest.approx(average(100, 5))

    @pytest.mark.parametrize(
        "formula,func",
        [
            (OneRepMaxFormula.EPLEY, epley),
            (OneRepMaxFormula.BRZYCKI, brzycki),
            (OneRepMaxFormula.LOMBARDI, lombardi),
        ],
    )
    def test_formula_dispatch(self, formula, func):
        assert estimate_one_rep_max(80, 8, formula) == pytest.approx(func(80, 8))


class TestWeightForReps:
    """Test the inverse direction."""

    def test_inverts_brzycki(self):
        assert weight_for_reps(112.5, 5, OneRepMaxFormula.BRZYCKI) == pytest.approx(100.0)

    def test_inverts_epley(self):
        assert weight_for_reps(epley(100, 5), 5, OneRepMaxFormula.EPLEY) == pytest.approx(100.0)

    def test_single_rep(self):
        assert weight_for_reps(150, 1) == 150

    def test_never_negative(self):
        assert weight_for_reps(100, 50, OneRepMaxFormula.BRZYCKI) == 0.0

    def test_invalid(self):
        assert weight_for_reps(0, 5) == 0.0
