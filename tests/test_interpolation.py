"""Tests for percentile interpolation and Limit Break extrapolation."""
import math

import pytest

from powerscore.scoring import (
    Orientation,
    StandardsRow,
    score_decreasing,
    score_from_standard,
    score_increasing,
)


class TestScoreIncreasing:
    """Test "more is better" ladders."""

    def test_boundaries_are_exact(self, increasing_row):
        """The 0th, 50th and 100th percentile values score exactly 0, 50 and 100."""
        assert score_increasing(increasing_row[0], increasing_row) == 0
        assert score_increasing(increasing_row[50], increasing_row) == 50
        assert score_increasing(increasing_row[100], increasing_row) == 100

    def test_every_decile_maps_to_its_percentile(self, increasing_row):
        for percentile in range(10, 101, 10):
            assert score_increasing(increasing_row[percentile], increasing_row) == percentile

    def test_linear_between_deciles(self, increasing_row):
        """43 cm sits halfway between the 40th (41) and 50th (45) percentiles."""
        assert score_increasing(43, increasing_row) == 45.0

    def test_below_floor_scores_zero(self, increasing_row):
        assert score_increasing(10, increasing_row) == 0

    @pytest.mark.parametrize("value", [0, -5, None, math.nan, math.inf, "45"])
    def test_invalid_values_score_zero(self, increasing_row, value):
        assert score_increasing(value, increasing_row) == 0

    def test_limit_break_uses_last_decile_slope(self, increasing_row):
        """Last decile spans 8 cm, so each cm above 72 is worth 1.25 points."""
        assert score_increasing(80, increasing_row) == 110.0

    def test_damping_above_120(self, increasing_row):
        """135 raw points are damped to 120 + 15 * 0.5."""
        assert score_increasing(100, increasing_row) == 127.5

    def test_flat_last_decile_stays_at_100(self):
        row = StandardsRow.from_values([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 10])
        assert score_increasing(15, row) == 100.0

    def test_monotonic(self, increasing_row):
        values = [v / 2 for v in range(20, 220)]
        scores = [score_increasing(v, increasing_row) for v in values]
        assert scores == sorted(scores)

    def test_idempotent(self, increasing_row):
        assert score_increasing(51.3, increasing_row) == score_increasing(51.3, increasing_row)


class TestScoreDecreasing:
    """Test "less is better" ladders (sprint times)."""

    def test_boundaries_are_exact(self, decreasing_row):
        assert score_decreasing(decreasing_row[0], decreasing_row) == 0
        assert score_decreasing(decreasing_row[50], decreasing_row) == 50
        assert score_decreasing(decreasing_row[100], decreasing_row) == 100

    def test_slower_than_floor_scores_zero(self, decreasing_row):
        assert score_decreasing(6.5, decreasing_row) == 0

    def test_bonus_per_unit_faster(self, decreasing_row):
        """0.1 s faster than the 100th percentile earns 2 points."""
        assert score_decreasing(4.00, decreasing_row) == pytest.approx(102.0)

    def test_bonus_is_not_damped(self, decreasing_row):
        """1.1 s faster earns 22 points, kept in full above 120."""
        assert score_decreasing(3.00, decreasing_row) == pytest.approx(122.0)
        assert score_decreasing(2.00, decreasing_row) == pytest.approx(142.0)

    def test_monotonic(self, decreasing_row):
        times = [t / 100 for t in range(300, 700)]
        scores = [score_decreasing(t, decreasing_row) for t in times]
        assert scores == sorted(scores, reverse=True)


class TestScoreFromStandard:
    """Test orientation dispatch."""

    def test_dispatch(self, increasing_row, decreasing_row):
        assert score_from_standard(43, increasing_row, Orientation.INCREASING) == 45.0
        assert score_from_standard(4.10, decreasing_row, Orientation.DECREASING) == 100.0


class TestPackagedStandards:
    """Boundary exactness on every row of the packaged standards."""

    @pytest.mark.parametrize("percentile", [0, 50, 100])
    def test_every_row_hits_its_boundaries(self, catalog, percentile):
        misses = []
        for table in catalog.tables.values():
            for sex, entries in table.rows.items():
                for entry in entries:
                    score = score_from_standard(entry.row[percentile], entry.row, table.orientation)
                    if score != percentile:
                        misses.append((table.metric, sex.value, entry.bracket.label, score))
        assert misses == []
