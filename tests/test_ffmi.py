"""Tests for the FFMI scorer."""
import math

import pytest

from powerscore.scoring import calculate_ffmi, ffmi_category, ffmi_score, score_ffmi


class TestCalculateFFMI:
    """Test the FFMI formula."""

    def test_worked_example(self):
        assert calculate_ffmi(180, 80, 15) == pytest.approx(20.99, abs=0.005)

    def test_tall_adjustment(self):
        """Above 1.80 m, 6.0 per meter over 1.80 is added."""
        base = 90 * 0.9 / 1.9 ** 2
        assert calculate_ffmi(190, 90, 10) == pytest.approx(base + 0.6)

    def test_zero_body_fat_allowed(self):
        assert calculate_ffmi(175, 70, 0) == pytest.approx(70 / 1.75 ** 2)

    @pytest.mark.parametrize(
        "height,weight,bf",
        [
            (0, 80, 15),
            (180, 0, 15),
            (180, 80, None),
            (180, 80, math.nan),
            (180, 80, 100),
            (180, 80, -1),
        ],
    )
    def test_invalid(self, height, weight, bf):
        assert calculate_ffmi(height, weight, bf) is None


class TestFFMIScore:
    """Test the three score segments."""

    def test_segments_male(self):
        assert ffmi_score("male", 18.5) == 60.0
        assert ffmi_score("male", 25) == 100.0
        assert ffmi_score("male", 26) == 105.0
        assert ffmi_score("male", 9.25) == 30.0

    def test_segments_female(self):
        assert ffmi_score("female", 15.5) == 60.0
        assert ffmi_score("female", 21) == 100.0
        assert ffmi_score("female", 18.25) == 80.0

    def test_invalid(self):
        assert ffmi_score("male", 0) == 0.0
        assert ffmi_score("male", None) == 0.0
        assert ffmi_score("other", 20) == 0.0


class TestFFMICategory:
    """Test category buckets."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (17.9, "lean"),
            (18.0, "average"),
            (21.0, "athletic"),
            (22.5, "elite"),
            (25.0, "extreme"),
            (27.0, "superhuman"),
            (30.0, "monster"),
        ],
    )
    def test_male(self, value, expected):
        assert ffmi_category("male", value) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [(14.0, "lean"), (16.0, "average"), (18.0, "athletic"), (20.0, "elite"), (25.0, "extreme")],
    )
    def test_female(self, value, expected):
        assert ffmi_category("female", value) == expected

    def test_invalid(self):
        assert ffmi_category("male", 0) is None


class TestScoreFFMI:
    """Test the combined FFMI result."""

    def test_result_fields(self):
        result = score_ffmi(180, 80, 15, "male")

        assert result.ffmi == 20.99
        assert result.category == "athletic"
        assert result.raw_score == pytest.approx(75.31, abs=0.01)

    def test_invalid_input(self):
        result = score_ffmi(180, 80, 100, "male")
        assert result.raw_score is None
        assert result.category is None

    def test_unknown_sex(self):
        assert score_ffmi(180, 80, 15, None).raw_score is None
