"""Tests for input coercion and measurement validation."""
import pytest

from powerscore.scoring import (
    Sex,
    coerce_age,
    coerce_number,
    normalize_sex,
    validate_measurement,
    validate_strength_reps,
)
from powerscore.scoring.validators import ValidationResult, check_bounds, describe_issues


class TestCoerceNumber:
    """Test numeric coercion of user input."""

    @pytest.mark.parametrize(
        "value,expected",
        [(5, 5.0), (82.5, 82.5), (" 82.5 ", 82.5), ("100", 100.0), ("-3", -3.0)],
    )
    def test_numbers(self, value, expected):
        assert coerce_number(value) == expected

    @pytest.mark.parametrize("value", [None, "", "   ", "abc", "nan", "inf", True, [1], float("nan")])
    def test_rejects(self, value):
        assert coerce_number(value) is None


class TestCoerceAge:
    """Test age coercion."""

    def test_truncates(self):
        assert coerce_age("25.9") == 25
        assert coerce_age(40) == 40

    @pytest.mark.parametrize("value", ["0", -1, "", None, "old"])
    def test_rejects(self, value):
        assert coerce_age(value) is None


class TestNormalizeSex:
    """Test sex label normalization."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("male", Sex.MALE),
            ("Male", Sex.MALE),
            (" M ", Sex.MALE),
            ("男性", Sex.MALE),
            ("female", Sex.FEMALE),
            ("F", Sex.FEMALE),
            ("女", Sex.FEMALE),
            (Sex.FEMALE, Sex.FEMALE),
        ],
    )
    def test_known(self, value, expected):
        assert normalize_sex(value) is expected

    @pytest.mark.parametrize("value", [None, "", "x", "other", 1])
    def test_unknown(self, value):
        assert normalize_sex(value) is None


class TestValidateMeasurement:
    """Test plausible measurement ranges."""

    @pytest.mark.parametrize(
        "kind,value,expected",
        [
            ("weight", "80", 80.0),
            ("weight", 0.1, 0.1),
            ("weight", 1000, 1000.0),
            ("reps", 1, 1.0),
            ("distance", 0.01, 0.01),
            ("duration", 86400, 86400.0),
            ("height", 180, 180.0),
            ("age", 150, 150.0),
        ],
    )
    def test_valid(self, kind, value, expected):
        result = validate_measurement(kind, value)
        assert result.is_valid
        assert result.value == expected

    @pytest.mark.parametrize(
        "kind,value",
        [
            ("weight", 0.05),
            ("weight", 1001),
            ("reps", 0),
            ("reps", 1001),
            ("distance", 1001),
            ("duration", 0),
            ("duration", 86401),
            ("height", 49),
            ("age", 151),
            ("weight", "heavy"),
            ("weight", ""),
        ],
    )
    def test_invalid(self, kind, value):
        result = validate_measurement(kind, value)
        assert not result.is_valid
        assert result.value is None
        assert result.issues[0].field == kind

    def test_unknown_kind(self):
        result = validate_measurement("speed", 5)
        assert not result.is_valid
        assert "unknown measurement kind" in result.issues[0].message

    def test_strength_reps_limited_to_ten(self):
        assert validate_strength_reps(10).is_valid
        assert not validate_strength_reps(11).is_valid
        assert not validate_strength_reps(0).is_valid


class TestValidationHelpers:
    """Test result helpers."""

    def test_check_bounds(self):
        assert check_bounds(5, 0, 10).is_valid
        assert check_bounds(10, 0, 10).is_valid
        result = check_bounds(15, 0, 10, name="reps")
        assert result.issues[0].limit == "<=10"
        assert check_bounds(-1, 0, 10).issues[0].limit == ">=0"

    def test_describe_issues(self):
        message = describe_issues([check_bounds(15, 0, 10, name="reps"), ValidationResult.accept(3)])
        assert message.startswith("Invalid input: ")
        assert "reps=15 rejected: above maximum 10" in message

    def test_describe_issues_all_valid(self):
        assert describe_issues([ValidationResult.accept(1)]) == ""
