"""Tests for the trust/capping protocol."""
import math

import pytest

from powerscore.scoring import (
    CardioResult,
    TrustState,
    cap_for_submission,
    level_for_score,
    submit,
)


class TestTrustState:
    """Test verification derivation."""

    def test_verified_by_either_flag(self):
        assert TrustState(is_verified=True).verified
        assert TrustState(email_verified=True).verified

    def test_anonymous_never_verified(self):
        assert not TrustState(is_verified=True, email_verified=True, is_anonymous=True).verified

    def test_default_unverified(self):
        assert not TrustState().verified


class TestCapForSubmission:
    """Test the score persisted for each trust level."""

    def test_worked_example(self):
        submission = cap_for_submission(145, False)

        assert submission.score_to_save == 100
        assert submission.is_capped is True
        assert submission.is_limit_broken is True
        assert submission.raw_score == 145

    def test_verified_keeps_limit_break(self):
        submission = cap_for_submission(145, True)

        assert submission.score_to_save == 145
        assert submission.is_capped is False
        assert submission.is_limit_broken is True

    def test_verified_ceiling(self):
        assert cap_for_submission(250, True).score_to_save == 200

    def test_below_100_untouched(self):
        submission = cap_for_submission(87.5, False)
        assert submission.score_to_save == 87.5
        assert not submission.is_capped
        assert not submission.is_limit_broken

    def test_exactly_100_is_not_limit_break(self):
        submission = cap_for_submission(100, False)
        assert not submission.is_capped
        assert not submission.is_limit_broken

    def test_negative_floored(self):
        assert cap_for_submission(-5, False).score_to_save == 0

    @pytest.mark.parametrize("raw", [None, math.nan, math.inf, "120", True])
    def test_non_numeric_treated_as_zero(self, raw):
        submission = cap_for_submission(raw, True)
        assert submission.raw_score == 0
        assert submission.score_to_save == 0

    @pytest.mark.parametrize("raw", [0, 50, 99.99, 100, 100.01, 150, 199, 200, 350])
    def test_capping_invariant(self, raw):
        unverified = cap_for_submission(raw, False)
        verified = cap_for_submission(raw, True)
        assert 0 <= unverified.score_to_save <= 100
        assert 0 <= verified.score_to_save <= 200
        assert unverified.is_limit_broken == verified.is_limit_broken == (raw > 100)


class TestLevelForScore:
    """Test level labels."""

    @pytest.mark.parametrize(
        "score,level",
        [
            (120, "legend"),
            (100, "legend"),
            (95, "apex"),
            (85, "elite"),
            (60, "steel"),
            (45, "growth"),
            (10, "potential"),
            (None, "potential"),
        ],
    )
    def test_levels(self, score, level):
        assert level_for_score(score) == level


class TestSubmit:
    """Test pairing results with submissions."""

    def test_outcome_dict(self):
        outcome = submit(CardioResult(raw_score=116.0, cooper_score=116.0), TrustState())
        data = outcome.to_dict()

        assert data["raw_score"] == 116.0
        assert data["score_to_save"] == 100.0
        assert data["is_capped"] is True
        assert data["is_limit_broken"] is True
        assert data["level"] == "legend"
        assert data["cooper_score"] == 116.0

    def test_accepts_bool_trust(self):
        assert submit(CardioResult(raw_score=150.0), True).submission.score_to_save == 150.0

    def test_unscored_result(self):
        outcome = submit(CardioResult(raw_score=None), False)
        assert outcome.raw_score is None
        assert outcome.submission.score_to_save == 0
        assert outcome.level == "potential"
