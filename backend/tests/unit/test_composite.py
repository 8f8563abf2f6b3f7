"""
Unit tests for the composite scorer.
"""

import pytest

from admitscope.domain.scoring import (
    SCORING_WEIGHTS,
    CompositeScorer,
    calculate_overall_score,
    calculate_score_breakdown,
)
from admitscope.domain.scoring.constants import ScoringConfig, ScoringWeights
from admitscope.domain.scoring.interfaces import ApplicantMetrics, InstitutionMetrics


@pytest.fixture
def scorer():
    return CompositeScorer()


class TestWeights:

    def test_weights_sum_to_exactly_one(self):
        total = SCORING_WEIGHTS.academic + SCORING_WEIGHTS.activity + SCORING_WEIGHTS.award
        assert total == 1.0

    @pytest.mark.parametrize("weights", [(0.9, 0.9, 0.9), (0.5, 0.3, 0.1), (1.2, -0.1, -0.1)])
    def test_invalid_weights_rejected(self, weights):
        with pytest.raises(ValueError):
            ScoringConfig(weights=ScoringWeights(*weights))

    def test_custom_weights_accepted(self, empty_applicant):
        scorer = CompositeScorer(ScoringConfig(weights=ScoringWeights(0.6, 0.2, 0.2)))
        assert scorer.overall_score(empty_applicant) == pytest.approx(40.0)

    def test_as_dict(self):
        assert SCORING_WEIGHTS.as_dict() == {"academic": 0.5, "activity": 0.3, "award": 0.2}


class TestScoreBreakdown:

    def test_empty_applicant_defaults(self, empty_applicant):
        breakdown = calculate_score_breakdown(empty_applicant)
        assert breakdown.academic == 50.0
        assert breakdown.activity == 30.0
        assert breakdown.award == 20.0
        assert breakdown.overall == pytest.approx(38.0)

    def test_average_applicant_with_no_school(self, average_applicant):
        breakdown = calculate_score_breakdown(average_applicant)
        assert (breakdown.academic, breakdown.activity, breakdown.award) == (
            pytest.approx(55.0), 30.0, 20.0
        )
        assert breakdown.overall == pytest.approx(40.5)

    def test_overall_is_exact_weighted_sum(self, scorer, strong_applicant, mit):
        b = scorer.score_breakdown(strong_applicant, mit)
        expected = (
            b.academic * SCORING_WEIGHTS.academic
            + b.activity * SCORING_WEIGHTS.activity
            + b.award * SCORING_WEIGHTS.award
        )
        assert b.overall == expected

    def test_strong_applicant_against_mit(self, scorer, strong_applicant, mit):
        b = scorer.score_breakdown(strong_applicant, mit)
        assert b.academic == pytest.approx(61.5, abs=1e-4)
        assert b.activity == 54.0
        assert b.award == 40.0

    @pytest.mark.parametrize("applicant", [
        ApplicantMetrics(),
        ApplicantMetrics(gpa=4.0, sat_score=1600, toefl_score=120, activity_count=50,
                         award_count=50, national_award_count=25, international_award_count=25),
        ApplicantMetrics(gpa=0.0, sat_score=400, toefl_score=0),
        ApplicantMetrics(gpa=95, gpa_scale=100, act_score=12),
    ])
    def test_all_outputs_within_bounds(self, scorer, applicant, mit):
        for institution in (None, mit, InstitutionMetrics(sat_avg=0)):
            b = scorer.score_breakdown(applicant, institution)
            for value in (b.academic, b.activity, b.award, b.overall):
                assert 0.0 <= value <= 100.0, f"Out of range: {b}"

    def test_idempotent(self, scorer, strong_applicant, mit, sat_history):
        first = scorer.score_breakdown(strong_applicant, mit, sat_history)
        second = scorer.score_breakdown(strong_applicant, mit, sat_history)
        assert first == second

    def test_overall_helper_matches_breakdown(self, strong_applicant, mit):
        assert calculate_overall_score(strong_applicant, mit) == (
            calculate_score_breakdown(strong_applicant, mit).overall
        )

    def test_to_dict_rounds(self, strong_applicant, mit):
        data = calculate_score_breakdown(strong_applicant, mit).to_dict()
        assert set(data) == {"academic", "activity", "award", "overall"}
        assert data["activity"] == 54.0
