"""
Unit tests for the record adapters.

Adapters are the only place that knows about storage-layer shapes; these
tests pin the fallback chains applied while extracting engine metrics.
"""

from types import SimpleNamespace

import pytest

from admitscope.domain.records import AwardRecord, CompetitionRecord, ProfileRecord
from admitscope.domain.scoring.adapters import (
    award_tier_score,
    build_historical_distribution,
    coerce_record,
    extract_applicant_metrics,
    extract_institution_metrics,
)
from admitscope.domain.scoring.interfaces import ActivityDetail
from admitscope.infrastructure.exceptions import RecordValidationError, ValidationError


# ============== Applicant Extraction ==============

class TestExtractApplicantMetrics:

    def test_scores_use_first_of_each_type(self, profile_record):
        metrics = extract_applicant_metrics(profile_record)
        assert metrics.gpa == 3.8
        assert metrics.gpa_scale == 4.0
        assert metrics.sat_score == 1500, "First SAT entry should win"
        assert metrics.act_score is None
        assert metrics.toefl_score == 108

    def test_counts(self, profile_record):
        metrics = extract_applicant_metrics(profile_record)
        assert metrics.activity_count == 2
        assert metrics.award_count == 3
        assert metrics.national_award_count == 1
        assert metrics.international_award_count == 0

    def test_activity_details_skip_incomplete(self, profile_record):
        metrics = extract_applicant_metrics(profile_record)
        assert metrics.activity_details == (
            ActivityDetail(category="STEM", role="Captain", total_hours=300.0),
        )

    def test_award_tier_scores(self, profile_record):
        metrics = extract_applicant_metrics(profile_record)
        assert metrics.award_tier_scores == (15.0, 8.0, 3.0)

    def test_falsy_gpa_and_scale_become_absent(self):
        metrics = extract_applicant_metrics({"gpa": 0, "gpaScale": 0})
        assert metrics.gpa is None
        assert metrics.gpa_scale is None

    def test_empty_profile_uses_count_paths(self):
        metrics = extract_applicant_metrics({"testScores": None, "activities": [], "awards": []})
        assert metrics.activity_details is None
        assert metrics.award_tier_scores is None
        assert metrics.activity_count == 0

    def test_snake_case_keys_accepted(self):
        metrics = extract_applicant_metrics({"gpa": 3.2, "gpa_scale": 4.0})
        assert metrics.gpa_scale == 4.0

    def test_orm_style_rows(self):
        row = SimpleNamespace(
            id=1,
            user_id=42,
            gpa=88,
            gpa_scale=100,
            test_scores=[SimpleNamespace(type="ACT", score=33)],
            activities=[SimpleNamespace(
                name="Debate", category="SPEECH", role="Chair",
                hours_per_week=5, weeks_per_year=40,
            )],
            awards=[SimpleNamespace(name="Regional", level="REGIONAL", competition=None)],
        )
        metrics = extract_applicant_metrics(row)
        assert metrics.act_score == 33
        assert metrics.activity_details[0].total_hours == 200.0
        assert metrics.award_tier_scores == (5.0,)

    def test_null_test_score_is_absent(self):
        metrics = extract_applicant_metrics({"testScores": [
            {"type": "SAT", "score": None},
            {"type": "SAT", "score": 1450},
            {"type": "TOEFL", "score": None},
        ]})
        assert metrics.sat_score == 1450, "Null score should not shadow a later entry"
        assert metrics.toefl_score is None

    def test_negative_hours_count_as_zero(self):
        metrics = extract_applicant_metrics({"activities": [
            {"category": "STEM", "role": "Member", "hoursPerWeek": -5, "weeksPerYear": 40},
        ]})
        assert metrics.activity_details[0].total_hours == 0.0

    def test_invalid_profile_raises(self):
        with pytest.raises(RecordValidationError) as exc_info:
            extract_applicant_metrics({"gpa": "excellent"})

        error = exc_info.value
        assert isinstance(error, ValidationError)
        assert error.details["record_type"] == "ProfileRecord"
        assert error.details["errors"][0]["loc"] == ["gpa"]
        assert error.to_dict()["error"] == "RecordValidationError"


class TestAwardTierScore:

    def test_known_competition_tier_wins(self):
        award = AwardRecord(level="SCHOOL", competition=CompetitionRecord(tier=5))
        assert award_tier_score(award) == 25.0

    def test_unknown_tier_falls_back_to_level(self):
        award = AwardRecord(level="INTERNATIONAL", competition=CompetitionRecord(tier=9))
        assert award_tier_score(award) == 20.0

    def test_unknown_level_gets_default(self):
        assert award_tier_score(AwardRecord(level="GALACTIC")) == 3.0
        assert award_tier_score(AwardRecord()) == 3.0


# ============== Institution Extraction ==============

class TestExtractInstitutionMetrics:

    def test_fields(self, school_records):
        metrics = extract_institution_metrics(school_records[0])
        assert metrics.acceptance_rate == 5
        assert (metrics.sat_avg, metrics.sat25, metrics.sat75) == (1540, 1500, 1570)
        assert metrics.rank == 3
        assert metrics.act_avg is None

    def test_zero_acceptance_rate_is_absent(self):
        assert extract_institution_metrics({"acceptanceRate": 0}).acceptance_rate is None

    def test_zero_sat_average_is_kept(self):
        assert extract_institution_metrics({"satAvg": 0}).sat_avg == 0


# ============== Historical Distribution ==============

class TestBuildHistoricalDistribution:

    @pytest.fixture
    def cases(self):
        return [
            {"schoolId": "s-1", "result": "ADMITTED", "satRange": "1500-1550",
             "gpaRange": "3.8", "toeflRange": 110},
            {"schoolId": "s-1", "result": "admitted", "satRange": 1480, "gpaRange": "3.6-4.0"},
            {"schoolId": "s-1", "result": "REJECTED", "satRange": 1600},
            {"schoolId": "s-1", "result": "ADMITTED", "satRange": "high", "gpaRange": "inf"},
            {"schoolId": "s-1", "result": None, "satRange": 1300},
        ]

    def test_only_admitted_cases(self, cases):
        distribution = build_historical_distribution(cases)
        assert distribution.sample_count == 3

    def test_values_parsed_and_sorted(self, cases):
        distribution = build_historical_distribution(cases)
        assert distribution.sat_values == (1480.0, 1525.0)
        assert distribution.gpa_values == pytest.approx((3.8, 3.8))
        assert distribution.toefl_values == (110.0,)

    def test_empty(self):
        distribution = build_historical_distribution([])
        assert distribution.sample_count == 0
        assert distribution.sat_values == ()


class TestCoerceRecord:

    def test_model_instance_passes_through(self):
        record = ProfileRecord(gpa=3.5)
        assert coerce_record(record, ProfileRecord) is record

    def test_user_id_coerced_to_string(self):
        assert coerce_record({"userId": 7}, ProfileRecord).user_id == "7"
