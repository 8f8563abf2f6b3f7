"""
Test configuration and fixtures for AdmitScope.

Provides shared applicant, institution and record fixtures for unit tests.
"""

import pytest

from admitscope.domain.scoring.interfaces import (
    ActivityDetail,
    ApplicantMetrics,
    HistoricalDistribution,
    InstitutionMetrics,
)


# =============================================================================
# Applicant Fixtures
# =============================================================================

@pytest.fixture
def empty_applicant():
    """Applicant with no data at all."""
    return ApplicantMetrics()


@pytest.fixture
def strong_applicant():
    """3.9 GPA, 1550 SAT, TOEFL 110, detailed activities and tiered awards."""
    return ApplicantMetrics(
        gpa=3.9,
        gpa_scale=4.0,
        sat_score=1550,
        toefl_score=110,
        activity_count=3,
        award_count=2,
        national_award_count=1,
        award_tier_scores=(25.0, 15.0),
        activity_details=(
            ActivityDetail(category="STEM", role="President", total_hours=300),
            ActivityDetail(category="ARTS", role="Member", total_hours=80),
            ActivityDetail(category="SPORTS", role="Team Captain", total_hours=250),
        ),
    )


@pytest.fixture
def average_applicant():
    """3.5 GPA on the 4.0 scale and nothing else."""
    return ApplicantMetrics(gpa=3.5, gpa_scale=4.0)


# =============================================================================
# Institution Fixtures
# =============================================================================

@pytest.fixture
def mit():
    """Highly selective institution with a published SAT band."""
    return InstitutionMetrics(
        acceptance_rate=4.0,
        sat_avg=1550,
        sat25=1520,
        sat75=1580,
        act25=34,
        act75=36,
        rank=2,
    )


@pytest.fixture
def state_university():
    """Broad-access institution with an SAT average only."""
    return InstitutionMetrics(acceptance_rate=80.0, sat_avg=1250, rank=120)


@pytest.fixture
def sat_history():
    """Thirty admitted SAT scores from 1400 to 1545."""
    values = tuple(float(1400 + 5 * i) for i in range(30))
    return HistoricalDistribution(sample_count=30, sat_values=values)


# =============================================================================
# Record Fixtures (storage-layer shapes)
# =============================================================================

@pytest.fixture
def profile_record():
    """Profile as exported by the storage layer (camelCase keys)."""
    return {
        "id": "p-1",
        "userId": "user-1",
        "gpa": 3.8,
        "gpaScale": 4.0,
        "testScores": [
            {"type": "SAT", "score": 1500},
            {"type": "sat", "score": 1400},
            {"type": "TOEFL", "score": 108},
        ],
        "activities": [
            {
                "name": "Robotics",
                "category": "STEM",
                "role": "Captain",
                "hoursPerWeek": 10,
                "weeksPerYear": 30,
            },
            {"name": "Piano", "category": None, "role": "Member"},
        ],
        "awards": [
            {"name": "USAMO", "level": "NATIONAL", "competition": {"name": "USAMO", "tier": 4}},
            {"name": "State Science Fair", "level": "state"},
            {"name": "Honor Roll"},
        ],
    }


@pytest.fixture
def school_records():
    """A few schools with different selectivity."""
    return [
        {"id": "s-1", "name": "Selective College", "acceptanceRate": 5, "usNewsRank": 3,
         "satAvg": 1540, "sat25": 1500, "sat75": 1570},
        {"id": "s-2", "name": "Open University", "acceptanceRate": 85, "usNewsRank": 150,
         "satAvg": 1200},
        {"id": "s-3", "name": "Midrange University", "acceptanceRate": 45, "usNewsRank": 60,
         "satAvg": 1380},
    ]
