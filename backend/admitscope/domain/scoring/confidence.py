"""
Confidence Estimator

Counts how many of six canonical data points back a prediction. Purely
informational, it never changes a score.
"""

from typing import Optional

from admitscope.domain.scoring.constants import SCORING_CONFIG, ScoringConfig
from admitscope.domain.scoring.interfaces import (
    ApplicantMetrics,
    ConfidenceLevel,
    InstitutionMetrics,
)


def count_data_points(
    applicant: ApplicantMetrics,
    institution: Optional[InstitutionMetrics] = None,
) -> int:
    institution = institution or InstitutionMetrics()
    signals = (
        applicant.gpa is not None,
        applicant.sat_score is not None or applicant.act_score is not None,
        applicant.activity_count > 0,
        applicant.award_count > 0,
        institution.acceptance_rate is not None,
        institution.sat_avg is not None or institution.act_avg is not None,
    )
    return sum(1 for present in signals if present)


def calculate_confidence(
    applicant: ApplicantMetrics,
    institution: Optional[InstitutionMetrics] = None,
    config: ScoringConfig = SCORING_CONFIG,
) -> ConfidenceLevel:
    """low (<3 data points), medium (3-4) or high (>=5)."""
    data_points = count_data_points(applicant, institution)

    if data_points >= config.confidence.high_min_signals:
        return ConfidenceLevel.HIGH
    if data_points >= config.confidence.medium_min_signals:
        return ConfidenceLevel.MEDIUM
    return ConfidenceLevel.LOW
