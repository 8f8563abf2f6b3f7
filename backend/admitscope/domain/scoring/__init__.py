# Scoring & probability engine for AdmitScope
from admitscope.domain.scoring.constants import (
    SCORING_CONFIG,
    SCORING_WEIGHTS,
    ScoringConfig,
)
from admitscope.domain.scoring.interfaces import (
    ActivityDetail,
    AdmissionTier,
    ApplicantMetrics,
    ConfidenceLevel,
    HistoricalDistribution,
    InstitutionMetrics,
    PercentileBand,
    ScoreBreakdown,
)
from admitscope.domain.scoring.statistics import (
    calculate_percentile,
    empirical_percentile,
    normal_cdf,
    normalize_gpa,
    parse_range,
)
from admitscope.domain.scoring.factors import (
    calculate_academic_score,
    calculate_activity_score,
    calculate_award_score,
)
from admitscope.domain.scoring.composite import (
    CompositeScorer,
    calculate_overall_score,
    calculate_score_breakdown,
)
from admitscope.domain.scoring.admission_classifier import (
    AdmissionClassifier,
    calculate_probability,
    calculate_tier,
)
from admitscope.domain.scoring.confidence import calculate_confidence
from admitscope.domain.scoring.cohort import compute_percentile_band
from admitscope.domain.scoring.adapters import (
    build_historical_distribution,
    extract_applicant_metrics,
    extract_institution_metrics,
)

__all__ = [
    "SCORING_CONFIG",
    "SCORING_WEIGHTS",
    "ScoringConfig",
    "ActivityDetail",
    "AdmissionTier",
    "ApplicantMetrics",
    "ConfidenceLevel",
    "HistoricalDistribution",
    "InstitutionMetrics",
    "PercentileBand",
    "ScoreBreakdown",
    "calculate_percentile",
    "empirical_percentile",
    "normal_cdf",
    "normalize_gpa",
    "parse_range",
    "calculate_academic_score",
    "calculate_activity_score",
    "calculate_award_score",
    "CompositeScorer",
    "calculate_overall_score",
    "calculate_score_breakdown",
    "AdmissionClassifier",
    "calculate_probability",
    "calculate_tier",
    "calculate_confidence",
    "compute_percentile_band",
    "build_historical_distribution",
    "extract_applicant_metrics",
    "extract_institution_metrics",
]
