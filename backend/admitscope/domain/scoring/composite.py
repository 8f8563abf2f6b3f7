"""
Composite Scorer

Central scoring engine that combines the three component factors into the
Overall Score with the fixed weights of the shared configuration.
"""

from typing import Optional

from admitscope.domain.scoring.constants import SCORING_CONFIG, ScoringConfig
from admitscope.domain.scoring.factors import (
    AcademicFactor,
    ActivityFactor,
    AwardFactor,
)
from admitscope.domain.scoring.interfaces import (
    ApplicantMetrics,
    HistoricalDistribution,
    InstitutionMetrics,
    ScoreBreakdown,
)


class CompositeScorer:
    """
    Applicant scoring engine.

    Only calculates scores; probability and tiering live in
    AdmissionClassifier. Stateless apart from the immutable configuration,
    so one instance can be shared by every caller.
    """

    def __init__(self, config: ScoringConfig = SCORING_CONFIG):
        self._config = config
        self._academic = AcademicFactor(config)
        self._activity = ActivityFactor(config)
        self._award = AwardFactor(config)

    def score_breakdown(
        self,
        applicant: ApplicantMetrics,
        institution: Optional[InstitutionMetrics] = None,
        distribution: Optional[HistoricalDistribution] = None,
    ) -> ScoreBreakdown:
        """
        Score an applicant, optionally relative to one institution.

        Args:
            applicant: Extracted applicant metrics
            institution: Institution metrics (defaults apply when omitted)
            distribution: Platform historical distribution, if available

        Returns:
            ScoreBreakdown whose overall is the weighted sum of the components
        """
        academic = self._academic.calculate(applicant, institution, distribution)
        activity = self._activity.calculate(applicant, institution, distribution)
        award = self._award.calculate(applicant, institution, distribution)

        return ScoreBreakdown(
            academic=academic,
            activity=activity,
            award=award,
            overall=self.weighted_overall(academic, activity, award),
        )

    def overall_score(
        self,
        applicant: ApplicantMetrics,
        institution: Optional[InstitutionMetrics] = None,
        distribution: Optional[HistoricalDistribution] = None,
    ) -> float:
        return self.score_breakdown(applicant, institution, distribution).overall

    def weighted_overall(self, academic: float, activity: float, award: float) -> float:
        """academic*0.5 + activity*0.3 + award*0.2"""
        weights = self._config.weights
        return (
            academic * weights.academic
            + activity * weights.activity
            + award * weights.award
        )


_DEFAULT_SCORER = CompositeScorer()


def calculate_score_breakdown(
    applicant: ApplicantMetrics,
    institution: Optional[InstitutionMetrics] = None,
    distribution: Optional[HistoricalDistribution] = None,
) -> ScoreBreakdown:
    """Full breakdown with the shared configuration."""
    return _DEFAULT_SCORER.score_breakdown(applicant, institution, distribution)


def calculate_overall_score(
    applicant: ApplicantMetrics,
    institution: Optional[InstitutionMetrics] = None,
    distribution: Optional[HistoricalDistribution] = None,
) -> float:
    """Overall Score (0-100) with the shared configuration."""
    return _DEFAULT_SCORER.overall_score(applicant, institution, distribution)
