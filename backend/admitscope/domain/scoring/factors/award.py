"""
Award Factor

Scores honors and competition results on a 0-100 scale.
"""

from typing import Optional

from admitscope.domain.scoring.constants import SCORING_CONFIG, ScoringConfig
from admitscope.domain.scoring.interfaces import (
    ApplicantMetrics,
    AwardCountOnly,
    BaseScoringFactor,
    HistoricalDistribution,
    InstitutionMetrics,
    TieredAwards,
)
from admitscope.domain.scoring.statistics import clamp


class AwardFactor(BaseScoringFactor):
    """
    Award scoring factor.

    Weight: 20%

    Tiered path: sum of per-award tier points.
    Legacy path: 20 base, +20 per international award (max 40), +15 per
    national award (max 30), +5 per other award (max 20).
    """

    def __init__(self, config: ScoringConfig = SCORING_CONFIG):
        self._config = config

    @property
    def name(self) -> str:
        return "award"

    @property
    def weight(self) -> float:
        return self._config.weights.award

    def calculate(
        self,
        applicant: ApplicantMetrics,
        institution: Optional[InstitutionMetrics] = None,
        distribution: Optional[HistoricalDistribution] = None,
    ) -> float:
        profile = applicant.award_profile
        if isinstance(profile, TieredAwards):
            score = sum(profile.tier_scores)
        else:
            score = self._score_count_only(profile)
        return clamp(score, 0.0, 100.0)

    def _score_count_only(self, profile: AwardCountOnly) -> float:
        cfg = self._config.award
        other = max(0, profile.total - profile.national - profile.international)

        score = cfg.legacy_base
        score += min(cfg.international_cap, max(0, profile.international) * cfg.international_points)
        score += min(cfg.national_cap, max(0, profile.national) * cfg.national_points)
        score += min(cfg.other_cap, other * cfg.other_points)
        return score


_DEFAULT_FACTOR = AwardFactor()


def calculate_award_score(applicant: ApplicantMetrics) -> float:
    """Award score (0-100) with the shared configuration."""
    return _DEFAULT_FACTOR.calculate(applicant)
