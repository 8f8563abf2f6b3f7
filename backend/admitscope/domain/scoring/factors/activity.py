"""
Activity Factor

Scores extracurricular involvement on a 0-100 scale. Profiles with
per-activity detail get a quality score (count, leadership, depth,
diversity); older records with only a count keep the legacy count score.
"""

from typing import Optional

from admitscope.domain.scoring.constants import SCORING_CONFIG, ScoringConfig
from admitscope.domain.scoring.interfaces import (
    ActivityCountOnly,
    ActivityDetail,
    ApplicantMetrics,
    BaseScoringFactor,
    DetailedActivities,
    HistoricalDistribution,
    InstitutionMetrics,
)
from admitscope.domain.scoring.statistics import clamp


class ActivityFactor(BaseScoringFactor):
    """
    Activity scoring factor.

    Weight: 30%

    Detailed path: 20 base, +3 per activity (max 30), +5 per leadership role
    (max 15), +5 per activity above 200 hours (max 15), +5/+10 for 3/5
    distinct categories.
    Legacy path: 30 base, +5 per activity (max 50).
    """

    def __init__(self, config: ScoringConfig = SCORING_CONFIG):
        self._config = config

    @property
    def name(self) -> str:
        return "activity"

    @property
    def weight(self) -> float:
        return self._config.weights.activity

    def calculate(
        self,
        applicant: ApplicantMetrics,
        institution: Optional[InstitutionMetrics] = None,
        distribution: Optional[HistoricalDistribution] = None,
    ) -> float:
        profile = applicant.activity_profile
        if isinstance(profile, DetailedActivities):
            score = self._score_detailed(profile)
        else:
            score = self._score_count_only(profile)
        return clamp(score, 0.0, 100.0)

    def is_leadership_role(self, activity: ActivityDetail) -> bool:
        """Case-insensitive keyword match on the role text."""
        role = (activity.role or "").lower()
        return any(keyword in role for keyword in self._config.leadership_keywords)

    def _score_detailed(self, profile: DetailedActivities) -> float:
        cfg = self._config.activity
        details = profile.details

        score = cfg.detailed_base
        score += min(cfg.count_cap, len(details) * cfg.points_per_activity)

        leaders = sum(1 for a in details if self.is_leadership_role(a))
        score += min(cfg.leadership_cap, leaders * cfg.points_per_leader)

        deep = sum(1 for a in details if a.total_hours > cfg.deep_hours_threshold)
        score += min(cfg.depth_cap, deep * cfg.points_per_deep)

        categories = len({a.category for a in details})
        if categories >= cfg.diversity_large_categories:
            score += cfg.diversity_large_bonus
        elif categories >= cfg.diversity_small_categories:
            score += cfg.diversity_small_bonus

        return score

    def _score_count_only(self, profile: ActivityCountOnly) -> float:
        cfg = self._config.activity
        return cfg.legacy_base + min(
            cfg.legacy_cap, max(0, profile.count) * cfg.legacy_points_per_activity
        )


_DEFAULT_FACTOR = ActivityFactor()


def calculate_activity_score(applicant: ApplicantMetrics) -> float:
    """Activity score (0-100) with the shared configuration."""
    return _DEFAULT_FACTOR.calculate(applicant)
