"""
School List Service

Builds a balanced reach / match / safety list from ranked institutions.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from admitscope.config.settings import Settings, get_settings
from admitscope.domain.records import SchoolRecord
from admitscope.domain.scoring.adapters import (
    coerce_record,
    extract_applicant_metrics,
    extract_institution_metrics,
)
from admitscope.domain.scoring.interfaces import AdmissionTier, HistoricalDistribution
from admitscope.infrastructure.exceptions import ProfileNotFoundError
from admitscope.services.evaluation import AdmissionEvaluator


logger = logging.getLogger(__name__)


@dataclass
class RecommendedSchool:
    school_id: Optional[str]
    school_name: str
    rank: Optional[int]
    acceptance_rate: Optional[float]
    probability: float
    overall_score: float
    tier: AdmissionTier

    def to_dict(self) -> Dict[str, Any]:
        return {
            "school_id": self.school_id,
            "school_name": self.school_name,
            "rank": self.rank,
            "acceptance_rate": self.acceptance_rate,
            "probability": round(self.probability, 3),
            "overall_score": round(self.overall_score, 1),
            "tier": self.tier.value,
        }


@dataclass
class SchoolListRecommendation:
    """Schools bucketed by tier."""
    reach: List[RecommendedSchool] = field(default_factory=list)
    match: List[RecommendedSchool] = field(default_factory=list)
    safety: List[RecommendedSchool] = field(default_factory=list)

    def bucket(self, tier: AdmissionTier) -> List[RecommendedSchool]:
        return getattr(self, tier.value)

    def is_full(self, per_tier: int) -> bool:
        return all(len(self.bucket(tier)) >= per_tier for tier in AdmissionTier)

    def to_dict(self) -> Dict[str, Any]:
        return {tier.value: [s.to_dict() for s in self.bucket(tier)] for tier in AdmissionTier}


class SchoolListService:
    """Tier-balanced school list recommendations."""

    def __init__(
        self,
        evaluator: Optional[AdmissionEvaluator] = None,
        settings: Optional[Settings] = None,
    ):
        self._evaluator = evaluator or AdmissionEvaluator()
        self._settings = settings or get_settings()

    def recommend(
        self,
        profile: Any,
        schools: Iterable[Any],
        distribution: Optional[HistoricalDistribution] = None,
    ) -> SchoolListRecommendation:
        """
        Classify the best-ranked schools into reach/match/safety.

        Schools are considered in rank order (unranked last), and each tier
        is capped at settings.recommendations_per_tier.

        Raises:
            ProfileNotFoundError: if the applicant has no profile
        """
        if profile is None:
            raise ProfileNotFoundError()

        applicant = extract_applicant_metrics(profile)
        per_tier = self._settings.recommendations_per_tier

        candidates = sorted(
            (coerce_record(s, SchoolRecord) for s in schools),
            key=lambda s: (s.us_news_rank is None, s.us_news_rank or 0),
        )[: self._settings.school_list_candidate_limit]

        result = SchoolListRecommendation()
        for school in candidates:
            institution = extract_institution_metrics(school)
            evaluation = self._evaluator.evaluate(applicant, institution, distribution)
            bucket = result.bucket(evaluation.tier)
            if len(bucket) < per_tier:
                bucket.append(RecommendedSchool(
                    school_id=school.id,
                    school_name=school.display_name,
                    rank=school.us_news_rank,
                    acceptance_rate=school.acceptance_rate,
                    probability=evaluation.probability,
                    overall_score=evaluation.breakdown.overall,
                    tier=evaluation.tier,
                ))
            if result.is_full(per_tier):
                break

        logger.debug(
            f"School list: {len(result.reach)} reach, {len(result.match)} match, "
            f"{len(result.safety)} safety from {len(candidates)} candidates"
        )
        return result
