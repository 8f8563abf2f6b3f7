"""
Ranking Service

Ranks one applicant among a cohort of peers who target the same institution.
Every cohort member is scored against the institution, so a batch over M
institutions with N peers costs O(N * M) engine calls.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from admitscope.domain.records import ProfileRecord, SchoolRecord
from admitscope.domain.scoring.adapters import (
    coerce_record,
    extract_applicant_metrics,
    extract_institution_metrics,
)
from admitscope.domain.scoring.cohort import (
    cohort_percentile,
    compute_percentile_band,
    rank_position,
)
from admitscope.domain.scoring.composite import CompositeScorer
from admitscope.domain.scoring.interfaces import (
    ApplicantMetrics,
    HistoricalDistribution,
    PercentileBand,
    ScoreBreakdown,
)
from admitscope.infrastructure.exceptions import NotFoundError


logger = logging.getLogger(__name__)

CATEGORIES = ("academic", "activity", "award")


@dataclass
class RankingResult:
    """Applicant standing among peers for one institution."""
    school_id: Optional[str]
    school_name: str
    total_applicants: int
    rank: int
    percentile: int
    breakdown: ScoreBreakdown
    category_percentiles: Dict[str, int] = field(default_factory=dict)
    bands: Dict[str, PercentileBand] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to API response format."""
        return {
            "school_id": self.school_id,
            "school_name": self.school_name,
            "total_applicants": self.total_applicants,
            "rank": self.rank,
            "percentile": self.percentile,
            "breakdown": self.breakdown.to_dict(),
            "category_percentiles": dict(self.category_percentiles),
            "bands": {name: band.to_dict() for name, band in self.bands.items()},
        }


class RankingService:
    """Cohort ranking on top of the shared composite scorer."""

    def __init__(self, scorer: Optional[CompositeScorer] = None):
        self._scorer = scorer or CompositeScorer()

    def rank_against_institution(
        self,
        applicant_id: str,
        cohort: Iterable[Any],
        institution: Any,
        distribution: Optional[HistoricalDistribution] = None,
    ) -> RankingResult:
        """
        Rank an applicant among the cohort for one institution.

        Args:
            applicant_id: user_id (or profile id) of the applicant to rank
            cohort: Profile records of everyone targeting the institution,
                the applicant included
            institution: School record
            distribution: Platform historical distribution, if available

        Returns:
            RankingResult for the applicant

        Raises:
            NotFoundError: if the applicant is not part of the cohort
        """
        members = self._cohort_metrics(applicant_id, cohort)
        return self._rank(applicant_id, members, institution, distribution)

    def batch_rank(
        self,
        applicant_id: str,
        cohort: Iterable[Any],
        institutions: Iterable[Any],
        distribution: Optional[HistoricalDistribution] = None,
    ) -> List[RankingResult]:
        """Rank the applicant against several institutions with one cohort."""
        members = self._cohort_metrics(applicant_id, cohort)
        return [
            self._rank(applicant_id, members, institution, distribution)
            for institution in institutions
        ]

    def _cohort_metrics(
        self,
        applicant_id: str,
        cohort: Iterable[Any],
    ) -> List[Tuple[Optional[str], ApplicantMetrics]]:
        members = []
        for raw in cohort:
            record = coerce_record(raw, ProfileRecord)
            members.append((record.user_id or record.id, extract_applicant_metrics(record)))

        if not any(member_id == applicant_id for member_id, _ in members):
            raise NotFoundError(
                "Applicant is not part of the cohort",
                resource="profile",
                identifier=applicant_id,
            )
        return members

    def _rank(
        self,
        applicant_id: str,
        members: List[Tuple[Optional[str], ApplicantMetrics]],
        institution: Any,
        distribution: Optional[HistoricalDistribution],
    ) -> RankingResult:
        school = coerce_record(institution, SchoolRecord)
        metrics = extract_institution_metrics(school)

        scored = [
            (member_id, self._scorer.score_breakdown(applicant, metrics, distribution))
            for member_id, applicant in members
        ]
        own = next(b for member_id, b in scored if member_id == applicant_id)
        size = len(scored)

        overall_scores = [b.overall for _, b in scored]
        rank = rank_position(own.overall, overall_scores)

        category_percentiles = {}
        bands = {"overall": compute_percentile_band(overall_scores)}
        for category in CATEGORIES:
            values = [getattr(b, category) for _, b in scored]
            category_rank = rank_position(getattr(own, category), values)
            category_percentiles[category] = cohort_percentile(category_rank, size)
            bands[category] = compute_percentile_band(values)

        logger.debug(
            f"Ranked {applicant_id} at {school.name}: {rank}/{size}"
        )

        return RankingResult(
            school_id=school.id,
            school_name=school.display_name,
            total_applicants=size,
            rank=rank,
            percentile=cohort_percentile(rank, size),
            breakdown=own,
            category_percentiles=category_percentiles,
            bands=bands,
        )
