"""
Scoring Interfaces for AdmitScope

Value objects exchanged with the scoring engine and the base class for
component scorers. All value objects are frozen: they are request-scoped,
hashable and safe to share between threads or use as memoization keys.

Optional fields follow one rule: ``None`` means "absent" and triggers the
documented default, any other value (0 included) is used literally.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple, Union


class AdmissionTier(str, Enum):
    """Coarse reach/match/safety classification for one institution."""
    REACH = "reach"
    MATCH = "match"
    SAFETY = "safety"


class ConfidenceLevel(str, Enum):
    """How much data backed a prediction."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class ActivityDetail:
    """One extracurricular activity."""
    category: str
    role: str
    total_hours: float = 0.0


@dataclass(frozen=True)
class ApplicantMetrics:
    """
    Applicant profile, already extracted from persisted records.

    ``activity_details`` and ``award_tier_scores`` are optional; when they
    are absent (or empty) the scorers fall back to the count fields.
    """
    gpa: Optional[float] = None
    gpa_scale: Optional[float] = None  # 4.0 when absent
    sat_score: Optional[float] = None
    act_score: Optional[float] = None
    toefl_score: Optional[float] = None
    activity_count: int = 0
    award_count: int = 0
    national_award_count: int = 0
    international_award_count: int = 0
    award_tier_scores: Optional[Tuple[float, ...]] = None
    activity_details: Optional[Tuple[ActivityDetail, ...]] = None

    @property
    def activity_profile(self) -> "ActivityProfile":
        """Resolve the activity data into exactly one scoring shape."""
        if self.activity_details:
            return DetailedActivities(details=tuple(self.activity_details))
        return ActivityCountOnly(count=self.activity_count)

    @property
    def award_profile(self) -> "AwardProfile":
        """Resolve the award data into exactly one scoring shape."""
        if self.award_tier_scores:
            return TieredAwards(tier_scores=tuple(self.award_tier_scores))
        return AwardCountOnly(
            total=self.award_count,
            national=self.national_award_count,
            international=self.international_award_count,
        )


@dataclass(frozen=True)
class InstitutionMetrics:
    """
    Institution admission statistics. Every field is optional.

    acceptance_rate is a percentage (0-100).
    """
    acceptance_rate: Optional[float] = None
    sat_avg: Optional[float] = None
    sat25: Optional[float] = None
    sat75: Optional[float] = None
    act_avg: Optional[float] = None
    act25: Optional[float] = None
    act75: Optional[float] = None
    rank: Optional[int] = None


@dataclass(frozen=True)
class HistoricalDistribution:
    """Sorted (ascending) values observed on the platform's own applicants."""
    sample_count: int = 0
    sat_values: Tuple[float, ...] = ()
    gpa_values: Tuple[float, ...] = ()
    toefl_values: Tuple[float, ...] = ()


# Tagged variants: each scorer path only ever sees one of these shapes.

@dataclass(frozen=True)
class DetailedActivities:
    details: Tuple[ActivityDetail, ...]


@dataclass(frozen=True)
class ActivityCountOnly:
    count: int


@dataclass(frozen=True)
class TieredAwards:
    tier_scores: Tuple[float, ...]


@dataclass(frozen=True)
class AwardCountOnly:
    total: int
    national: int
    international: int


ActivityProfile = Union[DetailedActivities, ActivityCountOnly]
AwardProfile = Union[TieredAwards, AwardCountOnly]


@dataclass(frozen=True)
class ScoreBreakdown:
    """
    Component scores plus the weighted composite, all within 0-100.

    ``overall`` is always the exact weighted sum of the other three.
    """
    academic: float = 0.0
    activity: float = 0.0
    award: float = 0.0
    overall: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary for API responses."""
        return {
            "academic": round(self.academic, 1),
            "activity": round(self.activity, 1),
            "award": round(self.award, 1),
            "overall": round(self.overall, 1),
        }


@dataclass(frozen=True)
class PercentileBand:
    """Distribution (p25, p50, p75) of one score across a cohort."""
    p25: float
    p50: float
    p75: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "p25": round(self.p25, 1),
            "p50": round(self.p50, 1),
            "p75": round(self.p75, 1),
        }


class BaseScoringFactor(ABC):
    """Base class for the component scorers (each returns 0-100)."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def weight(self) -> float:
        """Composite weight, read from the shared scoring configuration."""
        pass

    @abstractmethod
    def calculate(
        self,
        applicant: ApplicantMetrics,
        institution: Optional[InstitutionMetrics] = None,
        distribution: Optional[HistoricalDistribution] = None,
    ) -> float:
        pass
