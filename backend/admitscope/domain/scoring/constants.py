"""
Scoring Engine Constants

The one and only home of the scoring weights, tier-point tables and keyword
lists. Every scorer, adapter and service reads them from SCORING_CONFIG;
nothing else in the code base may redefine these numbers.
"""

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple


@dataclass(frozen=True)
class ScoringWeights:
    """Composite weights; must be non-negative and sum to 1.0."""
    academic: float = 0.5
    activity: float = 0.3
    award: float = 0.2

    def __post_init__(self):
        weights = (self.academic, self.activity, self.award)
        if any(w < 0 for w in weights):
            raise ValueError(f"Scoring weights must be non-negative: {weights}")
        if not math.isclose(sum(weights), 1.0, abs_tol=1e-9):
            raise ValueError(f"Scoring weights must sum to 1.0, got {sum(weights)}")

    def as_dict(self) -> dict:
        return {
            "academic": self.academic,
            "activity": self.activity,
            "award": self.award,
        }


@dataclass(frozen=True)
class AcademicConfig:
    """Academic score parameters."""
    base_score: float = 50.0
    gpa_max_bonus: float = 40.0
    gpa_baseline: float = 3.0  # GPA (4.0 scale) that nets zero
    sat_max_bonus: float = 15.0
    act_max_bonus: float = 15.0
    default_test_average: float = 1400.0  # SAT-scale baseline with no school data
    test_points_per_step: float = 5.0
    test_step_size: float = 50.0
    toefl_max_bonus: float = 5.0
    toefl_baseline: float = 100.0
    toefl_points_divisor: float = 4.0

    @property
    def gpa_offset(self) -> float:
        """GPA contribution of the baseline GPA, subtracted from every GPA term."""
        return self.gpa_baseline / 4.0 * self.gpa_max_bonus


@dataclass(frozen=True)
class ActivityConfig:
    """Activity score parameters for both the detailed and legacy paths."""
    detailed_base: float = 20.0
    points_per_activity: float = 3.0
    count_cap: float = 30.0
    points_per_leader: float = 5.0
    leadership_cap: float = 15.0
    deep_hours_threshold: float = 200.0
    points_per_deep: float = 5.0
    depth_cap: float = 15.0
    diversity_small_categories: int = 3
    diversity_small_bonus: float = 5.0
    diversity_large_categories: int = 5
    diversity_large_bonus: float = 10.0
    legacy_base: float = 30.0
    legacy_points_per_activity: float = 5.0
    legacy_cap: float = 50.0


@dataclass(frozen=True)
class AwardConfig:
    """Award score parameters for the legacy count-only path."""
    legacy_base: float = 20.0
    international_points: float = 20.0
    international_cap: float = 40.0
    national_points: float = 15.0
    national_cap: float = 30.0
    other_points: float = 5.0
    other_cap: float = 20.0
    unknown_award_points: float = 3.0


@dataclass(frozen=True)
class ProbabilityConfig:
    """Admission probability and tier bracket parameters."""
    default_base_rate: float = 0.30
    odds_multiplier: float = 1.2
    score_pivot: float = 50.0
    score_step: float = 10.0
    min_probability: float = 0.05
    max_probability: float = 0.95
    default_acceptance_rate: float = 30.0  # percent, used for tier brackets
    most_selective_below: float = 15.0
    selective_below: float = 30.0
    # bracket -> (safety threshold or None, match threshold)
    most_selective_thresholds: Tuple = (None, 0.25)
    selective_thresholds: Tuple = (0.50, 0.25)
    general_thresholds: Tuple = (0.60, 0.35)


@dataclass(frozen=True)
class ConfidenceConfig:
    high_min_signals: int = 5
    medium_min_signals: int = 3


# Competition.tier -> points
_TIER_POINTS = {
    5: 25.0,  # IMO, IPhO, ISEF, Regeneron STS
    4: 15.0,  # USAMO, USABO, NSDA Nationals, YoungArts
    3: 8.0,   # AIME, PhysicsBowl, Science Olympiad, NEC
    2: 4.0,   # AMC 12, FBLA, USACO Silver, VEX
    1: 2.0,   # AMC 8, NHS, National Latin Exam
}

# AwardLevel -> points, for awards not linked to a known competition
_LEVEL_POINTS = {
    "INTERNATIONAL": 20.0,
    "NATIONAL": 15.0,
    "STATE": 8.0,
    "REGIONAL": 5.0,
    "SCHOOL": 2.0,
}

# Matched case-insensitively as substrings of the activity role
_LEADERSHIP_KEYWORDS = (
    "president",
    "founder",
    "captain",
    "director",
    "head",
    "chair",
    "editor-in-chief",
    "lead",
    "co-founder",
    "社长",
    "主席",
    "队长",
    "创始人",
    "负责人",
)


@dataclass(frozen=True)
class ScoringConfig:
    """
    Immutable configuration shared by every scorer.

    Lookup tables are exposed as read-only mappings so that no caller can
    mutate the shared instance.
    """
    weights: ScoringWeights = field(default_factory=ScoringWeights)
    academic: AcademicConfig = field(default_factory=AcademicConfig)
    activity: ActivityConfig = field(default_factory=ActivityConfig)
    award: AwardConfig = field(default_factory=AwardConfig)
    probability: ProbabilityConfig = field(default_factory=ProbabilityConfig)
    confidence: ConfidenceConfig = field(default_factory=ConfidenceConfig)
    tier_points: Mapping[int, float] = field(
        default_factory=lambda: MappingProxyType(dict(_TIER_POINTS))
    )
    level_points: Mapping[str, float] = field(
        default_factory=lambda: MappingProxyType(dict(_LEVEL_POINTS))
    )
    leadership_keywords: Tuple[str, ...] = _LEADERSHIP_KEYWORDS
    min_historical_sample: int = 30


SCORING_CONFIG = ScoringConfig()

# Convenience export
SCORING_WEIGHTS = SCORING_CONFIG.weights
