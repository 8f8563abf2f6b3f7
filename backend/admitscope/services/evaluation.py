"""
Admission Evaluation

The one scoring pipeline shared by every call site:
breakdown -> probability -> tier -> confidence.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from admitscope.domain.scoring.admission_classifier import AdmissionClassifier
from admitscope.domain.scoring.composite import CompositeScorer
from admitscope.domain.scoring.confidence import calculate_confidence
from admitscope.domain.scoring.interfaces import (
    AdmissionTier,
    ApplicantMetrics,
    ConfidenceLevel,
    HistoricalDistribution,
    InstitutionMetrics,
    ScoreBreakdown,
)


@dataclass(frozen=True)
class AdmissionEvaluation:
    """Engine output for one (applicant, institution) pair."""
    breakdown: ScoreBreakdown
    probability: float
    tier: AdmissionTier
    confidence: ConfidenceLevel

    def to_dict(self) -> Dict[str, Any]:
        return {
            "breakdown": self.breakdown.to_dict(),
            "probability": round(self.probability, 3),
            "tier": self.tier.value,
            "confidence": self.confidence.value,
        }


class AdmissionEvaluator:
    """Runs the full engine for one applicant against one institution."""

    def __init__(
        self,
        scorer: Optional[CompositeScorer] = None,
        classifier: Optional[AdmissionClassifier] = None,
    ):
        self._scorer = scorer or CompositeScorer()
        self._classifier = classifier or AdmissionClassifier()

    @property
    def scorer(self) -> CompositeScorer:
        return self._scorer

    def evaluate(
        self,
        applicant: ApplicantMetrics,
        institution: InstitutionMetrics,
        distribution: Optional[HistoricalDistribution] = None,
    ) -> AdmissionEvaluation:
        breakdown = self._scorer.score_breakdown(applicant, institution, distribution)
        probability = self._classifier.calculate_probability(breakdown.overall, institution)
        return AdmissionEvaluation(
            breakdown=breakdown,
            probability=probability,
            tier=self._classifier.classify(probability, institution),
            confidence=calculate_confidence(applicant, institution),
        )
