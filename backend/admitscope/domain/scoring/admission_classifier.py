"""
Admission Classifier

Turns an Overall Score into an admission probability and classifies the
institution as reach, match or safety.

The odds multiplier and bracket thresholds are legacy heuristics kept for
compatibility with previously issued predictions; they are not calibrated.
"""

from typing import Optional

from admitscope.domain.scoring.constants import SCORING_CONFIG, ScoringConfig
from admitscope.domain.scoring.interfaces import AdmissionTier, InstitutionMetrics
from admitscope.domain.scoring.statistics import clamp


class AdmissionClassifier:
    """
    Probability and tier classifier.

    Probability: the institution's acceptance rate (30% when unknown),
    multiplied by 1.2 for every 10 points above 50 and divided by 1.2 for
    every 10 points below, bounded to [0.05, 0.95].

    Tier brackets by acceptance rate:
    - < 15%:   match at >= 0.25, otherwise reach (never safety)
    - 15-30%:  safety at >= 0.50, match at >= 0.25
    - >= 30%:  safety at >= 0.60, match at >= 0.35
    """

    def __init__(self, config: ScoringConfig = SCORING_CONFIG):
        self._config = config

    def calculate_probability(
        self,
        overall_score: float,
        institution: Optional[InstitutionMetrics] = None,
    ) -> float:
        """Estimated admission probability in [0.05, 0.95]."""
        cfg = self._config.probability
        institution = institution or InstitutionMetrics()

        if institution.acceptance_rate is not None:
            base_rate = clamp(institution.acceptance_rate, 0.0, 100.0) / 100
        else:
            base_rate = cfg.default_base_rate

        score = clamp(overall_score, 0.0, 100.0)
        exponent = (score - cfg.score_pivot) / cfg.score_step
        probability = base_rate * cfg.odds_multiplier ** exponent

        return clamp(probability, cfg.min_probability, cfg.max_probability)

    def classify(
        self,
        probability: float,
        institution: Optional[InstitutionMetrics] = None,
    ) -> AdmissionTier:
        """Reach/match/safety for a probability at this institution."""
        cfg = self._config.probability
        institution = institution or InstitutionMetrics()

        acceptance_rate = institution.acceptance_rate
        if acceptance_rate is None:
            acceptance_rate = cfg.default_acceptance_rate

        if acceptance_rate < cfg.most_selective_below:
            safety_at, match_at = cfg.most_selective_thresholds
        elif acceptance_rate < cfg.selective_below:
            safety_at, match_at = cfg.selective_thresholds
        else:
            safety_at, match_at = cfg.general_thresholds

        if safety_at is not None and probability >= safety_at:
            return AdmissionTier.SAFETY
        if probability >= match_at:
            return AdmissionTier.MATCH
        return AdmissionTier.REACH


_DEFAULT_CLASSIFIER = AdmissionClassifier()


def calculate_probability(
    overall_score: float,
    institution: Optional[InstitutionMetrics] = None,
) -> float:
    return _DEFAULT_CLASSIFIER.calculate_probability(overall_score, institution)


def calculate_tier(
    probability: float,
    institution: Optional[InstitutionMetrics] = None,
) -> AdmissionTier:
    return _DEFAULT_CLASSIFIER.classify(probability, institution)
