"""
Prediction Service

Statistical admission prediction for one applicant across several schools,
with a human-readable explanation of the factors behind each estimate.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from admitscope.domain.records import SchoolRecord
from admitscope.domain.scoring.adapters import (
    coerce_record,
    extract_applicant_metrics,
    extract_institution_metrics,
)
from admitscope.domain.scoring.constants import SCORING_CONFIG
from admitscope.domain.scoring.interfaces import (
    AdmissionTier,
    ApplicantMetrics,
    HistoricalDistribution,
    InstitutionMetrics,
)
from admitscope.domain.scoring.statistics import (
    calculate_percentile,
    clamp,
    empirical_percentile,
    normalize_gpa,
)
from admitscope.services.evaluation import AdmissionEvaluation, AdmissionEvaluator


logger = logging.getLogger(__name__)

_TIER_SUGGESTIONS = {
    AdmissionTier.REACH: [
        "As a reach school, use your essays to show what makes you distinctive",
        "Consider program-specific or early applications to improve your odds",
    ],
    AdmissionTier.MATCH: [
        "As a match school, keep your strengths and polish the rest of the application",
    ],
    AdmissionTier.SAFETY: [
        "As a safety school, keep the application quality high and show genuine interest",
    ],
}


@dataclass
class PredictionFactor:
    """One explained input to the prediction."""
    name: str
    impact: str  # positive, neutral, negative
    weight: float
    detail: str
    improvement: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {
            "name": self.name,
            "impact": self.impact,
            "weight": self.weight,
            "detail": self.detail,
        }
        if self.improvement:
            result["improvement"] = self.improvement
        return result


@dataclass
class PredictionComparison:
    """Where the applicant sits relative to admitted students."""
    gpa_percentile: int = 50
    test_score_percentile: int = 50
    activity_strength: str = "weak"  # strong, average, weak

    def to_dict(self) -> Dict[str, Any]:
        return {
            "gpa_percentile": self.gpa_percentile,
            "test_score_percentile": self.test_score_percentile,
            "activity_strength": self.activity_strength,
        }


@dataclass
class AdmissionPrediction:
    """Prediction for one school, ready for the API layer."""
    school_id: Optional[str]
    school_name: str
    evaluation: AdmissionEvaluation
    factors: List[PredictionFactor] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)
    comparison: PredictionComparison = field(default_factory=PredictionComparison)

    @property
    def probability(self) -> float:
        return self.evaluation.probability

    @property
    def tier(self) -> AdmissionTier:
        return self.evaluation.tier

    def to_dict(self) -> Dict[str, Any]:
        """Convert to API response format."""
        return {
            "school_id": self.school_id,
            "school_name": self.school_name,
            **self.evaluation.to_dict(),
            "factors": [f.to_dict() for f in self.factors],
            "suggestions": list(self.suggestions),
            "comparison": self.comparison.to_dict(),
        }


class PredictionService:
    """
    Admission prediction across schools.

    Pure over its inputs: records are loaded by the caller.
    """

    STRONG_GPA = 3.7
    AVERAGE_GPA = 3.3
    STRONG_ACTIVITY_COUNT = 7
    AVERAGE_ACTIVITY_COUNT = 4
    POSITIVE_ACTIVITY_COUNT = 5

    def __init__(self, evaluator: Optional[AdmissionEvaluator] = None):
        self._evaluator = evaluator or AdmissionEvaluator()

    def predict(
        self,
        profile: Any,
        schools: Iterable[Any],
        distribution: Optional[HistoricalDistribution] = None,
    ) -> List[AdmissionPrediction]:
        """
        Predict admission for every school.

        Args:
            profile: Applicant profile record (None when the applicant has
                no profile yet)
            schools: School records
            distribution: Platform historical distribution, if available

        Returns:
            Predictions sorted by probability (descending)
        """
        if profile is None:
            logger.warning("Prediction requested without a profile")
            return []

        applicant = extract_applicant_metrics(profile)
        results = []
        for raw_school in schools:
            school = coerce_record(raw_school, SchoolRecord)
            prediction = self.predict_school(applicant, school, distribution)
            logger.debug(
                f"Predicted {school.name}: p={prediction.probability:.3f} "
                f"tier={prediction.tier.value}"
            )
            results.append(prediction)

        results.sort(key=lambda p: p.probability, reverse=True)
        return results

    def predict_school(
        self,
        applicant: ApplicantMetrics,
        school: SchoolRecord,
        distribution: Optional[HistoricalDistribution] = None,
    ) -> AdmissionPrediction:
        """Prediction with explanations for a single school."""
        institution = extract_institution_metrics(school)
        evaluation = self._evaluator.evaluate(applicant, institution, distribution)

        return AdmissionPrediction(
            school_id=school.id,
            school_name=school.display_name,
            evaluation=evaluation,
            factors=self._build_factors(applicant, institution),
            suggestions=list(_TIER_SUGGESTIONS[evaluation.tier]),
            comparison=self._build_comparison(applicant, institution, distribution),
        )

    def _build_factors(
        self,
        applicant: ApplicantMetrics,
        institution: InstitutionMetrics,
    ) -> List[PredictionFactor]:
        weights = SCORING_CONFIG.weights
        factors: List[PredictionFactor] = []

        if applicant.gpa is not None:
            gpa = _normalized_gpa(applicant)
            if gpa >= self.STRONG_GPA:
                impact, detail, improvement = (
                    "positive", f"GPA {gpa:.2f} is highly competitive", None
                )
            else:
                impact = "neutral" if gpa >= self.AVERAGE_GPA else "negative"
                detail = f"GPA {gpa:.2f} needs support from other areas"
                improvement = "Raise your GPA in the remaining terms with courses you can excel in"
            factors.append(PredictionFactor("GPA", impact, weights.academic, detail, improvement))

        test = _test_comparison(applicant, institution)
        if test is not None:
            label, score, baseline = test
            if score >= baseline:
                factors.append(PredictionFactor(
                    "Standardized tests", "positive", weights.academic,
                    f"{label} {score:g} meets or exceeds the school average",
                ))
            else:
                factors.append(PredictionFactor(
                    "Standardized tests", "negative", weights.academic,
                    f"{label} {score:g} is below the school average",
                    "Consider retaking the test or submitting another test",
                ))

        if applicant.activity_count > 0:
            count = applicant.activity_count
            if count >= self.POSITIVE_ACTIVITY_COUNT:
                factors.append(PredictionFactor(
                    "Activities", "positive", weights.activity,
                    f"{count} activities show a broad range of interests",
                ))
            else:
                factors.append(PredictionFactor(
                    "Activities", "neutral", weights.activity,
                    f"{count} activities; deeper involvement would help",
                    "Take on a leadership role in your current activities",
                ))

        if applicant.award_count > 0:
            if applicant.national_award_count or applicant.international_award_count:
                factors.append(PredictionFactor(
                    "Awards", "positive", weights.award,
                    "National or international awards strengthen the application",
                ))
            else:
                factors.append(PredictionFactor(
                    "Awards", "neutral", weights.award,
                    f"{applicant.award_count} awards; aim for higher-level recognition",
                    "Enter more selective academic competitions",
                ))

        return factors

    def _build_comparison(
        self,
        applicant: ApplicantMetrics,
        institution: InstitutionMetrics,
        distribution: Optional[HistoricalDistribution],
    ) -> PredictionComparison:
        comparison = PredictionComparison()
        min_sample = SCORING_CONFIG.min_historical_sample

        if applicant.gpa is not None:
            gpa = _normalized_gpa(applicant)
            if distribution and len(distribution.gpa_values) >= min_sample:
                fraction = empirical_percentile(gpa, distribution.gpa_values)
            else:
                fraction = gpa / 4.0
            comparison.gpa_percentile = _as_percent(fraction)

        if applicant.sat_score is not None:
            if distribution and len(distribution.sat_values) >= min_sample:
                fraction = empirical_percentile(applicant.sat_score, distribution.sat_values)
                comparison.test_score_percentile = _as_percent(fraction)
            elif _has_band(institution.sat25, institution.sat75):
                fraction = calculate_percentile(
                    applicant.sat_score, institution.sat25, institution.sat75
                )
                comparison.test_score_percentile = _as_percent(fraction)
        elif applicant.act_score is not None and _has_band(institution.act25, institution.act75):
            fraction = calculate_percentile(
                applicant.act_score, institution.act25, institution.act75
            )
            comparison.test_score_percentile = _as_percent(fraction)

        if applicant.activity_count >= self.STRONG_ACTIVITY_COUNT:
            comparison.activity_strength = "strong"
        elif applicant.activity_count >= self.AVERAGE_ACTIVITY_COUNT:
            comparison.activity_strength = "average"

        return comparison


def _normalized_gpa(applicant: ApplicantMetrics) -> float:
    scale = applicant.gpa_scale if applicant.gpa_scale is not None else 4.0
    return normalize_gpa(applicant.gpa, scale)


def _has_band(p25: Optional[float], p75: Optional[float]) -> bool:
    return p25 is not None and p75 is not None and p75 > p25


def _as_percent(fraction: float) -> int:
    return int(round(clamp(fraction * 100, 0.0, 99.0)))


def _test_comparison(applicant: ApplicantMetrics, institution: InstitutionMetrics):
    """(label, score, school baseline) for the test that drives the score."""
    default = SCORING_CONFIG.academic.default_test_average
    if applicant.sat_score is not None:
        baseline = institution.sat_avg if institution.sat_avg is not None else default
        return "SAT", applicant.sat_score, baseline
    if applicant.act_score is not None:
        if institution.act_avg is not None:
            baseline = institution.act_avg
        else:
            baseline = round(default / 1600 * 36)
        return "ACT", applicant.act_score, baseline
    return None
