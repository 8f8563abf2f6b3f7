"""
Academic Factor

Scores GPA, standardized tests and TOEFL on a 0-100 scale.

Test scores are compared against the strongest available reference, in
strict order:
1. Platform historical sample (>= 30 values) -> empirical percentile
2. Institution 25th/75th percentile band   -> normal-CDF percentile
3. Institution average                     -> linear difference
4. Nothing known                           -> linear difference from 1400
"""

from typing import Optional, Sequence

from admitscope.domain.scoring.constants import SCORING_CONFIG, ScoringConfig
from admitscope.domain.scoring.interfaces import (
    ApplicantMetrics,
    BaseScoringFactor,
    HistoricalDistribution,
    InstitutionMetrics,
)
from admitscope.domain.scoring.statistics import (
    calculate_percentile,
    clamp,
    empirical_percentile,
    normalize_gpa,
)

ACT_MAX = 36.0
SAT_MAX = 1600.0


class AcademicFactor(BaseScoringFactor):
    """
    Academic scoring factor.

    Weight: 50%

    Starts at 50 and adds:
    - GPA term: 0-40 points on the 4.0 basis, offset so a 3.0 GPA nets zero
    - SAT (or ACT when no SAT) bonus: +/-15
    - TOEFL threshold adjustment: +/-5 around 100
    """

    def __init__(self, config: ScoringConfig = SCORING_CONFIG):
        self._config = config

    @property
    def name(self) -> str:
        return "academic"

    @property
    def weight(self) -> float:
        return self._config.weights.academic

    def calculate(
        self,
        applicant: ApplicantMetrics,
        institution: Optional[InstitutionMetrics] = None,
        distribution: Optional[HistoricalDistribution] = None,
    ) -> float:
        cfg = self._config.academic
        institution = institution or InstitutionMetrics()

        score = cfg.base_score
        score += self._gpa_term(applicant)

        if applicant.sat_score is not None:
            score += self._test_score_bonus(
                applicant.sat_score,
                avg=institution.sat_avg,
                p25=institution.sat25,
                p75=institution.sat75,
                historical_values=distribution.sat_values if distribution else None,
                max_bonus=cfg.sat_max_bonus,
            )
        elif applicant.act_score is not None:
            score += self._test_score_bonus(
                _act_to_sat_scale(applicant.act_score),
                avg=_act_to_sat_scale(institution.act_avg),
                p25=_act_to_sat_scale(institution.act25),
                p75=_act_to_sat_scale(institution.act75),
                historical_values=None,
                max_bonus=cfg.act_max_bonus,
            )

        if applicant.toefl_score is not None:
            score += self._toefl_term(applicant.toefl_score)

        return clamp(score, 0.0, 100.0)

    def _gpa_term(self, applicant: ApplicantMetrics) -> float:
        """GPA contribution relative to the baseline GPA."""
        if applicant.gpa is None:
            return 0.0
        cfg = self._config.academic
        scale = applicant.gpa_scale if applicant.gpa_scale is not None else 4.0
        normalized = normalize_gpa(applicant.gpa, scale)
        return normalized / 4.0 * cfg.gpa_max_bonus - cfg.gpa_offset

    def _test_score_bonus(
        self,
        student_score: float,
        avg: Optional[float],
        p25: Optional[float],
        p75: Optional[float],
        historical_values: Optional[Sequence[float]],
        max_bonus: float,
    ) -> float:
        """Standardized-test bonus in [-max_bonus, +max_bonus]."""
        cfg = self._config.academic

        # Level 1: empirical percentile on the platform's own sample
        if historical_values and len(historical_values) >= self._config.min_historical_sample:
            percentile = empirical_percentile(student_score, historical_values)
            return (percentile - 0.5) * 2 * max_bonus

        # Level 2: normal-CDF percentile within the institution's band
        if p25 is not None and p75 is not None and p75 > p25:
            percentile = calculate_percentile(student_score, p25, p75)
            return (percentile - 0.5) * 2 * max_bonus

        # Levels 3 and 4: linear difference from the average (or the default)
        baseline = avg if avg is not None else cfg.default_test_average
        diff = student_score - baseline
        return clamp(
            diff / cfg.test_step_size * cfg.test_points_per_step,
            -max_bonus,
            max_bonus,
        )

    def _toefl_term(self, toefl_score: float) -> float:
        """TOEFL 100 nets zero, 120 -> +5, 80 -> -5."""
        cfg = self._config.academic
        return clamp(
            (toefl_score - cfg.toefl_baseline) / cfg.toefl_points_divisor,
            -cfg.toefl_max_bonus,
            cfg.toefl_max_bonus,
        )


def _act_to_sat_scale(value: Optional[float]) -> Optional[float]:
    """Place an ACT value on the 1600-point context."""
    if value is None:
        return None
    return value / ACT_MAX * SAT_MAX


_DEFAULT_FACTOR = AcademicFactor()


def calculate_academic_score(
    applicant: ApplicantMetrics,
    institution: Optional[InstitutionMetrics] = None,
    distribution: Optional[HistoricalDistribution] = None,
) -> float:
    """Academic score (0-100) with the shared configuration."""
    return _DEFAULT_FACTOR.calculate(applicant, institution, distribution)
