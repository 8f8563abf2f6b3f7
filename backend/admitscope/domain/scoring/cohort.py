"""
Cohort Statistics

Percentile bands and rank positions of one applicant among peers.
"""

from typing import Iterable, Sequence

from admitscope.domain.scoring.interfaces import PercentileBand

NEUTRAL_SCORE = 50.0


def _quantile(sorted_values: Sequence[float], q: float) -> float:
    """Linear interpolation between the closest ranks."""
    if len(sorted_values) == 1:
        return float(sorted_values[0])
    position = (len(sorted_values) - 1) * q
    lower = int(position)
    upper = min(lower + 1, len(sorted_values) - 1)
    fraction = position - lower
    return sorted_values[lower] + (sorted_values[upper] - sorted_values[lower]) * fraction


def compute_percentile_band(values: Iterable[float]) -> PercentileBand:
    """
    (p25, p50, p75) of a cohort's scores.

    An empty cohort yields the neutral band (50, 50, 50).
    """
    ordered = sorted(values)
    if not ordered:
        return PercentileBand(NEUTRAL_SCORE, NEUTRAL_SCORE, NEUTRAL_SCORE)
    return PercentileBand(
        p25=_quantile(ordered, 0.25),
        p50=_quantile(ordered, 0.50),
        p75=_quantile(ordered, 0.75),
    )


def rank_position(score: float, cohort_scores: Iterable[float]) -> int:
    """1-based rank; peers with an equal score share the rank."""
    return 1 + sum(1 for other in cohort_scores if other > score)


def cohort_percentile(rank: int, cohort_size: int) -> int:
    """Share of the cohort (0-100) ranked below ``rank``."""
    if cohort_size <= 0:
        return 0
    return round((1 - rank / cohort_size) * 100)
