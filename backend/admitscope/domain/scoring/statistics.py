"""
Statistical Utilities

Normal CDF approximation, percentile estimators, range parsing and GPA
normalization. Pure functions with no dependency beyond ``math`` and
``bisect``.
"""

import math
import re
from bisect import bisect_left
from typing import Optional, Sequence

# Abramowitz & Stegun 7.1.26
_A1 = 0.254829592
_A2 = -0.284496736
_A3 = 1.421413741
_A4 = -1.453152027
_A5 = 1.061405429
_P = 0.3275911

# z-score of the 75th percentile of a standard normal
_Z75 = 0.6745

_RANGE_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*[-–—~]\s*(\d+(?:\.\d+)?)\s*$")


def clamp(value: float, low: float, high: float) -> float:
    """Clamp ``value`` into [low, high]; NaN collapses to ``low``."""
    if math.isnan(value):
        return low
    return max(low, min(high, value))


def normal_cdf(z: float) -> float:
    """
    Standard normal cumulative distribution, accurate to ~1e-5.

    Symmetric by construction: normal_cdf(z) + normal_cdf(-z) == 1.
    """
    if math.isnan(z) or z == 0:
        return 0.5
    sign = -1.0 if z < 0 else 1.0
    x = abs(z) / math.sqrt(2.0)
    t = 1.0 / (1.0 + _P * x)
    y = 1.0 - ((((_A5 * t + _A4) * t + _A3) * t + _A2) * t + _A1) * t * math.exp(-x * x)
    return 0.5 * (1.0 + sign * y)


def calculate_percentile(student_score: float, p25: float, p75: float) -> float:
    """
    Percentile (0-1) of a score among an institution's admits.

    Assumes a normal distribution and recovers sigma from the interquartile
    range: IQR = p75 - p25 = 2 * 0.6745 * sigma. A degenerate band
    (p75 <= p25) yields the median, 0.5.
    """
    if not p75 > p25:
        return 0.5
    mu = (p25 + p75) / 2
    sigma = (p75 - p25) / (2 * _Z75)
    return normal_cdf((student_score - mu) / sigma)


def empirical_percentile(value: float, sorted_values: Sequence[float]) -> float:
    """
    Percentile (0-1) of ``value`` within an ascending sample.

    Empty sample -> 0.5, at or below the minimum -> 0, at or above the
    maximum -> 1.
    """
    if not sorted_values:
        return 0.5
    if value <= sorted_values[0]:
        return 0.0
    if value >= sorted_values[-1]:
        return 1.0
    return bisect_left(sorted_values, value) / len(sorted_values)


def parse_range(text: Optional[str]) -> Optional[float]:
    """Midpoint of a textual range such as "1500-1550" or "3.7 - 3.9"."""
    if not text:
        return None
    match = _RANGE_PATTERN.match(text)
    if match is None:
        return None
    return (float(match.group(1)) + float(match.group(2))) / 2


def normalize_gpa(gpa: float, scale: float) -> float:
    """
    Rescale a GPA onto the 4.0 basis.

    Supports 4.0, 5.0 and 100-point scales. Any other scale, including a
    literal 0, is treated as already being on the 4.0 basis. A NaN or
    infinite GPA normalizes to 0.
    """
    if not math.isfinite(gpa):
        return 0.0
    if scale == 4.0:
        return gpa
    if scale == 5.0:
        return gpa / 5.0 * 4.0
    if scale == 100:
        return gpa / 100 * 4.0
    return gpa
