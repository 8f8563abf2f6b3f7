"""
Unit tests for the statistical utilities.

Covers the normal CDF approximation, both percentile estimators, range
parsing and GPA normalization.
"""

import math

import pytest

from admitscope.domain.scoring.statistics import (
    calculate_percentile,
    clamp,
    empirical_percentile,
    normal_cdf,
    normalize_gpa,
    parse_range,
)


# ============== Normal CDF Tests ==============

class TestNormalCdf:
    """Tests for the Abramowitz & Stegun approximation."""

    @pytest.mark.parametrize("z", [0.0, 0.3, 1.0, 1.96, 2.5, 4.0])
    def test_symmetry(self, z):
        """normal_cdf(z) + normal_cdf(-z) should equal 1."""
        total = normal_cdf(z) + normal_cdf(-z)
        assert total == pytest.approx(1.0, abs=1e-9), f"Asymmetric at z={z}: {total}"

    def test_zero_is_exactly_median(self):
        assert normal_cdf(0.0) == 0.5
        assert normal_cdf(-0.0) == 0.5
        assert normal_cdf(0.0) + normal_cdf(-0.0) == 1.0

    def test_known_values(self):
        assert normal_cdf(0.0) == pytest.approx(0.5, abs=1e-6)
        assert normal_cdf(1.0) == pytest.approx(0.8413, abs=1e-4)
        assert normal_cdf(-1.96) == pytest.approx(0.025, abs=1e-3)

    def test_extreme_values_stay_in_unit_interval(self):
        assert 0.0 <= normal_cdf(-40) <= 1e-6
        assert 1 - 1e-6 <= normal_cdf(40) <= 1.0

    def test_nan_yields_median(self):
        assert normal_cdf(float("nan")) == 0.5


# ============== Parametric Percentile Tests ==============

class TestCalculatePercentile:
    """Tests for the IQR-based normal percentile."""

    def test_midpoint_is_median(self):
        """A score at the band midpoint sits at the 50th percentile."""
        assert calculate_percentile(1550, 1520, 1580) == 0.5

    def test_p75_is_upper_quartile(self):
        assert calculate_percentile(1580, 1520, 1580) == pytest.approx(0.75, abs=1e-3)

    def test_p25_is_lower_quartile(self):
        assert calculate_percentile(1520, 1520, 1580) == pytest.approx(0.25, abs=1e-3)

    def test_monotonic_in_score(self):
        scores = [1300, 1450, 1500, 1550, 1600]
        values = [calculate_percentile(s, 1520, 1580) for s in scores]
        assert values == sorted(values), f"Percentile should not decrease: {values}"

    @pytest.mark.parametrize("p25,p75", [(1500, 1500), (1580, 1520)])
    def test_degenerate_band_yields_median(self, p25, p75):
        assert calculate_percentile(1600, p25, p75) == 0.5


# ============== Empirical Percentile Tests ==============

class TestEmpiricalPercentile:
    """Tests for the sorted-sample percentile."""

    @pytest.fixture
    def sample(self):
        return [1400, 1420, 1440, 1460, 1480, 1500, 1520]

    def test_interior_value(self, sample):
        assert empirical_percentile(1450, sample) == pytest.approx(3 / 7)

    def test_at_or_below_minimum_is_zero(self, sample):
        assert empirical_percentile(1400, sample) == 0.0
        assert empirical_percentile(1000, sample) == 0.0

    def test_at_or_above_maximum_is_one(self, sample):
        assert empirical_percentile(1520, sample) == 1.0
        assert empirical_percentile(1600, sample) == 1.0

    def test_empty_sample_is_median(self):
        assert empirical_percentile(1450, []) == 0.5

    def test_result_within_bounds(self, sample):
        for value in range(1380, 1541, 7):
            result = empirical_percentile(value, sample)
            assert 0.0 <= result <= 1.0, f"Out of bounds for {value}: {result}"


# ============== Helper Tests ==============

class TestParseRange:

    @pytest.mark.parametrize("text,expected", [
        ("1500-1550", 1525.0),
        ("3.7 - 3.9", 3.8),
        ("100~110", 105.0),
        ("1400–1500", 1450.0),
    ])
    def test_parses_midpoint(self, text, expected):
        assert parse_range(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", [None, "", "1500", "abc", "1500-", "-1500"])
    def test_unparseable_yields_none(self, text):
        assert parse_range(text) is None


class TestNormalizeGpa:

    @pytest.mark.parametrize("gpa", [0.0, 2.5, 3.0, 3.75, 4.0])
    def test_four_point_scale_is_identity(self, gpa):
        assert normalize_gpa(gpa, 4.0) == gpa

    def test_five_point_scale(self):
        assert normalize_gpa(4.5, 5.0) == pytest.approx(3.6)

    def test_hundred_point_scale(self):
        assert normalize_gpa(90, 100) == pytest.approx(3.6)

    @pytest.mark.parametrize("gpa", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_gpa_normalizes_to_zero(self, gpa):
        assert normalize_gpa(gpa, 4.0) == 0.0
        assert normalize_gpa(gpa, 100) == 0.0

    @pytest.mark.parametrize("scale", [0, 10.0, 4.3])
    def test_unknown_scale_passes_through(self, scale):
        assert normalize_gpa(3.5, scale) == 3.5


class TestClamp:

    def test_bounds(self):
        assert clamp(-5, 0, 100) == 0
        assert clamp(150, 0, 100) == 100
        assert clamp(42.5, 0, 100) == 42.5

    def test_nan_collapses_to_low(self):
        result = clamp(math.nan, 0.0, 100.0)
        assert result == 0.0
