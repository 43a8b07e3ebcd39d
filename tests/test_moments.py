"""Tests for the moments engine."""
import json
import math
from pathlib import Path

import numpy as np
import pandas as pd
import pytest
from scipy import stats as scipy_stats

from portfolio_analytics import InvalidInput
from portfolio_analytics.stats.moments import (
    hpm,
    kurtosis,
    lpm,
    mean,
    moments,
    percentile,
    sample_kurtosis,
    sample_moments,
    sample_skewness,
    sample_stddev,
    sample_variance,
    skewness,
    stddev,
    variance,
)

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


def _bacon_returns() -> list[float]:
    with open(FIXTURES_DIR / "bacon.json") as f:
        return json.load(f)["portfolio_returns"]


def _spiegel_heights() -> list[int]:
    # Spiegel & Stephens (1999), heights of 100 male students
    heights = [(61, 5), (64, 18), (67, 42), (70, 27), (73, 8)]
    return [h for h, count in heights for _ in range(count)]


# ── Mean ────────────────────────────────────────────────────────────────────

class TestMean:
    """Tests for the two-pass corrected mean."""

    def test_small_integers(self) -> None:
        """Mean equals sum / length for small integer sequences."""
        values: list[int] = []
        for i in range(1, 11):
            values.append(i)
            assert mean(values) == sum(values) / i

    def test_no_rounding_error_with_large_offset(self) -> None:
        """The correction pass removes the first-pass rounding bias."""
        values = [i * 0.01 + 10000000 for i in range(1, 1001)]
        assert mean(values) == 10000000 + 5.005

    def test_bacon_returns(self) -> None:
        assert mean(_bacon_returns()) == pytest.approx(0.009, abs=1e-15)

    def test_spiegel_heights(self) -> None:
        assert mean(_spiegel_heights()) == pytest.approx(67.45, abs=1e-12)

    def test_accepts_series_and_array(self) -> None:
        assert mean(pd.Series([1.0, 2.0, 3.0])) == 2.0
        assert mean(np.array([1.0, 2.0, 3.0])) == 2.0

    def test_empty_raises(self) -> None:
        with pytest.raises(InvalidInput, match="sequence of numbers"):
            mean([])

    def test_non_finite_raises(self) -> None:
        with pytest.raises(InvalidInput):
            mean([1.0, np.nan])


# ── Variance / standard deviation ──────────────────────────────────────────

class TestVariance:
    """Tests for variance and sample variance."""

    def test_single_value_nan(self) -> None:
        assert np.isnan(variance([1]))
        assert np.isnan(sample_variance([1]))

    def test_translation_invariance(self) -> None:
        """Var(X + a) == Var(X), even with a large offset."""
        assert variance([1e9 + 4, 1e9 + 7, 1e9 + 13, 1e9 + 16]) == 22.5
        assert variance([4, 7, 13, 16]) == 22.5
        assert sample_variance([1e9 + 4, 1e9 + 7, 1e9 + 13, 1e9 + 16]) == 30
        assert sample_variance([4, 7, 13, 16]) == 30

    def test_bacon_returns(self) -> None:
        assert variance(_bacon_returns()) == pytest.approx(0.035974 / 24, rel=1e-12)

    def test_spiegel_heights(self) -> None:
        assert variance(_spiegel_heights()) == pytest.approx(8.527499999999993, rel=1e-13)

    def test_matches_numpy(self) -> None:
        rng = np.random.RandomState(42)
        x = rng.normal(0.001, 0.02, 500)
        assert variance(x) == pytest.approx(np.var(x), rel=1e-12)
        assert sample_variance(x) == pytest.approx(np.var(x, ddof=1), rel=1e-12)


class TestStddev:
    """Tests for stddev and sample stddev."""

    def test_single_value_nan(self) -> None:
        assert np.isnan(stddev([1]))
        assert np.isnan(sample_stddev([1]))

    def test_square_root_of_variance(self) -> None:
        values = [1]
        for i in range(2, 11):
            values.append(i)
            assert stddev(values) == math.sqrt(variance(values))
            assert sample_stddev(values) == math.sqrt(sample_variance(values))

    def test_wikipedia_example(self) -> None:
        assert stddev([2, 4, 4, 4, 5, 5, 7, 9]) == 2

    def test_bacon_sample_stddev(self) -> None:
        expected = math.sqrt(0.035974 / 23)
        assert sample_stddev(_bacon_returns()) == pytest.approx(expected, rel=1e-12)


# ── Skewness / kurtosis ─────────────────────────────────────────────────────

class TestSkewness:
    """Tests for skewness and sample skewness."""

    def test_degenerate_lengths_nan(self) -> None:
        assert np.isnan(skewness([1]))
        assert np.isnan(skewness([1, 2]))
        assert np.isnan(sample_skewness([1]))
        assert np.isnan(sample_skewness([1, 2]))

    def test_zero_variance_nan(self) -> None:
        assert np.isnan(skewness([5, 5, 5, 5]))

    def test_spiegel_heights(self) -> None:
        heights = _spiegel_heights()
        assert skewness(heights) == pytest.approx(-0.10815437112298999, rel=1e-12)
        assert sample_skewness(heights) == pytest.approx(-0.10980840870973678, rel=1e-12)

    def test_bacon_returns(self) -> None:
        n = 24
        expected = -114.99 / (math.pow(math.sqrt(359.74 / n), 3) * n)
        assert skewness(_bacon_returns()) == pytest.approx(expected, rel=1e-12)

    def test_matches_scipy(self) -> None:
        rng = np.random.RandomState(7)
        x = rng.standard_t(5, 300)
        assert skewness(x) == pytest.approx(scipy_stats.skew(x), rel=1e-10)
        assert sample_skewness(x) == pytest.approx(scipy_stats.skew(x, bias=False), rel=1e-10)


class TestKurtosis:
    """Tests for kurtosis and sample kurtosis."""

    def test_degenerate_lengths_nan(self) -> None:
        for values in ([1], [1, 2], [1, 2, 3]):
            assert np.isnan(kurtosis(values))
            assert np.isnan(sample_kurtosis(values))

    def test_zero_variance_nan(self) -> None:
        assert np.isnan(kurtosis([3, 3, 3, 3, 3]))

    def test_spiegel_heights(self) -> None:
        heights = _spiegel_heights()
        assert kurtosis(heights) == pytest.approx(2.741758968539624, rel=1e-12)
        assert sample_kurtosis(heights) == pytest.approx(2.7908529272488636, rel=1e-12)

    def test_joanes_gill_sample_kurtosis(self) -> None:
        x = [10, 11, 12, 12, 12, 13, 13, 13, 13, 13, 13, 14, 14, 14, 14, 15, 15, 15, 16, 17]
        assert sample_kurtosis(x) == pytest.approx(3.274318984817186, rel=1e-12)

    def test_wikipedia_kurtosis(self) -> None:
        x = [0, 3, 4, 1, 2, 3, 0, 2, 1, 3, 2, 0, 2, 2, 3, 2, 5, 2, 3, 999]
        assert kurtosis(x) == pytest.approx(18.051426543784185, rel=1e-12)

    def test_matches_scipy(self) -> None:
        rng = np.random.RandomState(7)
        x = rng.standard_t(5, 300)
        # fisher=False -> non-excess kurtosis (normal = 3)
        assert kurtosis(x) == pytest.approx(scipy_stats.kurtosis(x, fisher=False), rel=1e-10)
        expected = scipy_stats.kurtosis(x, fisher=False, bias=False)
        assert sample_kurtosis(x) == pytest.approx(expected, rel=1e-10)


# ── Joint summaries ─────────────────────────────────────────────────────────

class TestMomentSummaries:
    """Separately called moments agree with the joint summaries."""

    def test_population_consistency(self) -> None:
        x = _bacon_returns()
        summary = moments(x)
        assert summary.mean == mean(x)
        assert summary.variance == variance(x)
        assert summary.stddev == stddev(x)
        assert summary.skewness == skewness(x)
        assert summary.kurtosis == kurtosis(x)

    def test_sample_consistency(self) -> None:
        x = _spiegel_heights()
        summary = sample_moments(x)
        assert summary.mean == mean(x)
        assert summary.variance == sample_variance(x)
        assert summary.stddev == sample_stddev(x)
        assert summary.skewness == sample_skewness(x)
        assert summary.kurtosis == sample_kurtosis(x)

    def test_single_value(self) -> None:
        summary = sample_moments([4.0])
        assert summary.mean == 4.0
        assert np.isnan(summary.variance)
        assert np.isnan(summary.kurtosis)


# ── Partial moments ─────────────────────────────────────────────────────────

class TestPartialMoments:
    """Tests for hpm and lpm."""

    def test_lpm_of_negative_values_is_mean(self) -> None:
        negative: list[int] = []
        positive: list[int] = []
        for i in range(1, 11):
            negative.append(-i)
            positive.append(i)
            assert lpm(negative, 1, 0.0) == mean(positive)

    def test_hpm_of_positive_values_is_mean(self) -> None:
        positive = list(range(1, 11))
        assert hpm(positive, 1, 0.0) == mean(positive)

    def test_bacon_downside_potential(self) -> None:
        assert lpm(_bacon_returns(), 1, 0.005) == pytest.approx(0.329 / 24, rel=1e-12)

    def test_bacon_upside_potential(self) -> None:
        assert hpm(_bacon_returns(), 1, 0.005) == pytest.approx(0.425 / 24, rel=1e-12)

    def test_second_order(self) -> None:
        assert lpm([-1, -2, 3], 2, 0) == pytest.approx(5 / 3)
        assert hpm([-1, -2, 3], 2, 0) == pytest.approx(3)

    def test_invalid_order_raises(self) -> None:
        with pytest.raises(InvalidInput, match="positive integer"):
            lpm([1.0], 1.1, 0)

    def test_missing_threshold_raises(self) -> None:
        with pytest.raises(InvalidInput, match="must be a number"):
            hpm([1.0], 1, None)


# ── Percentile ──────────────────────────────────────────────────────────────

class TestPercentile:
    """Tests for percentile."""

    def test_interpolation(self) -> None:
        assert percentile([4, 1, 3, 2], 0.5) == 2.5
        assert percentile([1, 2, 3, 4], 0.0) == 1
        assert percentile([1, 2, 3, 4], 1.0) == 4

    def test_matches_numpy_linear(self) -> None:
        rng = np.random.RandomState(3)
        x = rng.normal(size=101)
        for p in (0.01, 0.05, 0.25, 0.5, 0.9, 0.99):
            assert percentile(x, p) == pytest.approx(np.percentile(x, 100 * p), rel=1e-12)

    def test_out_of_range_raises(self) -> None:
        with pytest.raises(InvalidInput, match="bounded between 0 and 1"):
            percentile([1, 2], 1.5)
