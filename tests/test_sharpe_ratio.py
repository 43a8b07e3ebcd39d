"""Tests for the Sharpe ratio family, using Bacon's portfolio data."""
import json
import math
from pathlib import Path

import numpy as np
import pytest

from portfolio_analytics import InvalidInput
from portfolio_analytics.metrics.sharpe_ratio import (
    bias_adjusted_sharpe_ratio,
    double_sharpe_ratio,
    minimum_track_record_length,
    probabilistic_sharpe_ratio,
    sharpe_ratio,
    sharpe_ratio_confidence_interval,
    sharpe_ratio_statistics,
    sharpe_ratio_variance,
)
from portfolio_analytics.stats.moments import sample_moments
from portfolio_analytics.transforms.returns import differential_returns

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"

REL = 1e-10


def _curve(returns: list[float]) -> list[float]:
    curve = [100.0]
    for r in returns:
        curve.append(curve[-1] * (1 + r))
    return curve


@pytest.fixture(scope="module")
def bacon() -> dict:
    with open(FIXTURES_DIR / "bacon.json") as f:
        data = json.load(f)
    n = len(data["portfolio_returns"])
    data["portfolio"] = _curve(data["portfolio_returns"])
    data["benchmark"] = _curve(data["benchmark_returns"])
    data["risk_free"] = [100.0] * (n + 1)
    return data


def _pairs(bacon: dict) -> dict[str, tuple[list[float], list[float]]]:
    return {
        "portfolio_vs_risk_free": (bacon["portfolio"], bacon["risk_free"]),
        "benchmark_vs_risk_free": (bacon["benchmark"], bacon["risk_free"]),
        "portfolio_vs_benchmark": (bacon["portfolio"], bacon["benchmark"]),
    }


# ── Point estimates ─────────────────────────────────────────────────────────

class TestSharpeRatio:
    """Tests for sharpe_ratio, its bias adjustment and the double Sharpe ratio."""

    @pytest.mark.parametrize(
        "func",
        [sharpe_ratio, bias_adjusted_sharpe_ratio, double_sharpe_ratio],
        ids=lambda f: f.__name__,
    )
    def test_bacon(self, bacon: dict, func) -> None:
        expected = bacon[func.__name__]
        for key, (p, b) in _pairs(bacon).items():
            assert func(p, b) == pytest.approx(expected[key], rel=REL), key

    def test_mean_over_sample_stddev(self, bacon: dict) -> None:
        diff = np.asarray(differential_returns(bacon["portfolio"], bacon["benchmark"]))
        expected = diff.mean() / diff.std(ddof=1)
        assert sharpe_ratio(bacon["portfolio"], bacon["benchmark"]) == pytest.approx(
            expected, rel=1e-12
        )

    def test_single_point_nan(self) -> None:
        assert np.isnan(sharpe_ratio([100], [100]))
        assert np.isnan(bias_adjusted_sharpe_ratio([100], [100]))
        assert np.isnan(double_sharpe_ratio([100], [100]))

    def test_two_points_nan(self) -> None:
        assert np.isnan(sharpe_ratio([100, 110], [100, 100]))

    def test_zero_variance_nan(self, bacon: dict) -> None:
        assert np.isnan(sharpe_ratio(bacon["portfolio"], bacon["portfolio"]))
        assert np.isnan(double_sharpe_ratio(bacon["portfolio"], bacon["portfolio"]))

    def test_length_mismatch_raises(self) -> None:
        with pytest.raises(InvalidInput, match="same length"):
            sharpe_ratio([100, 110, 120], [100, 100])

    def test_invalid_curve_raises(self) -> None:
        with pytest.raises(InvalidInput):
            sharpe_ratio([100, -110], [100, 100])


class TestSharpeRatioStatistics:
    """Tests for sharpe_ratio_variance and sharpe_ratio_statistics."""

    def test_variance_formula(self) -> None:
        assert sharpe_ratio_variance(10, 0.5, -0.2, 4.0) == pytest.approx(1.2875 / 9, rel=1e-15)

    def test_variance_normal_returns(self) -> None:
        # Zero skewness and kurtosis 3
        assert sharpe_ratio_variance(21, 1.0, 0.0, 3.0) == pytest.approx(1.5 / 20, rel=1e-15)

    def test_variance_too_few_returns(self) -> None:
        assert np.isnan(sharpe_ratio_variance(1, 0.5, 0.0, 3.0))
        assert np.isnan(sharpe_ratio_variance(0, 0.5, 0.0, 3.0))

    def test_variance_invalid_count_raises(self) -> None:
        with pytest.raises(InvalidInput, match="positive integer"):
            sharpe_ratio_variance(-1, 0.5, 0.0, 3.0)

    def test_statistics_consistent(self, bacon: dict) -> None:
        p, b = bacon["portfolio"], bacon["risk_free"]
        sr, sr_var, sr_bias = sharpe_ratio_statistics(p, b)
        _, _, _, skew, kurt = sample_moments(differential_returns(p, b))
        n = len(p) - 1

        assert sr == sharpe_ratio(p, b)
        assert sr_var == pytest.approx(sharpe_ratio_variance(n, sr, skew, kurt), rel=1e-15)
        assert sr / sr_bias == pytest.approx(bias_adjusted_sharpe_ratio(p, b), rel=1e-15)
        assert sr / math.sqrt(sr_var) == pytest.approx(double_sharpe_ratio(p, b), rel=1e-15)

    def test_statistics_degenerate(self) -> None:
        result = sharpe_ratio_statistics([100], [100])
        assert len(result) == 3
        assert all(np.isnan(v) for v in result)


# ── Inference ───────────────────────────────────────────────────────────────

class TestSharpeRatioConfidenceInterval:
    """Tests for sharpe_ratio_confidence_interval."""

    @pytest.mark.parametrize(
        "pair, alpha, expected",
        [
            ("portfolio_vs_risk_free", 0.05, (-0.18934216977548385, 0.6444790811002603)),
            ("benchmark_vs_risk_free", 0.01, (-0.3031469359192987, 0.8263967150313116)),
            ("portfolio_vs_benchmark", 0.10, (-0.384076361052474, 0.16954189384390428)),
        ],
    )
    def test_bacon(self, bacon: dict, pair: str, alpha: float, expected: tuple) -> None:
        p, b = _pairs(bacon)[pair]
        lower, upper = sharpe_ratio_confidence_interval(p, b, alpha)
        assert lower == pytest.approx(expected[0], rel=REL)
        assert upper == pytest.approx(expected[1], rel=REL)

    def test_centered_on_sharpe_ratio(self, bacon: dict) -> None:
        p, b = bacon["portfolio"], bacon["benchmark"]
        lower, upper = sharpe_ratio_confidence_interval(p, b, 0.05)
        assert (lower + upper) / 2 == pytest.approx(sharpe_ratio(p, b), rel=1e-12)

    def test_wider_at_lower_alpha(self, bacon: dict) -> None:
        p, b = bacon["portfolio"], bacon["risk_free"]
        lo95, hi95 = sharpe_ratio_confidence_interval(p, b, 0.05)
        lo99, hi99 = sharpe_ratio_confidence_interval(p, b, 0.01)
        assert lo99 < lo95
        assert hi99 > hi95

    def test_degenerate_nan(self) -> None:
        lower, upper = sharpe_ratio_confidence_interval([100], [100], 0.05)
        assert np.isnan(lower)
        assert np.isnan(upper)

    def test_alpha_out_of_range_raises(self, bacon: dict) -> None:
        with pytest.raises(InvalidInput, match="bounded between 0 and 1"):
            sharpe_ratio_confidence_interval(bacon["portfolio"], bacon["risk_free"], 1.5)


class TestProbabilisticSharpeRatio:
    """Tests for probabilistic_sharpe_ratio."""

    def test_bacon(self, bacon: dict) -> None:
        pairs = _pairs(bacon)
        assert probabilistic_sharpe_ratio(*pairs["portfolio_vs_risk_free"]) == pytest.approx(
            0.85765342264124, rel=REL
        )
        assert probabilistic_sharpe_ratio(
            *pairs["benchmark_vs_risk_free"], 1 / math.sqrt(12)
        ) == pytest.approx(0.45090641544923754, rel=REL)
        assert probabilistic_sharpe_ratio(
            *pairs["portfolio_vs_benchmark"], 0
        ) == pytest.approx(0.2619312699710906, rel=REL)

    def test_half_at_observed_ratio(self, bacon: dict) -> None:
        p, b = bacon["portfolio"], bacon["risk_free"]
        sr = sharpe_ratio(p, b)
        assert probabilistic_sharpe_ratio(p, b, sr) == pytest.approx(0.5, abs=1e-15)

    def test_decreases_with_reference(self, bacon: dict) -> None:
        p, b = bacon["portfolio"], bacon["risk_free"]
        assert probabilistic_sharpe_ratio(p, b, 0.0) > probabilistic_sharpe_ratio(p, b, 0.2)

    def test_degenerate_nan(self, bacon: dict) -> None:
        assert np.isnan(probabilistic_sharpe_ratio([100], [100]))
        assert np.isnan(probabilistic_sharpe_ratio(bacon["portfolio"], bacon["portfolio"]))

    def test_invalid_reference_raises(self, bacon: dict) -> None:
        with pytest.raises(InvalidInput, match="must be a number"):
            probabilistic_sharpe_ratio(bacon["portfolio"], bacon["risk_free"], "0")


class TestMinimumTrackRecordLength:
    """Tests for minimum_track_record_length."""

    def test_bacon(self, bacon: dict) -> None:
        pairs = _pairs(bacon)
        assert minimum_track_record_length(
            *pairs["portfolio_vs_risk_free"], 0.05, 0
        ) == pytest.approx(55.36857732082471, rel=REL)
        assert minimum_track_record_length(
            *pairs["benchmark_vs_risk_free"], 0.05, 1 / math.sqrt(12)
        ) == pytest.approx(4089.385389453716, rel=REL)
        assert minimum_track_record_length(
            *pairs["portfolio_vs_benchmark"], 0.10, 0
        ) == pytest.approx(93.97627557455954, rel=REL)

    def test_default_reference_is_zero(self, bacon: dict) -> None:
        p, b = bacon["portfolio"], bacon["risk_free"]
        assert minimum_track_record_length(p, b, 0.05) == minimum_track_record_length(
            p, b, 0.05, 0.0
        )

    def test_infinite_at_observed_ratio(self, bacon: dict) -> None:
        p, b = bacon["portfolio"], bacon["risk_free"]
        sr = sharpe_ratio(p, b)
        assert minimum_track_record_length(p, b, 0.05, sr) == math.inf

    def test_degenerate_nan(self) -> None:
        assert np.isnan(minimum_track_record_length([100], [100], 0.05))

    def test_alpha_out_of_range_raises(self, bacon: dict) -> None:
        with pytest.raises(InvalidInput, match="bounded between 0 and 1"):
            minimum_track_record_length(bacon["portfolio"], bacon["risk_free"], -0.05)
