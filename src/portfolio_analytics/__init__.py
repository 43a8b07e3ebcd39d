"""portfolio_analytics - Portfolio performance analytics.

Pure functions over equity curves (lists, tuples, 1-D arrays or
Series of positive values): return metrics, drawdown decomposition,
distributional statistics and the Sharpe ratio family. Malformed input
raises ``InvalidInput``; mathematically undefined results are NaN.

Top-level exports: every public operation below, plus
``DrawdownRecord``, ``MomentSummary``, ``AnalyticsConfig``,
``PerformanceReport``, ``build_report``, ``load_analytics_config``
and ``InvalidInput``.

Submodules (import directly)::

    portfolio_analytics.stats.moments        - mean, variance, sample_variance, stddev,
                                               sample_stddev, skewness, sample_skewness,
                                               kurtosis, sample_kurtosis, hpm, lpm,
                                               percentile, moments, sample_moments
    portfolio_analytics.stats.distributions  - erf, erfc, normcdf, norminv
    portfolio_analytics.transforms.returns   - arithmetic_returns, differential_returns,
                                               equity_curve
    portfolio_analytics.transforms.equity    - drawdown_function
    portfolio_analytics.metrics.performance  - cumulative_return, cagr, gain_to_pain_ratio
    portfolio_analytics.metrics.drawdowns    - max_drawdown, top_drawdowns, ulcer_index,
                                               pain_index, conditional_drawdown
    portfolio_analytics.metrics.risk         - value_at_risk
    portfolio_analytics.metrics.sharpe_ratio - sharpe_ratio, bias_adjusted_sharpe_ratio,
                                               double_sharpe_ratio, sharpe_ratio_variance,
                                               sharpe_ratio_statistics,
                                               sharpe_ratio_confidence_interval,
                                               probabilistic_sharpe_ratio,
                                               minimum_track_record_length
    portfolio_analytics.blas                 - dsum, ddot
"""

from .types import AnalyticsConfig, DrawdownRecord, MomentSummary
from .validation import InvalidInput
from .blas import ddot, dsum
from .stats import (
    erf,
    erfc,
    hpm,
    kurtosis,
    lpm,
    mean,
    moments,
    normcdf,
    norminv,
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
from .transforms import (
    arithmetic_returns,
    differential_returns,
    drawdown_function,
    equity_curve,
)
from .metrics import (
    bias_adjusted_sharpe_ratio,
    cagr,
    conditional_drawdown,
    cumulative_return,
    double_sharpe_ratio,
    gain_to_pain_ratio,
    max_drawdown,
    minimum_track_record_length,
    pain_index,
    probabilistic_sharpe_ratio,
    sharpe_ratio,
    sharpe_ratio_confidence_interval,
    sharpe_ratio_statistics,
    sharpe_ratio_variance,
    top_drawdowns,
    ulcer_index,
    value_at_risk,
)
from .config import load_analytics_config
from .report import PerformanceReport, build_report

__all__ = [
    # Types
    "AnalyticsConfig",
    "DrawdownRecord",
    "MomentSummary",
    "InvalidInput",
    # BLAS
    "dsum",
    "ddot",
    # Moments
    "mean",
    "variance",
    "sample_variance",
    "stddev",
    "sample_stddev",
    "skewness",
    "sample_skewness",
    "kurtosis",
    "sample_kurtosis",
    "hpm",
    "lpm",
    "percentile",
    "moments",
    "sample_moments",
    # Distributions
    "erf",
    "erfc",
    "normcdf",
    "norminv",
    # Transforms
    "arithmetic_returns",
    "differential_returns",
    "equity_curve",
    "drawdown_function",
    # Performance
    "cumulative_return",
    "cagr",
    "gain_to_pain_ratio",
    # Drawdowns
    "max_drawdown",
    "top_drawdowns",
    "ulcer_index",
    "pain_index",
    "conditional_drawdown",
    # Risk
    "value_at_risk",
    # Sharpe ratio
    "sharpe_ratio",
    "bias_adjusted_sharpe_ratio",
    "double_sharpe_ratio",
    "sharpe_ratio_variance",
    "sharpe_ratio_statistics",
    "sharpe_ratio_confidence_interval",
    "probabilistic_sharpe_ratio",
    "minimum_track_record_length",
    # Reports
    "load_analytics_config",
    "PerformanceReport",
    "build_report",
]
