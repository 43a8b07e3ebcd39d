"""Sharpe ratio family and its inference statistics.

All functions work on the differential returns of a portfolio equity
curve over a benchmark equity curve (use a constant curve for a zero
risk-free rate) and share one set of sample statistics, so the ratio,
its variance and its bias are always consistent.

References
----------
- W. F. Sharpe (1994), The Sharpe Ratio, Journal of Portfolio
  Management 21(1).
- J. D. Opdyke (2007), Comparing Sharpe ratios: so where are the
  p-values?, Journal of Asset Management 8(5).
- H. D. Vinod and M. R. Morey (2000), Confidence intervals and
  hypothesis testing for the Sharpe and Treynor performance measures.
- D. H. Bailey and M. López de Prado (2012), The Sharpe ratio
  efficient frontier, Journal of Risk 15(2).
"""
from __future__ import annotations

import logging
import math
from typing import Any

import numpy as np

from ..stats.distributions import normcdf, norminv
from ..stats.moments import sample_moments
from ..transforms.returns import differential_returns
from ..validation import (
    assert_bounded_number,
    assert_number,
    assert_positive_integer,
)

logger = logging.getLogger(__name__)


def sharpe_ratio_variance(n: int, sr: float, skewness: float, kurtosis: float) -> float:
    """Asymptotic variance of the Sharpe ratio estimator.

    ``(1 + sr^2 * (kurtosis - 1) / 4 - sr * skewness) / (n - 1)``,
    formula 8 of Opdyke (2007), valid for non-normal returns.

    Parameters
    ----------
    n : int
        Number of returns.
    sr : float
        Sharpe ratio.
    skewness : float
        Sample skewness of the returns.
    kurtosis : float
        Sample kurtosis of the returns (non-excess).

    Returns
    -------
    float
        NaN when ``n < 2``.
    """
    n = assert_positive_integer(n)
    if n < 2:
        return np.nan
    return (1 + 0.25 * sr * sr * (kurtosis - 1) - sr * skewness) / (n - 1)


def sharpe_ratio_statistics(
    portfolio_equity_curve: Any,
    benchmark_equity_curve: Any,
) -> tuple[float, float, float]:
    """Sharpe ratio with its estimator variance and small-sample bias.

    Parameters
    ----------
    portfolio_equity_curve : array-like
        Positive portfolio values.
    benchmark_equity_curve : array-like
        Positive benchmark values, same length.

    Returns
    -------
    tuple[float, float, float]
        ``(sr, sr_variance, sr_bias)`` where ``sr`` is the mean over the
        sample standard deviation of the differential returns and
        ``sr_bias = 1 + (kurtosis - 1) / (4n)``. All NaN when fewer than
        two differential returns exist.
    """
    diff = np.asarray(differential_returns(portfolio_equity_curve, benchmark_equity_curve))
    n = len(diff)
    if n < 2:
        logger.warning("sharpe_ratio_statistics: %d differential returns, returning NaN", n)
        return np.nan, np.nan, np.nan

    m, _, sigma, skew, kurt = sample_moments(diff)
    if sigma == 0.0:
        logger.warning("sharpe_ratio_statistics: zero variance of differential returns")
        return np.nan, np.nan, np.nan

    sr = m / sigma
    sr_var = sharpe_ratio_variance(n, sr, skew, kurt)
    sr_bias = 1 + 0.25 * (kurt - 1) / n
    return sr, sr_var, sr_bias


def _sr_stddev(sr_var: float) -> float:
    if math.isnan(sr_var) or sr_var <= 0:
        if not math.isnan(sr_var):
            logger.warning("Sharpe ratio variance <= 0 (%.4f), returning NaN", sr_var)
        return np.nan
    return math.sqrt(sr_var)


def sharpe_ratio(portfolio_equity_curve: Any, benchmark_equity_curve: Any) -> float:
    """Historical Sharpe ratio of a portfolio over a benchmark.

    Mean of the differential returns over their sample standard
    deviation, not annualized.

    Returns
    -------
    float
        NaN when the differential returns have zero variance or fewer
        than two of them exist.
    """
    sr, _, _ = sharpe_ratio_statistics(portfolio_equity_curve, benchmark_equity_curve)
    return sr


def bias_adjusted_sharpe_ratio(
    portfolio_equity_curve: Any,
    benchmark_equity_curve: Any,
) -> float:
    """Sharpe ratio corrected for its small-sample bias.

    ``sr / (1 + (kurtosis - 1) / (4n))``, formula 11b of Opdyke (2007).
    """
    sr, _, sr_bias = sharpe_ratio_statistics(portfolio_equity_curve, benchmark_equity_curve)
    return sr / sr_bias


def double_sharpe_ratio(portfolio_equity_curve: Any, benchmark_equity_curve: Any) -> float:
    """Double Sharpe ratio of Vinod and Morey.

    The Sharpe ratio divided by the standard deviation of its estimator.
    """
    sr, sr_var, _ = sharpe_ratio_statistics(portfolio_equity_curve, benchmark_equity_curve)
    return sr / _sr_stddev(sr_var)


def sharpe_ratio_confidence_interval(
    portfolio_equity_curve: Any,
    benchmark_equity_curve: Any,
    alpha: float,
) -> tuple[float, float]:
    """Two-sided confidence interval of the Sharpe ratio.

    Parameters
    ----------
    portfolio_equity_curve : array-like
        Positive portfolio values.
    benchmark_equity_curve : array-like
        Positive benchmark values, same length.
    alpha : float
        Significance level in ``[0, 1]``, e.g. 0.05 for a 95% interval.

    Returns
    -------
    tuple[float, float]
        ``sr -/+ z_{1 - alpha/2} * sqrt(sr_variance)``.
    """
    alpha = assert_bounded_number(alpha, 0, 1)
    sr, sr_var, _ = sharpe_ratio_statistics(portfolio_equity_curve, benchmark_equity_curve)
    sr_std = _sr_stddev(sr_var)

    z = norminv(1 - alpha / 2)
    return sr - z * sr_std, sr + z * sr_std


def probabilistic_sharpe_ratio(
    portfolio_equity_curve: Any,
    benchmark_equity_curve: Any,
    reference_sharpe_ratio: float = 0.0,
) -> float:
    """Probabilistic Sharpe ratio (PSR).

    Probability that the true Sharpe ratio exceeds
    ``reference_sharpe_ratio``: ``Phi((sr - sr*) / sqrt(sr_variance))``.
    """
    reference = assert_number(reference_sharpe_ratio)
    sr, sr_var, _ = sharpe_ratio_statistics(portfolio_equity_curve, benchmark_equity_curve)
    sr_std = _sr_stddev(sr_var)
    if math.isnan(sr_std):
        return np.nan
    return normcdf((sr - reference) / sr_std)


def minimum_track_record_length(
    portfolio_equity_curve: Any,
    benchmark_equity_curve: Any,
    alpha: float,
    reference_sharpe_ratio: float = 0.0,
) -> float:
    """Minimum track record length (minTRL).

    Number of returns needed for the observed Sharpe ratio to exceed
    ``reference_sharpe_ratio`` at significance level ``alpha``:
    ``1 + sr_variance * (n - 1) * (z_{1 - alpha} / (sr - sr*))^2``.

    Returns
    -------
    float
        Track record length in periods. ``inf`` when the Sharpe ratio
        equals the reference.
    """
    alpha = assert_bounded_number(alpha, 0, 1)
    reference = assert_number(reference_sharpe_ratio)
    sr, sr_var, _ = sharpe_ratio_statistics(portfolio_equity_curve, benchmark_equity_curve)
    if math.isnan(sr):
        return np.nan

    excess = sr - reference
    if excess == 0:
        return np.inf
    n = len(portfolio_equity_curve) - 1
    z = norminv(1 - alpha)
    return 1 + sr_var * (n - 1) * (z / excess) * (z / excess)
