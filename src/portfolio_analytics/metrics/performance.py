"""Performance metrics.

Cumulative return, compound annual growth rate and the gain to pain
ratio of an equity curve.
"""
from __future__ import annotations

import logging
from typing import Any

import numpy as np

from ..stats.moments import lpm, mean
from ..transforms.returns import _arithmetic_returns
from ..types import DAYS_PER_YEAR, PERIODS_PER_YEAR
from ..validation import (
    assert_date_sequence,
    assert_enumerated_string,
    assert_non_empty_positive_number_sequence,
    assert_same_length_sequences,
)

logger = logging.getLogger(__name__)


def cumulative_return(equity_curve: Any) -> float:
    """Cumulative return ``(last - first) / first``.

    Returns
    -------
    float
        NaN when the curve has a single point.

    Examples
    --------
    >>> cumulative_return([100, 110])
    0.1
    """
    values = assert_non_empty_positive_number_sequence(equity_curve)
    if len(values) < 2:
        return np.nan
    return float((values[-1] - values[0]) / values[0])


def cagr(
    equity_curve: Any,
    periodicity: str | None = None,
    *,
    valuation_dates: Any = None,
) -> float:
    """Compound annual growth rate.

    ``(final / initial) ** (1 / years) - 1``, with the number of years
    taken either from the curve periodicity or from the calendar days
    between the first and last valuation dates.

    Parameters
    ----------
    equity_curve : array-like
        Non-empty sequence of positive values.
    periodicity : {"daily", "weekly", "monthly", "quarterly", "yearly"}, optional
        Spacing of the curve; maps to 252, 52, 12, 4 and 1 periods per
        year. Required unless ``valuation_dates`` is given.
    valuation_dates : sequence of dates, optional
        Dates of the curve values, same length as the curve. Elapsed
        days are measured on wall-clock time and divided by 365.25.

    Returns
    -------
    float
        CAGR, NaN when no time elapses.

    Raises
    ------
    InvalidInput
        If the curve is invalid, the periodicity unknown, or the dates
        malformed or of a different length.

    Examples
    --------
    >>> cagr([100, 110, 120], "yearly")
    0.09544511501033215
    """
    values = assert_non_empty_positive_number_sequence(equity_curve)

    if valuation_dates is not None:
        dates = assert_date_sequence(valuation_dates)
        assert_same_length_sequences(values, dates)
        days = (dates[-1] - dates[0]) / np.timedelta64(1, "D")
        years = days / DAYS_PER_YEAR
    else:
        periodicity = assert_enumerated_string(periodicity, list(PERIODS_PER_YEAR))
        years = (len(values) - 1) / PERIODS_PER_YEAR[periodicity]

    if years == 0:
        logger.warning("cagr: zero investment period, returning NaN")
        return np.nan
    return float((values[-1] / values[0]) ** (1 / years) - 1)


def gain_to_pain_ratio(equity_curve: Any) -> float:
    """Gain to pain ratio of Jack Schwager.

    Sum of the returns over the sum of the absolute values of the
    negative returns, computed as ``mean(r) / lpm(r, 1, 0)``.

    Returns
    -------
    float
        NaN for a single-point curve or when no return is negative.
    """
    values = assert_non_empty_positive_number_sequence(equity_curve)
    returns = _arithmetic_returns(values)[1:]
    if len(returns) == 0:
        return np.nan

    numerator = mean(returns)
    denominator = lpm(returns, 1, 0.0)
    if denominator == 0.0:
        logger.warning("gain_to_pain_ratio: no negative returns, returning NaN")
        return np.nan
    return numerator / denominator
