"""Return transforms.

Converts equity curves to period arithmetic returns and rebuilds
equity curves from returns.
"""
from __future__ import annotations

import logging
from typing import Any

import numpy as np
import pandas as pd

from .._helpers import wrap_like
from ..validation import (
    InvalidInput,
    assert_non_empty_positive_number_sequence,
    assert_number,
    assert_same_length_sequences,
)

logger = logging.getLogger(__name__)


def _arithmetic_returns(values: np.ndarray) -> np.ndarray:
    returns = np.empty(len(values))
    returns[0] = np.nan
    returns[1:] = (values[1:] - values[:-1]) / values[:-1]
    return returns


def arithmetic_returns(equity_curve: Any) -> np.ndarray | pd.Series:
    """Period-to-period arithmetic returns of an equity curve.

    Parameters
    ----------
    equity_curve : array-like
        Non-empty sequence of positive values.

    Returns
    -------
    np.ndarray | pd.Series
        Same length as the input. Element 0 is NaN and element ``i`` is
        ``(curve[i] - curve[i-1]) / curve[i-1]``. A Series input keeps
        its index.

    Raises
    ------
    InvalidInput
        If the curve is empty or holds a non-positive value.

    Examples
    --------
    >>> arithmetic_returns([100, 110, 99])
    array([ nan,  0.1, -0.1])
    """
    values = assert_non_empty_positive_number_sequence(equity_curve)
    return wrap_like(_arithmetic_returns(values), equity_curve)


def differential_returns(
    portfolio_equity_curve: Any,
    benchmark_equity_curve: Any,
) -> np.ndarray | pd.Series:
    """Portfolio returns in excess of benchmark returns.

    Parameters
    ----------
    portfolio_equity_curve : array-like
        Positive portfolio values.
    benchmark_equity_curve : array-like
        Positive benchmark values, same length as the portfolio curve.

    Returns
    -------
    np.ndarray | pd.Series
        ``r_p[i] - r_b[i]`` for ``i >= 1``, so one element shorter than
        the curves.
    """
    portfolio = assert_non_empty_positive_number_sequence(portfolio_equity_curve)
    benchmark = assert_non_empty_positive_number_sequence(benchmark_equity_curve)
    assert_same_length_sequences(portfolio, benchmark)

    diff = _arithmetic_returns(portfolio)[1:] - _arithmetic_returns(benchmark)[1:]
    return wrap_like(diff, portfolio_equity_curve, offset=1)


def equity_curve(returns: Any, initial: float = 1.0) -> np.ndarray | pd.Series:
    """Rebuild an equity curve from arithmetic returns.

    Parameters
    ----------
    returns : array-like
        Arithmetic returns as produced by :func:`arithmetic_returns`.
        Element 0 is ignored (it may be NaN).
    initial : float, default 1.0
        Value of the curve at index 0.

    Returns
    -------
    np.ndarray | pd.Series
        ``E_0 = initial`` and ``E_i = E_{i-1} * (1 + r_i)``.
    """
    start = assert_number(initial)
    raw = returns.to_numpy() if isinstance(returns, pd.Series) else np.asarray(returns)
    if raw.ndim != 1 or len(raw) == 0 or raw.dtype.kind not in "iuf":
        raise InvalidInput("input must be a sequence of numbers")
    tail = raw[1:].astype(float)
    if not np.isfinite(tail).all():
        raise InvalidInput("input must be a sequence of numbers")

    values = [start]
    for r in tail.tolist():
        values.append(values[-1] * (1.0 + r))
    return wrap_like(np.array(values), returns)
