"""Drawdown metrics.

Maximum drawdown, top-N drawdown decomposition, ulcer and pain
indices and the conditional drawdown of Chekhlov, Uryasev and
Zabarankin (2003).
"""
from __future__ import annotations

import logging
import math
from typing import Any

from .._helpers import sum_loop
from ..stats.moments import mean
from ..transforms.equity import _drawdown_function
from ..types import DrawdownRecord
from ..validation import (
    assert_bounded_number,
    assert_non_empty_positive_number_sequence,
    assert_positive_integer,
)

logger = logging.getLogger(__name__)


def _max_drawdown_interval(
    values: list[float],
    start: int,
    end: int,
) -> tuple[float, int, int]:
    """Maximum drawdown of ``values[start:end + 1]``.

    Returns
    -------
    tuple[float, int, int]
        ``(magnitude, hwm_index, trough_index)``. The first maximum
        found wins ties. ``(-inf, -1, -1)`` when ``end < start``.
    """
    high_water_mark = -math.inf
    idx_high_water_mark = -1
    max_dd = -math.inf
    idx_start = -1
    idx_end = -1

    for i in range(start, end + 1):
        v = values[i]
        if v > high_water_mark:
            high_water_mark = v
            idx_high_water_mark = i
        dd = (high_water_mark - v) / high_water_mark
        if dd > max_dd:
            max_dd = dd
            idx_start = idx_high_water_mark
            idx_end = i

    return max_dd, idx_start, idx_end


def max_drawdown(equity_curve: Any) -> float:
    """Maximum drawdown of an equity curve.

    Parameters
    ----------
    equity_curve : array-like
        Non-empty sequence of positive values.

    Returns
    -------
    float
        Largest peak-to-trough decline as a fraction of the peak, in
        ``[0, 1)``. 0.0 for a non-decreasing curve.

    Examples
    --------
    >>> max_drawdown([1, 2, 1])
    0.5
    """
    values = assert_non_empty_positive_number_sequence(equity_curve).tolist()
    max_dd, _, _ = _max_drawdown_interval(values, 0, len(values) - 1)
    if max_dd == -math.inf:
        return 0.0
    return max_dd


def top_drawdowns(equity_curve: Any, n: int) -> list[DrawdownRecord]:
    """Top ``n`` drawdowns of an equity curve.

    Drawdown #1 is the maximum drawdown; drawdown #j is the maximum
    drawdown found outside the index ranges claimed by drawdowns
    #1..#j-1. The search space is split around each claimed range and
    explored from an explicit stack, so the depth is bounded by ``n``.

    Parameters
    ----------
    equity_curve : array-like
        Non-empty sequence of positive values.
    n : int
        Number of drawdowns requested (non-negative).

    Returns
    -------
    list[DrawdownRecord]
        At most ``n`` records sorted by descending magnitude, ties by
        ascending start index. Only non-zero drawdowns are reported.

    Raises
    ------
    InvalidInput
        If the curve is invalid or ``n`` is not a non-negative integer.

    Examples
    --------
    >>> top_drawdowns([100, 150, 75, 150, 75], 2)
    [DrawdownRecord(magnitude=0.5, start=1, end=2), DrawdownRecord(magnitude=0.5, start=3, end=4)]
    """
    values = assert_non_empty_positive_number_sequence(equity_curve).tolist()
    n = assert_positive_integer(n)
    if n == 0:
        return []

    records: list[DrawdownRecord] = []
    stack = [(0, len(values) - 1, n)]
    while stack:
        start, end, remaining = stack.pop()
        max_dd, dd_start, dd_end = _max_drawdown_interval(values, start, end)

        # A flat interval holds no further drawdown
        if max_dd == 0.0 or max_dd == -math.inf:
            continue
        records.append(DrawdownRecord(max_dd, dd_start, dd_end))

        if remaining == 1:
            continue
        if dd_start > start:
            stack.append((start, dd_start, remaining - 1))
        if dd_end < end:
            stack.append((dd_end, end, remaining - 1))

    logger.debug("top_drawdowns: %d drawdowns found, %d requested", len(records), n)
    records.sort(key=lambda r: (-r.magnitude, r.start))
    return records[:n]


def ulcer_index(equity_curve: Any) -> float:
    """Ulcer index: root mean square of the drawdown function.

    Examples
    --------
    >>> ulcer_index([100, 50])
    0.3535533905932738
    """
    values = assert_non_empty_positive_number_sequence(equity_curve)
    dd = _drawdown_function(values)
    return math.sqrt(mean(dd * dd))


def pain_index(equity_curve: Any) -> float:
    """Pain index: mean of the drawdown function.

    Examples
    --------
    >>> pain_index([100, 50, 25, 12.5])
    0.53125
    """
    values = assert_non_empty_positive_number_sequence(equity_curve)
    return mean(_drawdown_function(values))


def conditional_drawdown(equity_curve: Any, alpha: float) -> float:
    """Conditional drawdown at confidence level ``alpha``.

    Average of the worst ``(1 - alpha)`` fraction of the drawdown
    function, the first point excluded (always 0).

    Parameters
    ----------
    equity_curve : array-like
        Non-empty sequence of positive values.
    alpha : float
        Confidence level in ``[0, 1]``. ``alpha = 0`` gives the mean
        drawdown, ``alpha = 1`` the maximum drawdown.

    Returns
    -------
    float
        Conditional drawdown, 0.0 for a single-point curve.

    Notes
    -----
    Follows Theorem 3.1 of Chekhlov, Uryasev and Zabarankin, Drawdown
    Measure in Portfolio Optimization (2003): with ``k`` the smallest
    rank such that ``alpha <= k/n``, the partial atom at ``k`` is
    weighted by ``k/n - alpha``.
    """
    values = assert_non_empty_positive_number_sequence(equity_curve)
    alpha = assert_bounded_number(alpha, 0, 1)

    dd = sorted(_drawdown_function(values)[1:].tolist())
    n = len(dd)
    if n == 0:
        return 0.0
    if alpha == 1.0:
        return dd[-1]

    k = 1
    while alpha > k / n:
        k += 1
    alpha_dd = dd[k - 1]
    pctile_alpha_dd = k / n

    cdd1 = (pctile_alpha_dd - alpha) * alpha_dd
    cdd2 = sum_loop(dd[k:]) / n
    return (cdd1 + cdd2) / (1 - alpha)
