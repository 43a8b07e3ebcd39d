"""Moments engine - two-pass corrected statistical moments.

Every moment is derived from the same corrected sums of deviations
from the two-pass mean (Neely, 1966; Pébay et al., 2016), so that
values returned by separate calls are consistent with each other and
with :func:`moments` / :func:`sample_moments`.

Accumulation is done with explicit loops over Python floats so the
order of the additions is fixed.
"""
from __future__ import annotations

import logging
import math
from typing import Any

import numpy as np

from ..types import MomentSummary
from ..validation import (
    assert_bounded_number,
    assert_non_empty_number_sequence,
    assert_number,
    assert_positive_integer,
)

logger = logging.getLogger(__name__)


def _corrected_mean(values: list[float]) -> float:
    n = len(values)
    total = 0.0
    for v in values:
        total += v
    tmp_mean = total / n

    # Second pass: residual sum corrects first-pass rounding
    residual = 0.0
    for v in values:
        residual += v - tmp_mean
    return (total + residual) / n


def _central_sums(values: list[float]) -> tuple[int, float, float, float, float]:
    """Return ``(n, mean, S2, S3, S4)`` for the deviations from the mean.

    ``Sk`` is the corrected k-th order sum of deviations, where the
    correction terms remove the bias of a mean that does not exactly
    center the data.
    """
    n = len(values)
    m = _corrected_mean(values)

    sum_diff = 0.0
    sum_square = 0.0
    sum_cube = 0.0
    sum_bisquare = 0.0
    for v in values:
        diff = v - m
        square = diff * diff
        sum_bisquare += square * square
        sum_cube += diff * square
        sum_square += square
        sum_diff += diff

    sum_diff_sq = sum_diff * sum_diff
    nn = n * n
    s2 = sum_square - (sum_diff * sum_diff) / n
    s3 = sum_cube - (2 * sum_diff * sum_square / n) + (2 * sum_diff_sq * sum_diff / nn)
    s4 = (
        sum_bisquare
        - (4 * sum_diff * sum_cube / n)
        + (6 * sum_diff_sq * sum_square / nn)
        - (3 * sum_diff_sq * sum_diff_sq / (nn * n))
    )
    return n, m, s2, s3, s4


def _sqrt(x: float) -> float:
    if math.isnan(x) or x < 0:
        return np.nan
    return math.sqrt(x)


def _population(n: int, m: float, s2: float, s3: float, s4: float) -> MomentSummary:
    if n == 1:
        logger.debug("moments: single observation, higher moments undefined")
        return MomentSummary(m, np.nan, np.nan, np.nan, np.nan)

    var = s2 / n
    skew = np.nan
    kurt = np.nan
    if var == 0:
        logger.debug("moments: zero variance, skewness and kurtosis undefined")
    else:
        if n > 2:
            skew = s3 / (n * math.sqrt(var) * var)
        if n > 3:
            kurt = s4 / (n * var * var)
    return MomentSummary(m, var, _sqrt(var), skew, kurt)


def _sample(summary: MomentSummary, n: int) -> MomentSummary:
    if n == 1:
        return summary

    sample_var = summary.variance * n / (n - 1)
    sample_skew = np.nan
    sample_kurt = np.nan
    if not math.isnan(summary.skewness):
        sample_skew = summary.skewness * math.sqrt(n * (n - 1)) / (n - 2)
    if not math.isnan(summary.kurtosis):
        sample_kurt = (n - 1) / ((n - 2) * (n - 3)) * (
            (n + 1) * summary.kurtosis - 3 * (n - 1)
        ) + 3
    return MomentSummary(summary.mean, sample_var, _sqrt(sample_var), sample_skew, sample_kurt)


def moments(x: Any) -> MomentSummary:
    """Population mean, variance, standard deviation, skewness and kurtosis.

    Parameters
    ----------
    x : array-like
        Non-empty sequence of finite numbers.

    Returns
    -------
    MomentSummary
        Degenerate moments are NaN: variance for ``n == 1``, skewness
        for ``n <= 2``, kurtosis for ``n <= 3``, and skewness/kurtosis
        when the variance is exactly zero.

    Raises
    ------
    InvalidInput
        If ``x`` is not a non-empty sequence of finite numbers.
    """
    values = assert_non_empty_number_sequence(x).tolist()
    return _population(*_central_sums(values))


def sample_moments(x: Any) -> MomentSummary:
    """Bias-corrected counterpart of :func:`moments`.

    Examples
    --------
    >>> sample_moments([2, 4, 4, 4, 5, 5, 7, 9]).variance
    4.571428571428571
    """
    values = assert_non_empty_number_sequence(x).tolist()
    n = len(values)
    return _sample(_population(*_central_sums(values)), n)


def mean(x: Any) -> float:
    """Arithmetic mean, two-pass corrected.

    Examples
    --------
    >>> mean([1, 2, 3, 4])
    2.5
    """
    return _corrected_mean(assert_non_empty_number_sequence(x).tolist())


def variance(x: Any) -> float:
    """Population variance. NaN for a single observation."""
    return moments(x).variance


def sample_variance(x: Any) -> float:
    """Sample variance ``variance * n / (n - 1)``. NaN for a single observation."""
    return sample_moments(x).variance


def stddev(x: Any) -> float:
    """Population standard deviation."""
    return moments(x).stddev


def sample_stddev(x: Any) -> float:
    """Sample standard deviation."""
    return sample_moments(x).stddev


def skewness(x: Any) -> float:
    """Population skewness (third standardized moment)."""
    return moments(x).skewness


def sample_skewness(x: Any) -> float:
    """Sample skewness ``skewness * sqrt(n(n-1)) / (n-2)``."""
    return sample_moments(x).skewness


def kurtosis(x: Any) -> float:
    """Population kurtosis, non-excess (normal = 3)."""
    return moments(x).kurtosis


def sample_kurtosis(x: Any) -> float:
    """Sample kurtosis (Joanes & Gill type G2, shifted back by 3)."""
    return sample_moments(x).kurtosis


def hpm(x: Any, n: int, t: float) -> float:
    """Higher partial moment of order ``n`` about threshold ``t``.

    Parameters
    ----------
    x : array-like
        Non-empty sequence of finite numbers.
    n : int
        Order of the moment (non-negative integer).
    t : float
        Threshold.

    Returns
    -------
    float
        Two-pass mean of ``max(0, x_i - t) ** n``.
    """
    values = assert_non_empty_number_sequence(x).tolist()
    order = assert_positive_integer(n)
    threshold = assert_number(t)
    return _corrected_mean([max(0.0, v - threshold) ** order for v in values])


def lpm(x: Any, n: int, t: float) -> float:
    """Lower partial moment of order ``n`` about threshold ``t``.

    Returns
    -------
    float
        Two-pass mean of ``max(0, t - x_i) ** n``.
    """
    values = assert_non_empty_number_sequence(x).tolist()
    order = assert_positive_integer(n)
    threshold = assert_number(t)
    return _corrected_mean([max(0.0, threshold - v) ** order for v in values])


def percentile(x: Any, p: float) -> float:
    """Percentile by linear interpolation between order statistics.

    Uses the ``C = 1`` convention (rank ``p * (n - 1)``), which is also
    numpy's default ``linear`` method.

    Parameters
    ----------
    x : array-like
        Non-empty sequence of finite numbers.
    p : float
        Percentile in ``[0, 1]``.

    Examples
    --------
    >>> percentile([1, 2, 3, 4], 0.5)
    2.5
    """
    values = sorted(assert_non_empty_number_sequence(x).tolist())
    p = assert_bounded_number(p, 0, 1)
    if p == 1:
        return values[-1]

    rank = p * (len(values) - 1)
    lo = math.floor(rank)
    hi = math.ceil(rank)
    return values[lo] + (rank - lo) * (values[hi] - values[lo])
