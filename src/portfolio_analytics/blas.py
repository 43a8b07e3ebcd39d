"""Level-1 BLAS style reductions.

Unrolled accumulation over plain Python floats, used for the
sum/dot identities of the analytics engines.
"""
from __future__ import annotations

import logging
from typing import Any

from .validation import (
    assert_non_empty_number_sequence,
    assert_same_length_sequences,
)

logger = logging.getLogger(__name__)


def dsum(x: Any) -> float:
    """Sum of the elements of ``x``.

    Parameters
    ----------
    x : array-like
        Non-empty sequence of finite numbers.

    Returns
    -------
    float
        ``x[0] + x[1] + ... + x[n-1]``.

    Examples
    --------
    >>> dsum([1, 2, 3, 4, 5])
    15.0
    """
    values = assert_non_empty_number_sequence(x).tolist()
    n = len(values)

    # Remainder first, then blocks of four
    m = n % 4
    s = 0.0
    for i in range(m):
        s += values[i]
    for i in range(m, n, 4):
        s += values[i] + values[i + 1] + values[i + 2] + values[i + 3]
    return s


def ddot(x: Any, y: Any) -> float:
    """Dot product of ``x`` and ``y``.

    Raises
    ------
    InvalidInput
        If the sequences differ in length.
    """
    xs = assert_non_empty_number_sequence(x).tolist()
    ys = assert_non_empty_number_sequence(y).tolist()
    assert_same_length_sequences(xs, ys)
    n = len(xs)

    m = n % 4
    s = 0.0
    for i in range(m):
        s += xs[i] * ys[i]
    for i in range(m, n, 4):
        s += (
            xs[i] * ys[i]
            + xs[i + 1] * ys[i + 1]
            + xs[i + 2] * ys[i + 2]
            + xs[i + 3] * ys[i + 3]
        )
    return s
