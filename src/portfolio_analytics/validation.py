"""Input validation for the analytics engines.

Each public operation calls one of the guards below before computing
anything. Guards raise :class:`InvalidInput` with a fixed message and
never return a partially validated value; the sequence guards return
the coerced ``float64`` array so callers validate and convert in one
step.
"""
from __future__ import annotations

import datetime
import logging
import math
from typing import Any, Sequence

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

_NUMBER_TYPES = (int, float, np.integer, np.floating)


class InvalidInput(ValueError):
    """Raised when an input violates a precondition of an operation."""


def _is_number(x: Any) -> bool:
    return isinstance(x, _NUMBER_TYPES) and not isinstance(x, (bool, np.bool_))


def _is_finite(x: Any) -> bool:
    # Python ints beyond the float range cannot be converted
    try:
        return math.isfinite(x)
    except OverflowError:
        return False


def _to_float_array(x: Any, message: str) -> np.ndarray:
    if isinstance(x, pd.Series):
        values = x.to_numpy()
    elif isinstance(x, np.ndarray):
        values = x
    elif isinstance(x, (list, tuple)):
        if not all(_is_number(v) for v in x):
            raise InvalidInput(message)
        try:
            values = np.asarray(x, dtype=float)
        except OverflowError as exc:
            raise InvalidInput(message) from exc
    else:
        raise InvalidInput(message)

    # Booleans, objects and strings are rejected by dtype kind
    if values.ndim != 1 or values.dtype.kind not in "iuf":
        raise InvalidInput(message)
    values = values.astype(float)
    if len(values) == 0 or not np.isfinite(values).all():
        raise InvalidInput(message)
    return values


def assert_non_empty_positive_number_sequence(x: Any) -> np.ndarray:
    """Validate an equity curve.

    Parameters
    ----------
    x : array-like
        List, tuple, 1-D ndarray or Series of finite numbers > 0.

    Returns
    -------
    np.ndarray
        The values as a new float64 array.

    Raises
    ------
    InvalidInput
        If ``x`` is empty, not one-dimensional, or holds a value that is
        not a finite positive number.
    """
    message = "input must be a sequence of positive numbers"
    values = _to_float_array(x, message)
    if (values <= 0).any():
        raise InvalidInput(message)
    return values


def assert_non_empty_number_sequence(x: Any) -> np.ndarray:
    """Validate a non-empty sequence of finite numbers (any sign)."""
    return _to_float_array(x, "input must be a sequence of numbers")


def assert_number(x: Any) -> float:
    """Validate a finite scalar and return it as ``float``."""
    if not _is_number(x) or not _is_finite(x):
        raise InvalidInput("input must be a number")
    return float(x)


def assert_bounded_number(x: Any, lo: float, hi: float) -> float:
    """Validate a finite scalar within the closed interval ``[lo, hi]``."""
    value = assert_number(x)
    if value < lo or value > hi:
        raise InvalidInput(f"input must be bounded between {lo} and {hi}")
    return value


def assert_positive_integer(x: Any) -> int:
    """Validate a non-negative integer.

    Integral floats such as ``3.0`` are accepted and 0 counts as
    positive.

    Returns
    -------
    int
        The validated value.
    """
    message = "input must be a positive integer"
    if not _is_number(x) or not _is_finite(x):
        raise InvalidInput(message)
    if x < 0 or not float(x).is_integer():
        raise InvalidInput(message)
    return int(x)


def assert_enumerated_string(x: Any, allowed: Sequence[str]) -> str:
    """Validate that ``x`` is one of the ``allowed`` strings."""
    if not isinstance(x, str) or x not in allowed:
        raise InvalidInput(
            f"input must be a string equal to any of {','.join(allowed)}"
        )
    return x


def assert_same_length_sequences(a: Sequence[Any], b: Sequence[Any]) -> None:
    """Validate that two sequences have the same length."""
    if len(a) != len(b):
        raise InvalidInput("input must be sequences of same length")


def assert_date_sequence(x: Any) -> pd.DatetimeIndex:
    """Validate a sequence of dates.

    Accepts a ``DatetimeIndex``, a datetime64 Series or ndarray, or a
    list/tuple of ``datetime.date``, ``datetime.datetime``,
    ``pd.Timestamp`` or ``np.datetime64`` values.

    Returns
    -------
    pd.DatetimeIndex
        Timezone-naive index. Aware values keep their wall-clock time.

    Raises
    ------
    InvalidInput
        If any element is not a date or is NaT.
    """
    message = "input must be a sequence of dates"
    if isinstance(x, pd.DatetimeIndex):
        dates = x
    elif isinstance(x, pd.Series) and pd.api.types.is_datetime64_any_dtype(x):
        dates = pd.DatetimeIndex(x)
    elif isinstance(x, np.ndarray) and x.dtype.kind == "M":
        dates = pd.DatetimeIndex(x)
    elif isinstance(x, (list, tuple)) and all(
        isinstance(v, (datetime.date, np.datetime64)) for v in x
    ):
        try:
            dates = pd.DatetimeIndex(pd.to_datetime(list(x)))
        except (TypeError, ValueError) as exc:
            raise InvalidInput(message) from exc
    else:
        raise InvalidInput(message)

    if dates.hasnans:
        raise InvalidInput(message)
    if dates.tz is not None:
        dates = dates.tz_localize(None)
    return dates
