"""Equity curve analytics - the drawdown (underwater) function."""
from __future__ import annotations

import logging
from typing import Any

import numpy as np
import pandas as pd

from .._helpers import wrap_like
from ..validation import assert_non_empty_positive_number_sequence

logger = logging.getLogger(__name__)


def _drawdown_function(values: np.ndarray) -> np.ndarray:
    high_water_mark = np.maximum.accumulate(values)
    return (high_water_mark - values) / high_water_mark


def drawdown_function(equity_curve: Any) -> np.ndarray | pd.Series:
    """Compute the drawdown function of an equity curve.

    Parameters
    ----------
    equity_curve : array-like
        Non-empty sequence of positive values.

    Returns
    -------
    np.ndarray | pd.Series
        ``DD_i = (HWM_i - E_i) / HWM_i`` with ``HWM_i`` the running
        maximum of the curve. Values are in ``[0, 1)`` and exactly 0 at
        each new high-water mark.

    Examples
    --------
    >>> drawdown_function([100, 90, 90, 80, 100])
    array([0. , 0.1, 0.1, 0.2, 0. ])
    """
    values = assert_non_empty_positive_number_sequence(equity_curve)
    return wrap_like(_drawdown_function(values), equity_curve)
