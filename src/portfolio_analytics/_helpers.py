"""Private helpers shared across the engines."""
from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd


def wrap_like(values: np.ndarray, source: Any, offset: int = 0) -> np.ndarray | pd.Series:
    """Return ``values`` in the container type of ``source``.

    A Series input gives a Series on the source index (dropping the first
    ``offset`` labels); anything else gives the ndarray unchanged.
    """
    if isinstance(source, pd.Series):
        return pd.Series(values, index=source.index[offset:], name=source.name)
    return values


def sum_loop(values: list[float]) -> float:
    """Left-to-right float accumulation.

    ``sum()`` on Python 3.12+ and ``np.sum`` both reorder or compensate
    the additions; tail sums here keep the plain running order.
    """
    total = 0.0
    for v in values:
        total += v
    return total
