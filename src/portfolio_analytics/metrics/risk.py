"""Risk metrics."""
from __future__ import annotations

import logging
import math
from typing import Any

import numpy as np

from ..transforms.returns import _arithmetic_returns
from ..validation import (
    assert_bounded_number,
    assert_non_empty_positive_number_sequence,
)

logger = logging.getLogger(__name__)


def value_at_risk(equity_curve: Any, alpha: float) -> float:
    """Historical value at risk.

    Acerbi and Tasche (2002): with the ``n`` period returns sorted
    ascending and ``w = floor(alpha * n)``, VaR is ``-r_(w)``.

    Parameters
    ----------
    equity_curve : array-like
        Non-empty sequence of positive values.
    alpha : float
        Tail probability in ``[0, 1]``, e.g. 0.05 for 95% VaR.

    Returns
    -------
    float
        Loss at the ``alpha`` quantile as a positive magnitude. NaN when
        fewer than ``1 / alpha`` returns are available.

    Examples
    --------
    >>> value_at_risk([100, 90, 99], 0.5)
    0.1
    """
    values = assert_non_empty_positive_number_sequence(equity_curve)
    alpha = assert_bounded_number(alpha, 0, 1)

    returns = np.sort(_arithmetic_returns(values)[1:])
    w = math.floor(alpha * len(returns))
    if w == 0:
        logger.warning(
            "value_at_risk: %d returns too few for alpha %.4f, returning NaN",
            len(returns),
            alpha,
        )
        return np.nan
    return float(-returns[w - 1])
