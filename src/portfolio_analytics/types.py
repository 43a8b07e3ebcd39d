"""Core types for portfolio_analytics.

Value types shared across the engines: drawdown records, moment
summaries, the annualization constants and the report configuration.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, NamedTuple

from .validation import (
    assert_bounded_number,
    assert_enumerated_string,
    assert_number,
    assert_positive_integer,
)

logger = logging.getLogger(__name__)

PERIODS_PER_YEAR: dict[str, int] = {
    "daily": 252,
    "weekly": 52,
    "monthly": 12,
    "quarterly": 4,
    "yearly": 1,
}

DAYS_PER_YEAR = 365.25


class DrawdownRecord(NamedTuple):
    """One drawdown phase of an equity curve.

    Parameters
    ----------
    magnitude : float
        Fractional decline from the high-water mark, in (0, 1).
    start : int
        Index of the high-water mark.
    end : int
        Index of the trough, ``start <= end``.
    """

    magnitude: float
    start: int
    end: int


class MomentSummary(NamedTuple):
    """Jointly computed moments of a numeric sequence.

    Kurtosis is non-excess (a normal distribution gives 3).
    """

    mean: float
    variance: float
    stddev: float
    skewness: float
    kurtosis: float


@dataclass
class AnalyticsConfig:
    """Parameters of a performance report.

    Parameters
    ----------
    periodicity : str, default "daily"
        Spacing of the equity curve, a key of ``PERIODS_PER_YEAR``.
    var_alpha : float, default 0.05
        Tail probability of the value at risk.
    cdd_alpha : float, default 0.9
        Confidence level of the conditional drawdown.
    top_drawdowns : int, default 5
        Number of drawdowns listed.
    sharpe_confidence_alpha : float, default 0.05
        Significance level of the Sharpe ratio confidence interval.
    reference_sharpe_ratio : float, default 0.0
        Sharpe ratio the probabilistic Sharpe ratio and the minimum
        track record length are measured against.
    track_record_alpha : float, default 0.05
        Significance level of the minimum track record length.

    Raises
    ------
    InvalidInput
        If a field is out of its domain.
    """

    periodicity: str = "daily"
    var_alpha: float = 0.05
    cdd_alpha: float = 0.9
    top_drawdowns: int = 5
    sharpe_confidence_alpha: float = 0.05
    reference_sharpe_ratio: float = 0.0
    track_record_alpha: float = 0.05

    def __post_init__(self) -> None:
        assert_enumerated_string(self.periodicity, list(PERIODS_PER_YEAR))
        self.var_alpha = assert_bounded_number(self.var_alpha, 0, 1)
        self.cdd_alpha = assert_bounded_number(self.cdd_alpha, 0, 1)
        self.top_drawdowns = assert_positive_integer(self.top_drawdowns)
        self.sharpe_confidence_alpha = assert_bounded_number(self.sharpe_confidence_alpha, 0, 1)
        self.reference_sharpe_ratio = assert_number(self.reference_sharpe_ratio)
        self.track_record_alpha = assert_bounded_number(self.track_record_alpha, 0, 1)

    @classmethod
    def from_dict(cls, mapping: dict[str, Any]) -> AnalyticsConfig:
        """Build a config from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(mapping) - known
        if unknown:
            logger.warning("AnalyticsConfig: ignoring unknown keys %s", sorted(unknown))
        return cls(**{k: v for k, v in mapping.items() if k in known})
