"""portfolio_analytics metrics - returns, drawdown, risk and Sharpe ratio metrics."""

from .performance import cagr, cumulative_return, gain_to_pain_ratio
from .drawdowns import (
    conditional_drawdown,
    max_drawdown,
    pain_index,
    top_drawdowns,
    ulcer_index,
)
from .risk import value_at_risk
from .sharpe_ratio import (
    bias_adjusted_sharpe_ratio,
    double_sharpe_ratio,
    minimum_track_record_length,
    probabilistic_sharpe_ratio,
    sharpe_ratio,
    sharpe_ratio_confidence_interval,
    sharpe_ratio_statistics,
    sharpe_ratio_variance,
)

__all__ = [
    # Performance
    "cumulative_return",
    "cagr",
    "gain_to_pain_ratio",
    # Drawdowns
    "max_drawdown",
    "top_drawdowns",
    "ulcer_index",
    "pain_index",
    "conditional_drawdown",
    # Risk
    "value_at_risk",
    # Sharpe ratio
    "sharpe_ratio",
    "bias_adjusted_sharpe_ratio",
    "double_sharpe_ratio",
    "sharpe_ratio_variance",
    "sharpe_ratio_statistics",
    "sharpe_ratio_confidence_interval",
    "probabilistic_sharpe_ratio",
    "minimum_track_record_length",
]
