"""Performance report container.

Collects the metrics of one equity curve, optionally measured against
a benchmark, into a :class:`PerformanceReport`.
"""
from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from .metrics.drawdowns import (
    conditional_drawdown,
    max_drawdown,
    pain_index,
    top_drawdowns,
    ulcer_index,
)
from .metrics.performance import cagr, cumulative_return, gain_to_pain_ratio
from .metrics.risk import value_at_risk
from .metrics.sharpe_ratio import (
    bias_adjusted_sharpe_ratio,
    double_sharpe_ratio,
    minimum_track_record_length,
    probabilistic_sharpe_ratio,
    sharpe_ratio,
    sharpe_ratio_confidence_interval,
)
from .types import AnalyticsConfig, DrawdownRecord
from .validation import (
    assert_non_empty_positive_number_sequence,
    assert_same_length_sequences,
)

logger = logging.getLogger(__name__)


@dataclass
class PerformanceReport:
    """Container for the metrics of an equity curve.

    Attributes
    ----------
    equity_curve : np.ndarray
        Validated portfolio values.
    metrics : dict[str, float]
        Scalar metrics keyed by name (cumulative_return, cagr,
        max_drawdown, ...). Sharpe ratio metrics are present only when
        a benchmark was given.
    drawdowns : list[DrawdownRecord]
        Top drawdowns, largest first.
    config : dict[str, Any]
        Configuration used for the report.

    Examples
    --------
    >>> report = build_report([100, 110, 99, 120])
    >>> report.metrics["max_drawdown"]
    0.1
    """

    equity_curve: np.ndarray
    metrics: dict[str, float] = field(default_factory=dict)
    drawdowns: list[DrawdownRecord] = field(default_factory=list)
    config: dict[str, Any] = field(default_factory=dict)

    @property
    def has_benchmark(self) -> bool:
        """Whether Sharpe ratio metrics were computed."""
        return "sharpe_ratio" in self.metrics

    def summary(self) -> str:
        """Generate summary string."""
        lines = [
            "Performance Report",
            "=" * 40,
            f"Periods: {len(self.equity_curve)}",
        ]
        for name, value in self.metrics.items():
            lines.append(f"{name}: {value:.6g}")
        for rank, dd in enumerate(self.drawdowns, start=1):
            lines.append(f"Drawdown #{rank}: {dd.magnitude:.2%} [{dd.start}, {dd.end}]")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "equity_curve": self.equity_curve.tolist(),
            "metrics": dict(self.metrics),
            "drawdowns": [dd._asdict() for dd in self.drawdowns],
            "config": dict(self.config),
        }


def build_report(
    equity_curve: Any,
    benchmark_equity_curve: Any = None,
    config: AnalyticsConfig | None = None,
) -> PerformanceReport:
    """Compute the performance report of an equity curve.

    Parameters
    ----------
    equity_curve : array-like
        Positive portfolio values.
    benchmark_equity_curve : array-like, optional
        Positive benchmark values, same length. Enables the Sharpe
        ratio metrics.
    config : AnalyticsConfig | None
        Report parameters. Defaults to ``AnalyticsConfig()``.

    Returns
    -------
    PerformanceReport
        Report with the metrics, the top drawdowns and the config.

    Raises
    ------
    InvalidInput
        If a curve is invalid or the curves differ in length.
    """
    if config is None:
        config = AnalyticsConfig()

    values = assert_non_empty_positive_number_sequence(equity_curve)
    metrics: dict[str, float] = {
        "cumulative_return": cumulative_return(values),
        "cagr": cagr(values, config.periodicity),
        "max_drawdown": max_drawdown(values),
        "ulcer_index": ulcer_index(values),
        "pain_index": pain_index(values),
        "conditional_drawdown": conditional_drawdown(values, config.cdd_alpha),
        "value_at_risk": value_at_risk(values, config.var_alpha),
        "gain_to_pain_ratio": gain_to_pain_ratio(values),
    }

    if benchmark_equity_curve is not None:
        benchmark = assert_non_empty_positive_number_sequence(benchmark_equity_curve)
        assert_same_length_sequences(values, benchmark)
        lower, upper = sharpe_ratio_confidence_interval(
            values, benchmark, config.sharpe_confidence_alpha
        )
        metrics.update(
            {
                "sharpe_ratio": sharpe_ratio(values, benchmark),
                "bias_adjusted_sharpe_ratio": bias_adjusted_sharpe_ratio(values, benchmark),
                "double_sharpe_ratio": double_sharpe_ratio(values, benchmark),
                "sharpe_ratio_lower_bound": lower,
                "sharpe_ratio_upper_bound": upper,
                "probabilistic_sharpe_ratio": probabilistic_sharpe_ratio(
                    values, benchmark, config.reference_sharpe_ratio
                ),
                "minimum_track_record_length": minimum_track_record_length(
                    values, benchmark, config.track_record_alpha, config.reference_sharpe_ratio
                ),
            }
        )

    drawdowns = top_drawdowns(values, config.top_drawdowns)
    logger.info(
        "Built performance report: %d periods, %d metrics, %d drawdowns",
        len(values),
        len(metrics),
        len(drawdowns),
    )
    return PerformanceReport(
        equity_curve=values,
        metrics=metrics,
        drawdowns=drawdowns,
        config=dataclasses.asdict(config),
    )
