"""portfolio_analytics transforms - returns and equity curve computations."""

from .returns import arithmetic_returns, differential_returns, equity_curve
from .equity import drawdown_function

__all__ = [
    "arithmetic_returns",
    "differential_returns",
    "equity_curve",
    "drawdown_function",
]
