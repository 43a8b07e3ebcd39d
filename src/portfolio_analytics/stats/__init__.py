"""portfolio_analytics stats - moments and special functions."""

from .moments import (
    hpm,
    kurtosis,
    lpm,
    mean,
    moments,
    percentile,
    sample_kurtosis,
    sample_moments,
    sample_skewness,
    sample_stddev,
    sample_variance,
    skewness,
    stddev,
    variance,
)
from .distributions import erf, erfc, normcdf, norminv

__all__ = [
    # Moments
    "mean",
    "variance",
    "sample_variance",
    "stddev",
    "sample_stddev",
    "skewness",
    "sample_skewness",
    "kurtosis",
    "sample_kurtosis",
    "hpm",
    "lpm",
    "percentile",
    "moments",
    "sample_moments",
    # Distributions
    "erf",
    "erfc",
    "normcdf",
    "norminv",
]
