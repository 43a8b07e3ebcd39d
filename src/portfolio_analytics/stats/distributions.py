"""Special functions: error function and standard normal distribution.

References
----------
- W. J. Cody (1969), Rational Chebyshev approximations for the error
  function, Math. Comp. 23(107), 631-637 (CALERF).
- G. Marsaglia (2004), Evaluating the normal distribution, Journal of
  Statistical Software 11(4).
- P. J. Acklam, An algorithm for computing the inverse normal
  cumulative distribution function.
"""
from __future__ import annotations

import logging
import math
import sys

from ..validation import assert_bounded_number

logger = logging.getLogger(__name__)

# erf, |x| <= 0.46875
_ERF_A = (
    3.16112374387056560e00,
    1.13864154151050156e02,
    3.77485237685302021e02,
    3.20937758913846947e03,
    1.85777706184603153e-1,
)
_ERF_B = (
    2.36012909523441209e01,
    2.44024637934444173e02,
    1.28261652607737228e03,
    2.84423683343917062e03,
)

# erfc, 0.46875 < |x| <= 4
_ERFC_C = (
    5.64188496988670089e-1,
    8.88314979438837594e0,
    6.61191906371416295e01,
    2.98635138197400131e02,
    8.81952221241769090e02,
    1.71204761263407058e03,
    2.05107837782607147e03,
    1.23033935479799725e03,
    2.15311535474403846e-8,
)
_ERFC_D = (
    1.57449261107098347e01,
    1.17693950891312499e02,
    5.37181101862009858e02,
    1.62138957456669019e03,
    3.29079923573345963e03,
    4.36261909014324716e03,
    3.43936767414372164e03,
    1.23033935480374942e03,
)

# erfc, |x| > 4
_ERFC_P = (
    3.05326634961232344e-1,
    3.60344899949804439e-1,
    1.25781726111229246e-1,
    1.60837851487422766e-2,
    6.58749161529837803e-4,
    1.63153871373020978e-2,
)
_ERFC_Q = (
    2.56852019228982242e00,
    1.87295284992346047e00,
    5.27905102951428412e-1,
    6.05183413124413191e-2,
    2.33520497626869185e-3,
)

_XSMALL = 1.11e-16
_XBIG = 26.543
_SQRPI = 5.6418958354775628695e-1  # 1/sqrt(pi)

# Acklam's inverse normal coefficients
_NORMINV_A = (
    -3.969683028665376e01,
    2.209460984245205e02,
    -2.759285104469687e02,
    1.383577518672690e02,
    -3.066479806614716e01,
    2.506628277459239e00,
)
_NORMINV_B = (
    -5.447609879822406e01,
    1.615858368580409e02,
    -1.556989798598866e02,
    6.680131188771972e01,
    -1.328068155288572e01,
)
_NORMINV_C = (
    -7.784894002430293e-03,
    -3.223964580411365e-01,
    -2.400758277161838e00,
    -2.549732539343734e00,
    4.374664141464968e00,
    2.938163982698783e00,
)
_NORMINV_D = (
    7.784695709041462e-03,
    3.224671290700398e-01,
    2.445134137142996e00,
    3.754408661907416e00,
)
_P_LOW = 0.02425
_P_HIGH = 1 - _P_LOW

_SQRT2 = 1.4142135623730951
_SQRT2PI = 2.5066282746310002
_LOG_SQRT2PI = 0.91893853320467274178
_LOG_FLOAT_MAX = math.log(sys.float_info.max)

# normcdf saturates to exactly 0 or 1 beyond this; the Taylor form loses
# relative precision well before it, so values just inside may round short of 1
_NORMCDF_CUTOFF = 37.5


def _scaled_exp(y: float, result: float) -> float:
    # exp(-y*y) split as exp(-ysq*ysq) * exp(-del) with ysq = trunc(16y)/16
    ysq = math.trunc(y * 16.0) / 16.0
    delta = (y - ysq) * (y + ysq)
    return math.exp(-ysq * ysq) * math.exp(-delta) * result


def _calerf(x: float, complement: bool) -> float:
    """Evaluate erf(x) or erfc(x) with Cody's near-minimax rational approximations."""
    if math.isnan(x):
        return math.nan
    y = abs(x)

    if y <= 0.46875:
        a, b = _ERF_A, _ERF_B
        ysq = y * y if y >= _XSMALL else 0.0
        erf_y = y * ((((a[4] * ysq + a[0]) * ysq + a[1]) * ysq + a[2]) * ysq + a[3]) / (
            (((ysq + b[0]) * ysq + b[1]) * ysq + b[2]) * ysq + b[3]
        )
        if not complement:
            return -erf_y if x < 0 else erf_y
        result = 1.0 - erf_y
        return 2.0 - result if x < 0 else result

    if y <= 4.0:
        c, d = _ERFC_C, _ERFC_D
        num = (((((((c[8] * y + c[0]) * y + c[1]) * y + c[2]) * y + c[3]) * y + c[4]) * y + c[5]) * y + c[6]) * y + c[7]
        den = (((((((y + d[0]) * y + d[1]) * y + d[2]) * y + d[3]) * y + d[4]) * y + d[5]) * y + d[6]) * y + d[7]
        result = _scaled_exp(y, num / den)
    else:
        result = 0.0
        if y < _XBIG:
            p, q = _ERFC_P, _ERFC_Q
            ysq = 1.0 / (y * y)
            result = ysq * (((((p[5] * ysq + p[0]) * ysq + p[1]) * ysq + p[2]) * ysq + p[3]) * ysq + p[4]) / (
                ((((ysq + q[0]) * ysq + q[1]) * ysq + q[2]) * ysq + q[3]) * ysq + q[4]
            )
            result = (_SQRPI - result) / y
            result = _scaled_exp(y, result)

    # result holds erfc(|x|)
    if not complement:
        result = (0.5 - result) + 0.5
        return -result if x < 0 else result
    return 2.0 - result if x < 0 else result


def erf(x: float) -> float:
    """Error function ``2/sqrt(pi) * integral_0^x exp(-t^2) dt``.

    ``erf(-x) == -erf(x)`` holds exactly.

    Examples
    --------
    >>> erf(0.0)
    0.0
    """
    return _calerf(float(x), complement=False)


def erfc(x: float) -> float:
    """Complementary error function ``1 - erf(x)``.

    ``erfc(-x) == 2 - erfc(x)`` holds exactly.
    """
    return _calerf(float(x), complement=True)


def normcdf(x: float) -> float:
    """Standard normal cumulative distribution function.

    Sums the Taylor series of Marsaglia's ``B`` function until the
    partial sum stops changing in floating point, then returns
    ``0.5 + B(x) * phi(x)``.

    Parameters
    ----------
    x : float
        Real number.

    Returns
    -------
    float
        ``P(Z <= x)`` for a standard normal ``Z``. ``normcdf(0) == 0.5``.
    """
    x = float(x)
    if math.isnan(x):
        return math.nan
    if x > _NORMCDF_CUTOFF:
        return 1.0
    if x < -_NORMCDF_CUTOFF:
        return 0.0

    s = x
    t = 0.0
    b = x
    q = x * x
    i = 1
    while s != t:
        t = s
        i += 2
        b *= q / i
        s = t + b
    return 0.5 + s * math.exp(-0.5 * q - _LOG_SQRT2PI)


def norminv(p: float, extended: bool = False) -> float:
    """Inverse of the standard normal cumulative distribution function.

    Acklam's rational approximation: one rational function on the
    central region ``[0.02425, 0.97575]`` and another on the tails.

    Parameters
    ----------
    p : float
        Probability in ``[0, 1]``.
    extended : bool, default False
        Refine the approximation with one step of Halley's method.

    Returns
    -------
    float
        ``x`` with ``normcdf(x) == p``; ``-inf`` for ``p == 0`` and
        ``inf`` for ``p == 1``.

    Raises
    ------
    InvalidInput
        If ``p`` is not a number in ``[0, 1]``.

    Notes
    -----
    Relative error is below 1.15e-9, and around 1e-15 with ``extended``.
    """
    p = assert_bounded_number(p, 0, 1)

    if p == 0.0:
        return -math.inf
    if p == 1.0:
        return math.inf

    a, b, c, d = _NORMINV_A, _NORMINV_B, _NORMINV_C, _NORMINV_D
    if p < _P_LOW:
        q = math.sqrt(-2 * math.log(p))
        x = (((((c[0] * q + c[1]) * q + c[2]) * q + c[3]) * q + c[4]) * q + c[5]) / (
            (((d[0] * q + d[1]) * q + d[2]) * q + d[3]) * q + 1
        )
    elif p > _P_HIGH:
        q = math.sqrt(-2 * math.log(1 - p))
        x = -(((((c[0] * q + c[1]) * q + c[2]) * q + c[3]) * q + c[4]) * q + c[5]) / (
            (((d[0] * q + d[1]) * q + d[2]) * q + d[3]) * q + 1
        )
    else:
        q = p - 0.5
        r = q * q
        x = (((((a[0] * r + a[1]) * r + a[2]) * r + a[3]) * r + a[4]) * r + a[5]) * q / (
            ((((b[0] * r + b[1]) * r + b[2]) * r + b[3]) * r + b[4]) * r + 1
        )

    if extended:
        cdf = 0.5 * erfc(-x / _SQRT2)
        # Subnormal cdf values carry too few digits for a Halley step
        if cdf < sys.float_info.min or x * x / 2 > _LOG_FLOAT_MAX:
            return x
        e = cdf - p
        u = e * _SQRT2PI * math.exp(x * x / 2)
        x = x - u / (1 + x * u / 2)
    return x
