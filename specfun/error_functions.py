"""
Error function and its inverse.

- erf: Abramowitz & Stegun 7.1.26 rational approximation, max error 1.5e-7
- ierf: Maclaurin series of the inverse error function, 6 terms
"""

import math
from numba import njit

from .defaults import (
    PI,
    SQRT_PI,
    ERF_P,
    ERF_A1,
    ERF_A2,
    ERF_A3,
    ERF_A4,
    ERF_A5,
)
from .signatures import F1_SIG


@njit(F1_SIG, cache=True, fastmath=False, error_model="numpy")
def erf(x):
    """
    Real error function.

    The A&S form is only valid for x >= 0, so it is evaluated at |x| and
    the sign restored (erf is odd).
    """
    if x == 0.0:
        return 0.0
    ax = math.fabs(x)
    t = 1.0 / (1.0 + ERF_P * ax)
    poly = (ERF_A1 * t
            + ERF_A2 * t ** 2
            + ERF_A3 * t ** 3
            + ERF_A4 * t ** 4
            + ERF_A5 * t ** 5)
    y = 1.0 - poly * math.exp(-ax * ax)
    return y if x > 0.0 else -y


@njit(F1_SIG, cache=True, fastmath=False, error_model="numpy")
def ierf(x):
    """
    Inverse real error function on [-1, 1].

        erf^-1(x) = sqrt(pi)/2 * (x + pi/12 x^3 + 7 pi^2/480 x^5 + ...)

    Accuracy falls off towards |x| = 1 where the series converges slowly.
    """
    if math.fabs(x) > 1.0:
        return math.nan
    return 0.5 * SQRT_PI * (x
                            + PI * x ** 3 / 12.0
                            + 7.0 * PI ** 2 * x ** 5 / 480.0
                            + 127.0 * PI ** 3 * x ** 7 / 40320.0
                            + 4369.0 * PI ** 4 * x ** 9 / 5806080.0
                            + 34807.0 * PI ** 5 * x ** 11 / 182476800.0)
