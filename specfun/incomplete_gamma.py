"""
Incomplete gamma functions γ(s, x) and Γ(s, x), non-regularized.
"""

import math
from numba import njit

from .defaults import LOWER_GAMMA_MAX_ITER, LOWER_GAMMA_TOL
from .gamma_functions import gamma
from .signatures import F2_SIG


@njit(F2_SIG, cache=True, fastmath=False, error_model="numpy")
def lower_gamma(s, x):
    """
    Lower incomplete gamma γ(s, x) = ∫_0^x t^(s-1) e^-t dt.

    Alternating power series

        γ(s, x) = Σ_k (-1)^k x^(s+k) / (k! (s+k))

    summed until a term drops below 1e-11. Loses accuracy to cancellation
    for large x. No validation of s; s <= 0 propagates inf/NaN.
    """
    if x == 0.0:
        return 0.0
    t = math.exp(s * math.log(x)) / s
    v = t
    for k in range(1, LOWER_GAMMA_MAX_ITER):
        t = -t * x * (s + k - 1.0) / ((s + k) * k)
        v += t
        if math.fabs(t) < LOWER_GAMMA_TOL:
            break
    return v


@njit(F2_SIG, cache=True, fastmath=False, error_model="numpy")
def upper_gamma(s, x):
    """Upper incomplete gamma Γ(s, x) = Γ(s) - γ(s, x)."""
    return gamma(s) - lower_gamma(s, x)


@njit(F2_SIG, cache=True, fastmath=False, error_model="numpy")
def ilower_gamma(s, x):
    """
    Inverse of lower_gamma in its second argument.

    Not implemented: always returns 0.0. Callers must not rely on it.
    """
    return 0.0
