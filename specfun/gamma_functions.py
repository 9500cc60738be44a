"""
Gamma family: gamma, log-gamma, digamma, Lambert W and inverse gamma.

All kernels are scalar float64 -> float64 and never raise; arguments
outside a function's domain give NaN.
"""

import math
from numba import njit

from .defaults import (
    PI,
    SQRT_2PI,
    LANCZOS_G,
    LANCZOS_P,
    GAMMALN_COF,
    GAMMALN_SER0,
    GAMMALN_SQRT_2PI,
    DIGAMMA_SMALL,
    DIGAMMA_SHIFT,
    DIGAMMA_S3,
    DIGAMMA_S4,
    DIGAMMA_S5,
    EULER_GAMMA_NEG,
    LAMBERT_MAX_ITER,
    LAMBERT_TOL,
    LAMBERT_BRANCH_POINT,
    IGAMMA_MIN,
    IGAMMA_C,
    IGAMMA_SQRT_2PI,
)
from .signatures import F1_SIG


# ---------------------------------------------------------------------------
# Gamma
# ---------------------------------------------------------------------------

@njit(F1_SIG, cache=True, fastmath=False, error_model="numpy")
def _lanczos(x):
    # valid for x >= 0.5
    x -= 1.0
    y = LANCZOS_P[0]
    for i in range(1, LANCZOS_P.shape[0]):
        y += LANCZOS_P[i] / (x + i)
    t = x + LANCZOS_G + 0.5
    return SQRT_2PI * t ** (x + 0.5) * math.exp(-t) * y


@njit(F1_SIG, cache=True, fastmath=False, error_model="numpy")
def gamma(x):
    """
    Gamma function Γ(x), Lanczos approximation (g=7, 9 coefficients).

    For x < 0.5 the reflection formula

        Γ(x) = π / (sin(πx) Γ(1-x))

    is used. At non-positive integers sin(πx) is (nearly) zero and the
    result is an infinity or a huge value, as the arithmetic gives.
    """
    if x < 0.5:
        return PI / (math.sin(PI * x) * _lanczos(1.0 - x))
    return _lanczos(x)


@njit(F1_SIG, cache=True, fastmath=False, error_model="numpy")
def gammaln(x):
    """
    ln Γ(x) for x > 0.

    Rational series with 6 coefficients; stays finite for large x where
    gamma() overflows. No domain guard: x <= 0 gives NaN or garbage.
    """
    y = x
    tmp = x + 5.5
    tmp -= (x + 0.5) * math.log(tmp)
    ser = GAMMALN_SER0
    for j in range(GAMMALN_COF.shape[0]):
        y += 1.0
        ser += GAMMALN_COF[j] / y
    return math.log(GAMMALN_SQRT_2PI * ser / x) - tmp


@njit(F1_SIG, cache=True, fastmath=False, error_model="numpy")
def digamma(x):
    """
    Digamma ψ(x) = Γ'(x)/Γ(x), algorithm AS 103.

    NaN for x <= 0. Tiny x uses ψ(x) ~ -γ - 1/x; otherwise x is shifted
    up by the recurrence ψ(x) = ψ(x+1) - 1/x until it reaches 8.5, and
    the asymptotic series finishes the job.
    """
    if x <= 0.0:
        return math.nan
    if x <= DIGAMMA_SMALL:
        return EULER_GAMMA_NEG - 1.0 / x

    y = x
    retval = 0.0
    while y < DIGAMMA_SHIFT:
        retval -= 1.0 / y
        y += 1.0

    r = 1.0 / y
    retval = retval + math.log(y) - 0.5 * r
    r *= r
    retval = retval - r * (DIGAMMA_S3 - r * (DIGAMMA_S4 - r * DIGAMMA_S5))
    return retval


# ---------------------------------------------------------------------------
# Lambert W
# ---------------------------------------------------------------------------

@njit(cache=True, fastmath=False, error_model="numpy")
def lambert(x, principal=True):
    """
    Real Lambert W, the inverse of w*e^w.

    principal=True gives W0 (x > -1/e), principal=False gives W-1
    (-1/e <= x < 0). Newton iteration

        w <- (x e^-w + w^2) / (w + 1)

    from a closed-form seed, stopping once successive iterates agree to
    1e-7. Outside the branch interval the result is NaN.
    """
    if principal:
        if x > 10.0:
            w = math.log(x) - math.log(math.log(x))
        elif x > LAMBERT_BRANCH_POINT:
            w = 0.0
        else:
            return math.nan
    else:
        if x >= LAMBERT_BRANCH_POINT and x <= -0.1:
            w = -2.0
        elif x > -0.1 and x < 0.0:
            w = math.log(-x) - math.log(-math.log(-x))
        else:
            return math.nan

    for _ in range(1, LAMBERT_MAX_ITER):
        old_w = w
        w = (x * math.exp(-w) + w * w) / (w + 1.0)
        if math.fabs(w - old_w) < LAMBERT_TOL:
            break
    return w


# ---------------------------------------------------------------------------
# Inverse gamma
# ---------------------------------------------------------------------------

@njit(cache=True, fastmath=False, error_model="numpy")
def igamma(x, principal=True):
    """
    Inverse of the gamma function: the argument whose gamma is x.

    Γ has its positive minimum 0.885603 at 1.461632, so each value above
    that has two preimages; principal=True returns the one right of the
    minimum, principal=False the one left of it. NaN for x < 0.885603.

    Closed form via Lambert W:

        L = ln((x + c) / sqrt(2π)),   Γ^-1(x) ≈ L / W(L/e) + 1/2

    The approximation is poor for x below about 10.
    """
    if x < IGAMMA_MIN:
        return math.nan
    lx = math.log((x + IGAMMA_C) / IGAMMA_SQRT_2PI)
    return lx / lambert(lx / math.e, principal) + 0.5
