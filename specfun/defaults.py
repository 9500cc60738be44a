"""
Fixed constants for the special-function kernels.

Coefficient tables, tolerances and iteration caps. These belong to the
algorithms that read them and are not meant to be tuned independently.
"""

import math
import numpy as np

PI = math.pi
SQRT_PI = math.sqrt(math.pi)
SQRT_2PI = math.sqrt(2.0 * math.pi)

# ---------------------------------------------------------------------------
# Gamma (Lanczos, g=7, 9 terms; GSL coefficients)
# ---------------------------------------------------------------------------

LANCZOS_G = 7.0
LANCZOS_P = np.asarray(
    [
        0.99999999999980993,
        676.5203681218851,
        -1259.1392167224028,
        771.32342877765313,
        -176.61502916214059,
        12.507343278686905,
        -0.13857109526572012,
        9.9843695780195716e-6,
        1.5056327351493116e-7,
    ],
    dtype=np.float64,
)

# ---------------------------------------------------------------------------
# Log-gamma (6-term rational series)
# ---------------------------------------------------------------------------

GAMMALN_COF = np.asarray(
    [
        76.18009172947146,
        -86.50532032941677,
        24.01409824083091,
        -1.231739572450155,
        0.1208650973866179e-2,
        -0.5395239384953e-5,
    ],
    dtype=np.float64,
)
GAMMALN_SER0 = 1.000000000190015
GAMMALN_SQRT_2PI = 2.5066282746310005

# ---------------------------------------------------------------------------
# Digamma (AS 103: recurrence up to C, then asymptotic tail)
# ---------------------------------------------------------------------------

DIGAMMA_SMALL = 1.0e-5
DIGAMMA_SHIFT = 8.5
DIGAMMA_S3 = 8.33333333e-2
DIGAMMA_S4 = 8.33333333e-3
DIGAMMA_S5 = 3.968253968e-2
EULER_GAMMA_NEG = -0.5772156649

# ---------------------------------------------------------------------------
# Lambert W (Newton fixed point)
# ---------------------------------------------------------------------------

LAMBERT_MAX_ITER = 150
LAMBERT_TOL = 1e-7
LAMBERT_BRANCH_POINT = -1.0 / math.e

# ---------------------------------------------------------------------------
# Inverse gamma
# ---------------------------------------------------------------------------

# gamma(1.461632) == 0.885603, the positive minimum of gamma
IGAMMA_MIN = 0.885603
IGAMMA_C = 0.036534  # sqrt(2*pi)/e - gamma(1.461632)
IGAMMA_SQRT_2PI = 2.506628274631

# ---------------------------------------------------------------------------
# Lower incomplete gamma (power series)
# ---------------------------------------------------------------------------

LOWER_GAMMA_MAX_ITER = 150
LOWER_GAMMA_TOL = 1e-11

# ---------------------------------------------------------------------------
# Incomplete beta (modified Lentz continued fraction) and its inverse
# ---------------------------------------------------------------------------

BETACF_MAX_ITER = 100
BETACF_TOL = 3e-7
BETACF_FPMIN = 1e-30

IBETA_INV_MAX_ITER = 10
IBETA_INV_EPS = 1e-8

# ---------------------------------------------------------------------------
# Error function (Abramowitz & Stegun 7.1.26, |error| <= 1.5e-7)
# ---------------------------------------------------------------------------

ERF_P = 0.3275911
ERF_A1 = 0.254829592
ERF_A2 = -0.284496736
ERF_A3 = 1.421413741
ERF_A4 = -1.453152027
ERF_A5 = 1.061405429
