"""
specfun - scalar special functions compiled with numba.

Modules, leaves first:
- error_functions: erf, ierf
- gamma_functions: gamma, gammaln, digamma, lambert, igamma
- incomplete_gamma: lower_gamma, upper_gamma, ilower_gamma
- beta_functions: beta, betacf, regularized_incomplete_beta,
  iregularized_incomplete_beta
- combinatorics: factorial, permutations, combinations
- reductions: plain-python/numpy descriptive reductions

Every special function takes float64 scalars and returns a float64;
domain failures come back as NaN, never as exceptions.
"""

from .error_functions import erf, ierf
from .gamma_functions import gamma, gammaln, digamma, lambert, igamma
from .incomplete_gamma import lower_gamma, upper_gamma, ilower_gamma
from .beta_functions import (
    beta,
    betacf,
    regularized_incomplete_beta,
    iregularized_incomplete_beta,
)
from .combinatorics import factorial, permutations, combinations
from .reductions import (
    total,
    product,
    average,
    gaverage,
    sumsquared,
    sum_xy,
    sse,
    mse,
    covariance,
    variance,
    stddev,
    sample_stddev,
    correlation,
)

# name -> (kernel, number of numeric arguments)
FUNCTIONS: dict[str, tuple] = {
    "erf": (erf, 1),
    "ierf": (ierf, 1),
    "gamma": (gamma, 1),
    "gammaln": (gammaln, 1),
    "digamma": (digamma, 1),
    "lambert": (lambert, 1),
    "igamma": (igamma, 1),
    "lower_gamma": (lower_gamma, 2),
    "upper_gamma": (upper_gamma, 2),
    "ilower_gamma": (ilower_gamma, 2),
    "beta": (beta, 2),
    "regularized_incomplete_beta": (regularized_incomplete_beta, 3),
    "iregularized_incomplete_beta": (iregularized_incomplete_beta, 3),
    "factorial": (factorial, 1),
    "permutations": (permutations, 2),
    "combinations": (combinations, 2),
}

# functions taking the principal/secondary branch flag
BRANCHED = ("lambert", "igamma")

__all__ = [
    # Error functions
    "erf",
    "ierf",
    # Gamma family
    "gamma",
    "gammaln",
    "digamma",
    "lambert",
    "igamma",
    # Incomplete gamma
    "lower_gamma",
    "upper_gamma",
    "ilower_gamma",
    # Beta family
    "beta",
    "betacf",
    "regularized_incomplete_beta",
    "iregularized_incomplete_beta",
    # Combinatorics
    "factorial",
    "permutations",
    "combinations",
    # Reductions
    "total",
    "product",
    "average",
    "gaverage",
    "sumsquared",
    "sum_xy",
    "sse",
    "mse",
    "covariance",
    "variance",
    "stddev",
    "sample_stddev",
    "correlation",
    # Registry
    "FUNCTIONS",
    "BRANCHED",
]
