"""
Factorial, permutations and combinations on float64.

Arguments are floored; nothing is range-checked, so r > n or negative
arguments give whatever the factorial rule (1 for anything below 1)
produces.
"""

import math
from numba import njit

from .signatures import F1_SIG, F2_SIG


@njit(F1_SIG, cache=True, fastmath=False, error_model="numpy")
def factorial(x):
    """
    x! for the integer part of x; 1 for x < 1.

    Overflows to inf past 170!.
    """
    n = math.floor(x)
    s = 1.0
    i = 1.0
    while i <= n:
        s *= i
        if math.isinf(s):
            break
        i += 1.0
    return s


@njit(F2_SIG, cache=True, fastmath=False, error_model="numpy")
def permutations(n, r):
    """Ordered selections of r out of n: n! / (n-r)!."""
    return factorial(n) / factorial(n - r)


@njit(F2_SIG, cache=True, fastmath=False, error_model="numpy")
def combinations(n, r):
    """Unordered selections of r out of n: n! / ((n-r)! r!)."""
    return permutations(n, r) / factorial(r)
