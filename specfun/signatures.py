"""
Numba type signatures shared by the eagerly compiled scalar kernels.

Kernels with an optional branch flag (lambert, igamma) are compiled
lazily instead, so that the default can be omitted at the call site.
"""

from numba import types

F1_SIG = types.float64(
    types.float64,  # x
)

F2_SIG = types.float64(
    types.float64,  # s, a or n
    types.float64,  # x, b or r
)

F3_SIG = types.float64(
    types.float64,  # (a, b, x), or (x, a, b) for betacf
    types.float64,
    types.float64,
)
