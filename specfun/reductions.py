"""
Single-pass descriptive reductions over loose sequences.

Elements that are not numeric (bools, None, non-number strings, ...) are
replaced by a neutral value: 0 for sums, 1 for products. Numeric strings
("2.5") count as numbers. Lengths always count every element. Empty input
gives NaN.
"""

from __future__ import annotations

import math
import numbers
import re
from typing import Sequence

import numpy as np


# decimal or exponent notation with optional sign and surrounding whitespace;
# no inf/nan spellings, hex or underscores
NUMERIC_STRING = re.compile(r"\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*", re.ASCII)


def _is_numeric(v) -> bool:
    if isinstance(v, (bool, np.bool_)):
        return False
    if isinstance(v, numbers.Real):
        return True
    if isinstance(v, str):
        return NUMERIC_STRING.fullmatch(v) is not None
    return False


def _as_array(data: Sequence, fill: float) -> np.ndarray:
    return np.asarray(
        [float(v) if _is_numeric(v) else fill for v in data],
        dtype=np.float64,
    )


def total(data: Sequence) -> float:
    """Sum of the elements; non-numeric count as 0."""
    return float(_as_array(data, 0.0).sum())


def product(data: Sequence) -> float:
    """Product of the elements; non-numeric count as 1."""
    return float(_as_array(data, 1.0).prod())


def average(data: Sequence) -> float:
    """Arithmetic mean."""
    if len(data) == 0:
        return float("nan")
    return total(data) / len(data)


def gaverage(data: Sequence) -> float:
    """Geometric mean, product ** (1/n)."""
    if len(data) == 0:
        return float("nan")
    with np.errstate(invalid="ignore"):
        return float(np.power(product(data), 1.0 / len(data)))


def sumsquared(data: Sequence) -> float:
    x = _as_array(data, 0.0)
    return float(np.sum(x * x))


def sum_xy(datax: Sequence, datay: Sequence) -> float:
    """Sum of x_i * y_i over the shorter of the two sequences."""
    n = min(len(datax), len(datay))
    x = _as_array(datax[:n], 0.0)
    y = _as_array(datay[:n], 0.0)
    return float(np.sum(x * y))


def sse(data: Sequence) -> float:
    """Sum of squared deviations from the mean."""
    if len(data) == 0:
        return float("nan")
    x = _as_array(data, 0.0)
    return float(np.sum((x - average(data)) ** 2))


def mse(data: Sequence) -> float:
    if len(data) == 0:
        return float("nan")
    return sse(data) / len(data)


def covariance(datax: Sequence, datay: Sequence) -> float:
    """Population covariance, E[xy] - E[x]E[y]."""
    if len(datax) == 0 or len(datay) == 0:
        return float("nan")
    return sum_xy(datax, datay) / len(datax) - average(datax) * average(datay)


def variance(data: Sequence) -> float:
    """Population variance."""
    return covariance(data, data)


def stddev(data: Sequence) -> float:
    """Population standard deviation."""
    v = variance(data)
    return math.sqrt(v) if v >= 0.0 else float("nan")


def sample_stddev(data: Sequence) -> float:
    """Unbiased (n-1) standard deviation; NaN for fewer than 2 elements."""
    if len(data) < 2:
        return float("nan")
    return math.sqrt(sse(data) / (len(data) - 1))


def correlation(datax: Sequence, datay: Sequence) -> float:
    """Pearson correlation of two equal-length sequences."""
    denom = stddev(datax) * stddev(datay)
    if denom == 0.0:
        return float("nan")
    return covariance(datax, datay) / denom
