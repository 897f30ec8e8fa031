"""Series-based approximations of common mathematical functions.

Functions with a restricted domain return -1 outside it instead of raising.
"""

from __future__ import annotations

import math
from itertools import count, takewhile
from typing import Iterator


def _terms(x: float) -> Iterator[int]:
    """Yield the term indices 1, 2, ... that are below ``x * 10``."""
    limit = x * 10
    return takewhile(lambda k: k < limit, count(1))


def absolute(x: int) -> int:
    """Return the absolute value of an integer."""
    return x if x > 0 else -x


def fabs(x: float) -> float:
    """Return the absolute value of a float."""
    return x if x > 0 else -x


def ln(x: float) -> float:
    """Natural logarithm by the inverse hyperbolic tangent series; -1 for x <= 0."""
    if x <= 0:
        return -1
    term = (x - 1) / (x + 1)
    total = term
    square = term * term
    for k in _terms(x):
        term *= square * (2 * k - 1) / (2 * k + 1)
        total += term
    return 2 * total


def log(base: float, x: float) -> float:
    """Logarithm of ``x`` to ``base``; -1 when the base is at most 1."""
    if base <= 1:
        return -1
    return ln(x) / ln(base)


def lg(x: float) -> float:
    """Base-10 logarithm."""
    return ln(x) / ln(10)


def lb(x: float) -> float:
    """Base-2 logarithm."""
    return ln(x) / ln(2)


def exp(x: float) -> float:
    """Exponential by its Taylor series, summing the terms with index below ``x * 10``."""
    total = 1.0
    term = 1.0
    for k in _terms(x):
        term *= x / k
        total += term
    return total


def power(x: float, y: float) -> float:
    """Raise ``x`` to ``y``.

    Whole exponents are computed by repeated multiplication; fractional ones
    through ``exp`` and ``ln``, returning -1 where the result is undefined.
    """
    if int(y) - y:
        if (x == 0 and y <= 0) or x < 0:
            return -1
        return exp(y * ln(fabs(x)))
    if not y:
        return 1
    negative = y < 0
    result = 1.0
    for _ in range(abs(int(y))):
        result *= x
    if not negative:
        return result
    if result == 0:
        return math.copysign(math.inf, result)
    return 1 / result


def ceil(x: float) -> int:
    """Truncate toward zero and add one if anything was cut off."""
    whole = int(x)
    if whole - x:
        return whole + 1
    return whole


def floor(x: float) -> int:
    """Truncate toward zero."""
    return int(x)


def round_half_up(x: float) -> int:
    """Add one half and truncate."""
    return floor(x + 0.5)


def sqrt(x: float) -> float:
    """Square root through ``exp`` and ``ln``, snapped to whole roots; -1 for x <= 0."""
    if x <= 0:
        return -1
    result = exp(0.5 * ln(fabs(x)))
    rounded = ceil(result)
    return float(rounded) if rounded * rounded == x else result


def hypot(x: float, y: float) -> float:
    """Length of the hypotenuse; -1 when either side is zero."""
    if x == 0 or y == 0:
        return -1
    return sqrt(x * x + y * y)