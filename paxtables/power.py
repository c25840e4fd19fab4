"""Integer powers by repeated squaring, and n:th roots."""

from __future__ import annotations

import cmath
import math
from numbers import Integral

__all__ = [
    "power",
    "square",
    "cube",
    "abs_power",
    "root",
    "square_root",
    "cube_root",
]


def _one_like(value):
    try:
        return type(value)(1)
    except (TypeError, ValueError):
        return 1


def _reciprocal(value):
    try:
        return 1 / value
    except ZeroDivisionError:
        return math.copysign(math.inf, value) if isinstance(value, float) else math.inf


def _integral_power(value, n: int):
    """Raise value to the integral power n by repeated squaring."""
    if n < 0:
        return _reciprocal(_integral_power(value, -n))
    if n == 0:
        return _one_like(value)
    if n == 1:
        return value
    if n == 2:
        return value * value
    if n == 3:
        return value * value * value

    result = None
    base = value
    while True:
        if n & 1:
            result = base if result is None else result * base
        n >>= 1
        if not n:
            return result
        base *= base


def _real_pow(value, exponent):
    if isinstance(value, complex):
        return value**exponent
    try:
        return math.pow(value, exponent)
    except ValueError:
        return math.nan
    except OverflowError:
        return math.inf


def _integral_valued(n) -> bool:
    return isinstance(n, Integral) or (math.isfinite(n) and n == int(n))


def power(value, n):
    """Return value raised to n; integral n uses repeated multiplication."""
    if _integral_valued(n):
        return _integral_power(value, int(n))
    return _real_pow(value, n)


def square(value):
    """Return value * value."""
    return value * value


def cube(value):
    """Return value * value * value."""
    return value * value * value


def abs_power(value, n):
    """Return the absolute value of value raised to n."""
    return power(-value if value < 0 else value, n)


def square_root(value):
    """Return the square root of value (NaN for negative reals)."""
    if isinstance(value, complex):
        return cmath.sqrt(value)
    if value < 0:
        return math.nan
    return math.sqrt(value)


def cube_root(value):
    """Return the real cube root of value."""
    if value == 0 or not math.isfinite(value):
        return float(value)
    return math.copysign(abs(value) ** (1.0 / 3.0), value)


def _integral_root(value, n: int):
    if n == 0:
        return math.nan
    if n == 1:
        return value
    if n == 2:
        return square_root(value)
    if n == 3:
        return cube_root(value)
    if n < 0:
        return _integral_root(_reciprocal(value), -n)
    if value < 0 and n & 1:
        return -_real_pow(-value, 1.0 / n)
    return _real_pow(value, 1.0 / n)


def root(value, n):
    """Return the n:th root of value.

    n == 0 gives NaN, negative n gives the root of the reciprocal and odd n
    of a negative value gives a negative real root.
    """
    if _integral_valued(n):
        return _integral_root(value, int(n))
    return _real_pow(value, 1.0 / n)