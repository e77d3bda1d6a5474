"""Single-precision scalar helpers: trig, logs, clamping, statistics.

Every function takes and returns plain Python floats but evaluates in
float32 so results match the component arithmetic of the value types.
"""

import logging
from math import factorial
from typing import Callable, Protocol, Sequence, TypeVar

import numpy as np

from compactmath.constants import DEG_TO_RAD, FLOAT, LN2, LN10, RAD_TO_DEG

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _f32(func: Callable[..., np.floating], *args: float) -> float:
    # IEEE results (inf, nan) are the contract here, not warnings
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(func(*(FLOAT(a) for a in args)))


# Trigonometry

def sin(a: float) -> float:
    return _f32(np.sin, a)


def cos(a: float) -> float:
    return _f32(np.cos, a)


def tan(a: float) -> float:
    return _f32(np.tan, a)


def asin(a: float) -> float:
    return _f32(np.arcsin, a)


def acos(a: float) -> float:
    return _f32(np.arccos, a)


def atan(a: float) -> float:
    return _f32(np.arctan, a)


def atan2(y: float, x: float) -> float:
    return _f32(np.arctan2, y, x)


def sinh(a: float) -> float:
    return _f32(np.sinh, a)


def cosh(a: float) -> float:
    return _f32(np.cosh, a)


def tanh(a: float) -> float:
    return _f32(np.tanh, a)


def csc(a: float) -> float:
    return _f32(lambda x: FLOAT(1.0) / np.sin(x), a)


def sec(a: float) -> float:
    return _f32(lambda x: FLOAT(1.0) / np.cos(x), a)


def cot(a: float) -> float:
    return _f32(lambda x: FLOAT(1.0) / np.tan(x), a)


def sinc(a: float) -> float:
    """Unnormalised sinc: sin(a) / a, with sinc(0) == 1."""
    if a == 0.0:
        return 1.0
    return _f32(lambda x: np.sin(x) / x, a)


# Powers and logarithms

def sqrt(a: float) -> float:
    return _f32(np.sqrt, a)


def cbrt(a: float) -> float:
    return _f32(np.cbrt, a)


def exp(a: float) -> float:
    return _f32(np.exp, a)


def pow(base: float, exponent: float) -> float:
    return _f32(np.power, base, exponent)


def log(a: float, base: float | None = None) -> float:
    """Natural logarithm, or logarithm in ``base`` when given."""
    if base is None:
        return _f32(np.log, a)
    return _f32(lambda x, b: np.log(x) / np.log(b), a, base)


def log2(a: float) -> float:
    return _f32(lambda x: np.log(x) / LN2, a)


def log10(a: float) -> float:
    return _f32(lambda x: np.log(x) / LN10, a)


# Clamping and conversions

def abs(a: float) -> float:
    return -a if a < 0 else a


def clamp(n: float, lo: float, hi: float) -> float:
    return max(lo, min(n, hi))


def clamp01(n: float) -> float:
    return max(0.0, min(n, 1.0))


def deg2rad(degrees: float) -> float:
    return _f32(lambda d: d * DEG_TO_RAD, degrees)


def rad2deg(radians: float) -> float:
    return _f32(lambda r: r * RAD_TO_DEG, radians)


def quadratic_roots(a: float, b: float, c: float) -> tuple[float, float]:
    """Roots of a*x^2 + b*x + c, larger-numerator root first.

    A negative discriminant gives ``(nan, nan)``; use Complex.sqrt when the
    complex pair is wanted.
    """
    if a == 0:
        raise ValueError("Not quadratic: leading coefficient is zero")
    a32, b32, c32 = FLOAT(a), FLOAT(b), FLOAT(c)
    disc = b32 * b32 - FLOAT(4.0) * a32 * c32
    if disc < 0:
        logger.debug("quadratic_roots(%s, %s, %s): no real roots", a, b, c)
        return float("nan"), float("nan")
    root = np.sqrt(disc)
    two_a = FLOAT(2.0) * a32
    return float((-b32 + root) / two_a), float((-b32 - root) / two_a)


# Statistics

def mean(values: Sequence[float]) -> float:
    """Arithmetic mean; an empty sequence gives 0."""
    if len(values) == 0:
        return 0.0
    return float(np.mean(np.asarray(values, dtype=FLOAT), dtype=FLOAT))


def var(values: Sequence[float]) -> float:
    """Population variance; an empty sequence gives 0."""
    if len(values) == 0:
        return 0.0
    return float(np.var(np.asarray(values, dtype=FLOAT), dtype=FLOAT))


def stddev(values: Sequence[float]) -> float:
    return sqrt(var(values))


# Series evaluation

class NumericOps(Protocol[T]):
    """The operations taylor() needs from a number-like type."""

    def add(self, left: T, right: T) -> T: ...

    def multiply(self, left: T, right: T) -> T: ...

    def divide(self, value: T, scalar: float) -> T: ...


class OperatorOps:
    """NumericOps backed by the ``+``, ``*`` and ``/`` operators.

    Works for floats, Complex, Quaternion and vectors (component-wise
    product). Matrices need ``@`` for the product; see ``MatrixOps``.
    """

    def add(self, left, right):
        return left + right

    def multiply(self, left, right):
        return left * right

    def divide(self, value, scalar: float):
        return value / scalar


class MatrixOps(OperatorOps):
    """NumericOps for square matrices: products use ``@``."""

    def multiply(self, left, right):
        return left @ right


def taylor(start: T, identity: T, n: int, ops: NumericOps[T] | None = None) -> T:
    """Sum ``identity + x + x^2/2! + ... + x^n/n!`` with ``x = start``.

    With ``identity`` equal to the multiplicative one this is the truncated
    exponential series, which makes it usable for matrix and quaternion
    exponentials as well as plain floats.
    """
    if n < 0:
        raise ValueError(f"Series length must be non-negative, got {n}")
    if ops is None:
        ops = OperatorOps()
    total = identity
    if n >= 1:
        total = ops.add(total, start)
    power = start
    for i in range(2, n + 1):
        power = ops.multiply(power, start)
        total = ops.add(total, ops.divide(power, float(factorial(i))))
    return total
