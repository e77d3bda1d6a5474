"""Single-precision complex numbers and their transcendental functions."""

import numbers
import operator

import numpy as np

from compactmath.constants import FLOAT, HALF_PI, LN2, LN10, PI
from compactmath.core.formatting import format_component, format_signed
from compactmath.core.value import CompactValue, constant, ieee, is_scalar
from compactmath.matrices import Matrix2
from compactmath.vectors import Vector2


def _make(re, im) -> "Complex":
    return Complex._wrap(np.array([re, im], dtype=FLOAT))


def _coerce(value) -> "Complex":
    if isinstance(value, Complex):
        return value
    if is_scalar(value):
        return _make(value, 0.0)
    raise TypeError(f"Expected a real or Complex value, got {type(value).__name__}")


class Complex(CompactValue):
    """A complex number ``re + im*i`` stored as two float32 components."""

    __slots__ = ()

    SHAPE = (2,)

    ZERO = constant(0.0, 0.0)
    ONE = constant(1.0, 0.0)
    I = constant(0.0, 1.0)

    def __init__(self, re: float = 0.0, im: float = 0.0):
        self._v = np.array([re, im], dtype=FLOAT)

    @classmethod
    def imaginary(cls, im: float) -> "Complex":
        return cls(0.0, im)

    @classmethod
    def from_vector(cls, v: Vector2) -> "Complex":
        return cls._wrap(v._v.copy())

    @classmethod
    def from_matrix(cls, m: Matrix2) -> "Complex":
        """Read ``re`` and ``im`` from the first column of a rotation-scaling matrix."""
        return cls._wrap(m._v[:, 0].copy())

    def to_vector(self) -> Vector2:
        return Vector2._wrap(self._v.copy())

    def to_matrix(self) -> Matrix2:
        return Matrix2.from_complex(self)

    # -- Components ----------------------------------------------------

    @property
    def re(self) -> float:
        return float(self._v[0])

    @re.setter
    def re(self, value: float) -> None:
        self._v[0] = value

    @property
    def im(self) -> float:
        return float(self._v[1])

    @im.setter
    def im(self, value: float) -> None:
        self._v[1] = value

    def _check_index(self, index) -> int:
        i = operator.index(index)
        if i not in (0, 1):
            raise IndexError(f"Complex index {i} out of range [0, 2)")
        return i

    def __getitem__(self, index) -> float:
        return float(self._v[self._check_index(index)])

    def __setitem__(self, index, value: float) -> None:
        self._v[self._check_index(index)] = value

    def __str__(self) -> str:
        return format_component(self._v[0]) + format_signed(self._v[1]) + "i"

    # -- Metrics -------------------------------------------------------

    def magnitude_squared(self) -> float:
        re, im = self._v
        return float(re * re + im * im)

    def magnitude(self) -> float:
        re, im = self._v
        return float(np.sqrt(re * re + im * im))

    def angle(self) -> float:
        """Argument in radians, ``atan2(im, re)``."""
        return float(np.arctan2(self._v[1] + FLOAT(0.0), self._v[0]))

    def conjugate(self) -> "Complex":
        return _make(self._v[0], -self._v[1])

    # -- Arithmetic ----------------------------------------------------

    @ieee
    def __add__(self, other):
        if is_scalar(other):
            return _make(self._v[0] + FLOAT(other), self._v[1])
        return super().__add__(other)

    def __radd__(self, other):
        return self.__add__(other)

    @ieee
    def __sub__(self, other):
        if is_scalar(other):
            return _make(self._v[0] - FLOAT(other), self._v[1])
        return super().__sub__(other)

    @ieee
    def __rsub__(self, other):
        if is_scalar(other):
            return _make(FLOAT(other) - self._v[0], -self._v[1])
        return NotImplemented

    @ieee
    def __mul__(self, other):
        if is_scalar(other):
            return self._wrap(self._v * FLOAT(other))
        if isinstance(other, Complex):
            a, b = self._v
            c, d = other._v
            return _make(a * c - b * d, a * d + b * c)
        return NotImplemented

    def __rmul__(self, other):
        if is_scalar(other):
            return self.__mul__(other)
        return NotImplemented

    @ieee
    def __truediv__(self, other):
        if is_scalar(other):
            return self._wrap(self._v / FLOAT(other))
        if isinstance(other, Complex):
            c, d = other._v
            if d == 0 and c != 0:
                return self._wrap(self._v / c)
            a, b = self._v
            m = c * c + d * d
            return _make((a * c + b * d) / m, (b * c - a * d) / m)
        return NotImplemented

    @ieee
    def __rtruediv__(self, other):
        if not is_scalar(other):
            return NotImplemented
        r = FLOAT(other)
        c, d = self._v
        if d == 0 and c != 0:
            return _make(r / c, 0.0)
        m = c * c + d * d
        return _make(r * c / m, -(r * d) / m)

    def __iadd__(self, other):
        result = self.__add__(other)
        if result is NotImplemented:
            return result
        self._v[:] = result._v
        return self

    def __isub__(self, other):
        result = self.__sub__(other)
        if result is NotImplemented:
            return result
        self._v[:] = result._v
        return self

    def __imul__(self, other):
        result = self.__mul__(other)
        if result is NotImplemented:
            return result
        self._v[:] = result._v
        return self

    def __itruediv__(self, other):
        result = self.__truediv__(other)
        if result is NotImplemented:
            return result
        self._v[:] = result._v
        return self

    def __pow__(self, exponent):
        return Complex.pow(self, exponent)

    def __rpow__(self, base):
        if not is_scalar(base):
            return NotImplemented
        return Complex.pow(base, self)

    # -- Transcendental functions --------------------------------------

    @staticmethod
    @ieee
    def sqrt(x) -> "Complex":
        """Principal square root of a real or complex value.

        Negative reals map to the imaginary axis instead of producing NaN.
        """
        if is_scalar(x):
            x = FLOAT(x)
            if x < 0:
                return _make(0.0, np.sqrt(-x))
            return _make(np.sqrt(x), 0.0)
        re, im = x._v
        if im == 0:
            return Complex.sqrt(re)
        m = np.sqrt(re * re + im * im)
        half = FLOAT(0.5)
        return _make(np.sqrt((m + re) * half), np.sign(im) * np.sqrt((m - re) * half))

    @staticmethod
    @ieee
    def exp(z) -> "Complex":
        """``e^re * (cos im + i sin im)``."""
        re, im = _coerce(z)._v
        scale = np.exp(re)
        return _make(scale * np.cos(im), scale * np.sin(im))

    @staticmethod
    @ieee
    def log(z, base=None) -> "Complex":
        """Principal natural logarithm, or the logarithm in ``base``.

        Either argument may be real or complex; negative reals take the
        ``(ln|x|, PI)`` branch.
        """
        if is_scalar(z):
            x = FLOAT(z)
            result = _make(np.log(-x), PI) if x < 0 else _make(np.log(x), 0.0)
        else:
            re, im = z._v
            # -0.0 + 0.0 is +0.0, keeping the argument in (-PI, PI]
            arg = np.arctan2(im + FLOAT(0.0), re)
            result = _make(np.log(re * re + im * im) * FLOAT(0.5), arg)
        if base is None:
            return result
        return result / Complex.log(base)

    @staticmethod
    def log2(z) -> "Complex":
        return Complex.log(z) / LN2

    @staticmethod
    def log10(z) -> "Complex":
        return Complex.log(z) / LN10

    @staticmethod
    @ieee
    def log_i(z) -> "Complex":
        """Logarithm in base ``i``: ``log(z) / log(i)``.

        ``log(i)`` is ``HALF_PI * i``, so this is the natural log measured in
        quarter turns with the real and imaginary parts swapped.
        """
        re, im = Complex.log(z)._v
        return _make(im / HALF_PI, -re / HALF_PI)

    @staticmethod
    @ieee
    def pow(base, exponent) -> "Complex":
        """``base ** exponent`` for real or complex base and exponent.

        Integer exponents use repeated squaring (negative ones invert the
        positive power); anything else goes through ``exp(log(base) * e)``.
        """
        if isinstance(exponent, numbers.Integral) and not isinstance(exponent, bool):
            return _int_pow(_coerce(base), int(exponent))
        if is_scalar(exponent) or isinstance(exponent, Complex):
            return Complex.exp(Complex.log(base) * exponent)
        raise TypeError(f"Unsupported exponent type {type(exponent).__name__}")

    @staticmethod
    @ieee
    def sin(z) -> "Complex":
        re, im = _coerce(z)._v
        return _make(np.sin(re) * np.cosh(im), np.cos(re) * np.sinh(im))

    @staticmethod
    @ieee
    def cos(z) -> "Complex":
        re, im = _coerce(z)._v
        return _make(np.cos(re) * np.cosh(im), -np.sin(re) * np.sinh(im))

    @staticmethod
    @ieee
    def tan(z) -> "Complex":
        re, im = _coerce(z)._v
        two = FLOAT(2.0)
        d = np.cos(two * re) + np.cosh(two * im)
        return _make(np.sin(two * re) / d, np.sinh(two * im) / d)


def _int_pow(z: Complex, e: int) -> Complex:
    if e < 0:
        return 1.0 / _int_pow(z, -e)
    if e == 0:
        return Complex.ONE
    if e == 1:
        return z.copy()
    half = _int_pow(z, e >> 1)
    result = half * half
    if e & 1:
        result = result * z
    return result
