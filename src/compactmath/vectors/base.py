"""Behaviour shared by Vector2, Vector3 and Vector4."""

import logging
import operator
from typing import Iterator, TypeVar

import numpy as np

from compactmath.constants import FLOAT, FLOAT_MAX, FLOAT_MIN, INFINITY
from compactmath.core.formatting import format_tuple
from compactmath.core.value import CompactValue, constant, ieee, is_scalar

logger = logging.getLogger(__name__)

VB = TypeVar("VB", bound="VectorBase")

COMPONENT_NAMES = "xyzw"

# size -> concrete vector class, filled in by __init_subclass__
_VECTOR_TYPES: dict[int, type["VectorBase"]] = {}


def vector_type(size: int) -> type["VectorBase"]:
    """Return the registered vector class with ``size`` components."""
    try:
        return _VECTOR_TYPES[size]
    except KeyError:
        raise ValueError(f"No vector type with {size} components") from None


def _component(index: int) -> property:
    def fget(self) -> float:
        return float(self._v[index])

    def fset(self, value: float) -> None:
        self._v[index] = value

    return property(fget, fset, doc=f"Component {COMPONENT_NAMES[index]}.")


def _swizzle(*indices: int) -> property:
    """Read/write property for a sub-vector such as ``xz`` or ``xyw``."""
    picks = list(indices)

    def fget(self):
        return vector_type(len(picks))._wrap(self._v[picks])

    def fset(self, value) -> None:
        if not isinstance(value, VectorBase) or len(value) != len(picks):
            raise ValueError(f"Expected a {len(picks)}-component vector")
        self._v[picks] = value._v

    name = "".join(COMPONENT_NAMES[i] for i in indices)
    return property(fget, fset, doc=f"Sub-vector {name}.")


class VectorBase(CompactValue):
    """An N-component float32 vector.

    Accepts no arguments (zero vector), a single scalar (every component set
    to it) or any mix of scalars and smaller vectors totalling N components:
    ``Vector4(Vector2(1, 2), 3, 4)``.
    """

    __slots__ = ()

    SIZE = 0

    ZERO = constant()
    ONE = constant(1.0)
    MIN = constant(FLOAT_MIN)
    MAX = constant(FLOAT_MAX)
    POSITIVE_INFINITY = constant(INFINITY)
    NEGATIVE_INFINITY = constant(-INFINITY)

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.SIZE:
            cls.SHAPE = (cls.SIZE,)
            _VECTOR_TYPES[cls.SIZE] = cls

    def __init__(self, *args):
        n = self.SIZE
        if not args:
            self._v = np.zeros(n, dtype=FLOAT)
            return
        if len(args) == 1 and is_scalar(args[0]):
            self._v = np.full(n, args[0], dtype=FLOAT)
            return
        parts = []
        for arg in args:
            if isinstance(arg, VectorBase):
                parts.extend(arg._v.tolist())
            elif is_scalar(arg):
                parts.append(arg)
            else:
                raise TypeError(
                    f"{type(self).__name__} components must be numbers or "
                    f"vectors, got {type(arg).__name__}"
                )
        if len(parts) != n:
            raise ValueError(
                f"{type(self).__name__} needs {n} components, got {len(parts)}"
            )
        self._v = np.array(parts, dtype=FLOAT)

    # -- Sequence protocol ---------------------------------------------

    def _check_index(self, index) -> int:
        i = operator.index(index)
        if not 0 <= i < self.SIZE:
            raise IndexError(
                f"{type(self).__name__} index {i} out of range [0, {self.SIZE})"
            )
        return i

    def __getitem__(self, index) -> float:
        return float(self._v[self._check_index(index)])

    def __setitem__(self, index, value: float) -> None:
        self._v[self._check_index(index)] = value

    def __len__(self) -> int:
        return self.SIZE

    def __iter__(self) -> Iterator[float]:
        return iter(self._v.tolist())

    def __str__(self) -> str:
        return format_tuple(self._v.tolist())

    # -- Arithmetic ----------------------------------------------------

    @ieee
    def __mul__(self, other):
        if is_scalar(other):
            return self._wrap(self._v * FLOAT(other))
        if type(other) is type(self):
            return self._wrap(self._v * other._v)
        return NotImplemented

    @ieee
    def __rmul__(self, other):
        if is_scalar(other):
            return self._wrap(FLOAT(other) * self._v)
        return NotImplemented

    @ieee
    def __truediv__(self, other):
        if is_scalar(other):
            return self._wrap(self._v / FLOAT(other))
        if type(other) is type(self):
            return self._wrap(self._v / other._v)
        return NotImplemented

    @ieee
    def __imul__(self, other):
        if is_scalar(other):
            self._v *= FLOAT(other)
        elif type(other) is type(self):
            self._v *= other._v
        else:
            return NotImplemented
        return self

    @ieee
    def __itruediv__(self, other):
        if is_scalar(other):
            self._v /= FLOAT(other)
        elif type(other) is type(self):
            self._v /= other._v
        else:
            return NotImplemented
        return self

    # -- Metrics -------------------------------------------------------

    def dot(self, other) -> float:
        """Dot product. Also usable as ``VectorN.dot(u, v)``."""
        return float(np.dot(self._v, other._v))

    def magnitude_squared(self) -> float:
        return float(np.dot(self._v, self._v))

    def magnitude(self) -> float:
        return float(np.sqrt(np.dot(self._v, self._v)))

    def sum_values(self) -> float:
        return float(self._v.sum(dtype=FLOAT))

    def normalized(self: VB) -> VB:
        """Unit-length copy; the zero vector normalises to itself."""
        m = np.sqrt(np.dot(self._v, self._v))
        if m > 0:
            return self._wrap(self._v / m)
        logger.debug("normalized() on zero-length %s", type(self).__name__)
        return self._wrap(np.zeros_like(self._v))

    def normalize(self) -> None:
        """Scale to unit length in place; a zero vector is left untouched."""
        m = np.sqrt(np.dot(self._v, self._v))
        if m > 0:
            self._v /= m

    def clamp(self: VB, lo, hi) -> VB:
        """Clamp each component to ``[lo, hi]`` (scalars or vectors)."""
        lo = lo._v if isinstance(lo, VectorBase) else FLOAT(lo)
        hi = hi._v if isinstance(hi, VectorBase) else FLOAT(hi)
        return self._wrap(np.minimum(np.maximum(self._v, lo), hi).astype(FLOAT))

    @ieee
    def angle(self, other) -> float:
        """Angle in radians between two vectors, 0 if either has no length."""
        denom = np.sqrt(np.dot(self._v, self._v)) * np.sqrt(np.dot(other._v, other._v))
        if denom == 0:
            return 0.0
        cos_a = np.clip(np.dot(self._v, other._v) / denom, FLOAT(-1.0), FLOAT(1.0))
        return float(np.arccos(cos_a))

    @ieee
    def projection(self: VB, against: VB) -> VB:
        """Projection of this vector onto ``against``: (A.B / B.B) * B."""
        factor = np.dot(self._v, against._v) / np.dot(against._v, against._v)
        return self._wrap(against._v * factor)

    # -- Distances -----------------------------------------------------

    def distance_squared(self, other) -> float:
        d = self._v - other._v
        return float(np.dot(d, d))

    def distance(self, other) -> float:
        d = self._v - other._v
        return float(np.sqrt(np.dot(d, d)))

    def within_range(self, other, radius: float) -> bool:
        r = FLOAT(radius)
        return bool(self.distance_squared(other) <= r * r)

    def distance_squared_to_line(self, start, end) -> float:
        """Squared perpendicular distance from this point to the line start-end.

        A degenerate line (``start == end``) measures the distance to ``start``.
        """
        ap = self._v - start._v
        ab = end._v - start._v
        ab_sq = np.dot(ab, ab)
        if ab_sq == 0:
            return float(np.dot(ap, ap))
        offset = ap - ab * (np.dot(ap, ab) / ab_sq)
        return float(np.dot(offset, offset))

    def distance_to_line(self, start, end) -> float:
        return float(np.sqrt(FLOAT(self.distance_squared_to_line(start, end))))
