"""Shared storage, equality and buffer I/O for every compact value type.

Each concrete type keeps its components in ``self._v``, a float32 numpy
array of fixed shape (``SHAPE``). Component order in that array is the
interop layout used by the buffer functions.
"""

import functools
import numbers
from typing import Any, MutableSequence, Optional, Sequence, TypeVar

import numpy as np
from numpy.typing import NDArray

from compactmath.core.buffers import (
    components_from_bytes,
    read_components,
    write_components,
)
from compactmath.core.config_loader import get_settings

V = TypeVar("V", bound="CompactValue")


def ieee(func):
    """Run ``func`` with numpy floating-point warnings silenced.

    Division by zero and overflow produce inf/nan as IEEE 754 defines.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return func(*args, **kwargs)
    return wrapper


def is_scalar(value: Any) -> bool:
    return isinstance(value, numbers.Real)


class constant:
    """Class attribute that returns a new instance on every access.

    ``Vector3.ZERO`` is built from the stored constructor arguments each time,
    so callers are free to mutate what they receive.
    """

    def __init__(self, *args: Any):
        self._args = args

    def __set_name__(self, owner, name):
        self._name = name

    def __get__(self, instance, owner):
        return owner(*self._args)


class CompactValue:
    """Base class: a fixed-shape float32 array with value semantics."""

    __slots__ = ("_v",)

    SHAPE: tuple[int, ...] = ()

    # numpy scalars on the left defer to our reflected operators
    __array_ufunc__ = None

    _v: NDArray[np.float32]

    @classmethod
    def _wrap(cls: type[V], data: NDArray[np.float32]) -> V:
        """Adopt ``data`` (already float32 and ``SHAPE``) without copying."""
        obj = cls.__new__(cls)
        obj._v = data
        return obj

    @classmethod
    def component_count(cls) -> int:
        return int(np.prod(cls.SHAPE))

    # -- Copy / export -------------------------------------------------

    def copy(self: V) -> V:
        return self._wrap(self._v.copy())

    def to_array(self) -> NDArray[np.float32]:
        """Independent numpy copy of the components."""
        return self._v.copy()

    def to_list(self) -> list:
        return self._v.tolist()

    def tobytes(self) -> bytes:
        return self._v.tobytes()

    @classmethod
    def from_bytes(cls: type[V], data: bytes) -> V:
        values = components_from_bytes(data, cls.component_count())
        return cls._wrap(values.reshape(cls.SHAPE))

    @classmethod
    def from_buffer(cls: type[V], buffer: Sequence[float] | Any, offset: int = 0) -> V:
        """Read the components in layout order starting at ``offset``."""
        values = read_components(buffer, cls.component_count(), offset)
        return cls._wrap(values.reshape(cls.SHAPE))

    def write_to(self, buffer: MutableSequence[float], offset: int = 0) -> None:
        write_components(self._v, buffer, offset)

    # -- Equality ------------------------------------------------------

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def __hash__(self):
        return hash((type(self).__name__, tuple(self._v.ravel().tolist())))

    def is_close(self, other, tolerance: Optional[float] = None) -> bool:
        """Component-wise comparison within an absolute tolerance.

        Falls back to ``Settings.tolerance`` when no tolerance is given.
        """
        if type(other) is not type(self):
            return False
        if tolerance is None:
            tolerance = get_settings().tolerance
        return bool(np.allclose(self._v, other._v, rtol=0.0, atol=tolerance))

    # -- Same-shape arithmetic -----------------------------------------

    @ieee
    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._wrap(self._v + other._v)

    @ieee
    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._wrap(self._v - other._v)

    @ieee
    def __iadd__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        self._v += other._v
        return self

    @ieee
    def __isub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        self._v -= other._v
        return self

    def __neg__(self):
        return self._wrap(-self._v)

    def __pos__(self):
        return self.copy()

    def negate(self) -> None:
        """Negate every component in place."""
        np.negative(self._v, out=self._v)

    def __repr__(self):
        args = ", ".join(repr(v) for v in self._v.ravel().tolist())
        return f"{type(self).__name__}({args})"
