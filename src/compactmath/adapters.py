"""Explicit conversions between compactmath values and outside representations."""

import numpy as np
from numpy.typing import NDArray

from compactmath.complex_number import Complex
from compactmath.constants import FLOAT
from compactmath.core.value import CompactValue
from compactmath.matrices import matrix_type
from compactmath.vectors import vector_type


def to_numpy(value: CompactValue) -> NDArray[np.float32]:
    """Copy of the components: 1-D for vectors, complex and quaternion, 2-D for matrices."""
    return value.to_array()


def from_numpy(array) -> CompactValue:
    """Build a vector or matrix whose type is picked from the array shape.

    A 1-D array of length 2, 3 or 4 gives a vector and an (R, C) array with
    R and C in 2..4 gives a matrix. Complex numbers and quaternions share
    shapes with vectors, so use ``Complex.from_buffer`` or
    ``Quaternion.from_buffer`` for those.
    """
    data = np.asarray(array, dtype=FLOAT)
    if data.ndim == 1:
        cls = vector_type(data.shape[0])
    elif data.ndim == 2:
        cls = matrix_type(*data.shape)
    else:
        raise ValueError(f"Cannot convert array of shape {data.shape}")
    return cls._wrap(data.copy())


def complex_to_builtin(c: Complex) -> complex:
    return complex(c.re, c.im)


def complex_from_builtin(z: complex) -> Complex:
    return Complex(z.real, z.imag)
