"""compactmath -- fixed-size float32 vectors, matrices, complex numbers and quaternions."""

import logging

from compactmath.complex_number import Complex
from compactmath.core.errors import CompactMathError, SingularMatrixError
from compactmath.matrices import (
    Matrix2,
    Matrix2x3,
    Matrix2x4,
    Matrix3,
    Matrix3x2,
    Matrix3x4,
    Matrix4,
    Matrix4x2,
    Matrix4x3,
)
from compactmath.quaternion import Quaternion
from compactmath.vectors import Vector2, Vector3, Vector4

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "CompactMathError",
    "Complex",
    "Matrix2",
    "Matrix2x3",
    "Matrix2x4",
    "Matrix3",
    "Matrix3x2",
    "Matrix3x4",
    "Matrix4",
    "Matrix4x2",
    "Matrix4x3",
    "Quaternion",
    "SingularMatrixError",
    "Vector2",
    "Vector3",
    "Vector4",
]
