"""Fixed-shape float32 matrices from 2x2 to 4x4."""

from compactmath.matrices.base import MatrixBase, SquareMatrix, matrix_type
from compactmath.matrices.matrix2 import Matrix2
from compactmath.matrices.matrix3 import Matrix3
from compactmath.matrices.matrix4 import Matrix4
from compactmath.matrices.rectangular import (
    Matrix2x3,
    Matrix2x4,
    Matrix3x2,
    Matrix3x4,
    Matrix4x2,
    Matrix4x3,
)

__all__ = [
    "MatrixBase",
    "SquareMatrix",
    "Matrix2",
    "Matrix2x3",
    "Matrix2x4",
    "Matrix3",
    "Matrix3x2",
    "Matrix3x4",
    "Matrix4",
    "Matrix4x2",
    "Matrix4x3",
    "matrix_type",
]
