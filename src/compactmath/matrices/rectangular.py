"""Non-square matrix shapes.

These carry no behaviour of their own: construction, element access,
transposition and products all come from MatrixBase, and the shape registry
gives every product its result type.
"""

from compactmath.matrices.base import MatrixBase


class Matrix2x3(MatrixBase):
    __slots__ = ()
    ROWS = 2
    COLS = 3


class Matrix2x4(MatrixBase):
    __slots__ = ()
    ROWS = 2
    COLS = 4


class Matrix3x2(MatrixBase):
    __slots__ = ()
    ROWS = 3
    COLS = 2


class Matrix3x4(MatrixBase):
    __slots__ = ()
    ROWS = 3
    COLS = 4


class Matrix4x2(MatrixBase):
    __slots__ = ()
    ROWS = 4
    COLS = 2


class Matrix4x3(MatrixBase):
    __slots__ = ()
    ROWS = 4
    COLS = 3
