"""Behaviour shared by every fixed-shape matrix.

Matrices are stored row-major as a (ROWS, COLS) float32 array. Products
look up their result type in a registry keyed by shape, so ``A @ B`` for a
2x3 and a 3x4 matrix is a Matrix2x4 without any per-pair code.
"""

import logging
import operator
from typing import Iterator, TypeVar

import numpy as np

from compactmath.constants import FLOAT
from compactmath.core.errors import SingularMatrixError
from compactmath.core.formatting import format_tuple
from compactmath.core.value import CompactValue, constant, ieee, is_scalar
from compactmath.vectors import VectorBase, vector_type

logger = logging.getLogger(__name__)

M = TypeVar("M", bound="MatrixBase")

# (rows, cols) -> concrete matrix class
_MATRIX_TYPES: dict[tuple[int, int], type["MatrixBase"]] = {}


def matrix_type(rows: int, cols: int) -> type["MatrixBase"]:
    """Return the registered matrix class of the given shape."""
    try:
        return _MATRIX_TYPES[(rows, cols)]
    except KeyError:
        raise ValueError(f"No matrix type with shape {rows}x{cols}") from None


class MatrixBase(CompactValue):
    """A ROWS x COLS float32 matrix.

    Construction:
        ``MatrixRxC()``: all zeros.
        ``MatrixRxC(row0, row1, ...)``: ROWS vectors of COLS components.
        ``MatrixRxC(a, b, c, ...)``: ROWS * COLS scalars, row-major.
    Square shapes also take a single scalar placed on the diagonal.
    """

    __slots__ = ()

    ROWS = 0
    COLS = 0

    ZERO = constant()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.ROWS and cls.COLS:
            cls.SHAPE = (cls.ROWS, cls.COLS)
            _MATRIX_TYPES[cls.SHAPE] = cls

    def __init__(self, *args):
        r, c = self.ROWS, self.COLS
        name = type(self).__name__
        if not args:
            self._v = np.zeros((r, c), dtype=FLOAT)
        elif len(args) == 1 and r == c and is_scalar(args[0]):
            self._v = np.eye(r, dtype=FLOAT) * FLOAT(args[0])
        elif len(args) == r and all(isinstance(a, VectorBase) for a in args):
            if any(len(a) != c for a in args):
                raise ValueError(f"{name} rows must be {c}-component vectors")
            self._v = np.stack([a._v for a in args]).astype(FLOAT)
        elif len(args) == r * c and all(is_scalar(a) for a in args):
            self._v = np.array(args, dtype=FLOAT).reshape(r, c)
        else:
            raise ValueError(
                f"{name} takes no arguments, {r} row vectors or {r * c} scalars"
            )

    @property
    def shape(self) -> tuple[int, int]:
        return (self.ROWS, self.COLS)

    # -- Element access ------------------------------------------------

    def _check_row(self, i) -> int:
        i = operator.index(i)
        if not 0 <= i < self.ROWS:
            raise IndexError(f"Row {i} out of range for {type(self).__name__}")
        return i

    def _check_column(self, j) -> int:
        j = operator.index(j)
        if not 0 <= j < self.COLS:
            raise IndexError(f"Column {j} out of range for {type(self).__name__}")
        return j

    def __getitem__(self, key) -> float:
        r, c = key
        return float(self._v[self._check_row(r), self._check_column(c)])

    def __setitem__(self, key, value: float) -> None:
        r, c = key
        self._v[self._check_row(r), self._check_column(c)] = value

    def row(self, i: int) -> VectorBase:
        return vector_type(self.COLS)._wrap(self._v[self._check_row(i)].copy())

    def set_row(self, i: int, vector: VectorBase) -> None:
        i = self._check_row(i)
        if len(vector) != self.COLS:
            raise ValueError(f"Row must have {self.COLS} components")
        self._v[i] = vector._v

    def column(self, j: int) -> VectorBase:
        return vector_type(self.ROWS)._wrap(self._v[:, self._check_column(j)].copy())

    def set_column(self, j: int, vector: VectorBase) -> None:
        j = self._check_column(j)
        if len(vector) != self.ROWS:
            raise ValueError(f"Column must have {self.ROWS} components")
        self._v[:, j] = vector._v

    def rows(self) -> Iterator[VectorBase]:
        for i in range(self.ROWS):
            yield self.row(i)

    def columns(self) -> Iterator[VectorBase]:
        for j in range(self.COLS):
            yield self.column(j)

    def transposed(self) -> "MatrixBase":
        return matrix_type(self.COLS, self.ROWS)._wrap(self._v.T.copy())

    def __str__(self) -> str:
        return "\n".join(format_tuple(row) for row in self._v.tolist())

    # -- Scaling -------------------------------------------------------

    @ieee
    def __mul__(self, other):
        if is_scalar(other):
            return self._wrap(self._v * FLOAT(other))
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
        return NotImplemented

    @ieee
    def __imul__(self, other):
        if not is_scalar(other):
            return NotImplemented
        self._v *= FLOAT(other)
        return self

    @ieee
    def __itruediv__(self, other):
        if not is_scalar(other):
            return NotImplemented
        self._v /= FLOAT(other)
        return self

    # -- Products ------------------------------------------------------

    @ieee
    def __matmul__(self, other):
        if isinstance(other, MatrixBase):
            if self.COLS != other.ROWS:
                raise ValueError(
                    f"Cannot multiply {type(self).__name__} by "
                    f"{type(other).__name__}: inner dimensions differ"
                )
            return matrix_type(self.ROWS, other.COLS)._wrap(self._v @ other._v)
        if isinstance(other, VectorBase):
            if len(other) != self.COLS:
                raise ValueError(
                    f"Cannot multiply {type(self).__name__} by "
                    f"{type(other).__name__}: need {self.COLS} components"
                )
            return vector_type(self.ROWS)._wrap(self._v @ other._v)
        return NotImplemented

    @ieee
    def __rmatmul__(self, other):
        if isinstance(other, VectorBase):
            if len(other) != self.ROWS:
                raise ValueError(
                    f"Cannot multiply {type(other).__name__} by "
                    f"{type(self).__name__}: need {self.ROWS} components"
                )
            return vector_type(self.COLS)._wrap(other._v @ self._v)
        return NotImplemented

    def multiply(self, other):
        """Named form of ``self @ other``."""
        return operator.matmul(self, other)

    @staticmethod
    def outer(u: VectorBase, v: VectorBase) -> "MatrixBase":
        """Outer product: a len(u) x len(v) matrix with ``m[i, j] = u[i] * v[j]``."""
        return matrix_type(len(u), len(v))._wrap(np.outer(u._v, v._v).astype(FLOAT))


class SquareMatrix(MatrixBase):
    """Operations that only exist for Matrix2, Matrix3 and Matrix4.

    Each shape supplies its own ``determinant`` and ``adjoint`` (transpose of
    the cofactor matrix); ``inverse`` is built on those two.
    """

    __slots__ = ()

    IDENTITY = constant(1.0)

    def trace(self) -> float:
        return float(np.trace(self._v, dtype=FLOAT))

    def diagonal(self) -> VectorBase:
        return vector_type(self.ROWS)._wrap(np.diagonal(self._v).copy())

    def set_diagonal(self, vector: VectorBase) -> None:
        if len(vector) != self.ROWS:
            raise ValueError(f"Diagonal must have {self.ROWS} components")
        np.fill_diagonal(self._v, vector._v)

    def _singular_inverse(self: M) -> M:
        logger.debug("inverse() of singular %s", type(self).__name__)
        raise SingularMatrixError(self.shape)

    @ieee
    def inverse(self: M) -> M:
        """Adjoint divided by the determinant."""
        det = FLOAT(self.determinant())
        if det == 0:
            return self._singular_inverse()
        return self._wrap(self.adjoint()._v / det)
