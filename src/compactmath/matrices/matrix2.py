"""2x2 matrix."""

import logging

import numpy as np

from compactmath.constants import FLOAT
from compactmath.matrices.base import SquareMatrix

logger = logging.getLogger(__name__)


class Matrix2(SquareMatrix):
    __slots__ = ()

    ROWS = 2
    COLS = 2

    @staticmethod
    def det(a: float, b: float, c: float, d: float) -> float:
        """Determinant of [[a, b], [c, d]]."""
        return float(FLOAT(a) * FLOAT(d) - FLOAT(b) * FLOAT(c))

    @classmethod
    def create_rotation(cls, angle: float) -> "Matrix2":
        """Counter-clockwise rotation by ``angle`` radians."""
        c = np.cos(FLOAT(angle))
        s = np.sin(FLOAT(angle))
        return cls(c, -s, s, c)

    @classmethod
    def from_complex(cls, z) -> "Matrix2":
        """Rotation-scaling form [[re, -im], [im, re]] of a complex number."""
        re, im = z._v
        return cls(re, -im, im, re)

    def determinant(self) -> float:
        (a, b), (c, d) = self._v
        return float(a * d - b * c)

    def adjoint(self) -> "Matrix2":
        (a, b), (c, d) = self._v
        return Matrix2(d, -b, -c, a)

    def _singular_inverse(self) -> "Matrix2":
        # A 2x2 matrix with no inverse inverts to the zero matrix
        logger.debug("inverse() of singular Matrix2, returning zero")
        return Matrix2()
