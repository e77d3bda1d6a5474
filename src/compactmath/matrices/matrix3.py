"""3x3 matrix: rotations, embedding of 2x2 transforms, quaternion conversion."""

import numpy as np

from compactmath.constants import FLOAT
from compactmath.core.value import ieee
from compactmath.matrices.base import SquareMatrix


def rotation_block(q) -> np.ndarray:
    """3x3 rotation block for a quaternion with (x, y, z, w) layout.

    Scaled by 2 / |q|^2 so any non-zero quaternion yields a pure rotation;
    the zero quaternion yields the identity.
    """
    x, y, z, w = q._v
    n = x * x + y * y + z * z + w * w
    s = FLOAT(2.0) / n if n > 0 else FLOAT(0.0)
    one = FLOAT(1.0)
    return np.array([
        [one - s * (y * y + z * z), s * (x * y - z * w), s * (x * z + y * w)],
        [s * (x * y + z * w), one - s * (x * x + z * z), s * (y * z - x * w)],
        [s * (x * z - y * w), s * (y * z + x * w), one - s * (x * x + y * y)],
    ], dtype=FLOAT)


class Matrix3(SquareMatrix):
    __slots__ = ()

    ROWS = 3
    COLS = 3

    @classmethod
    def create_rotation_x(cls, angle: float) -> "Matrix3":
        c = np.cos(FLOAT(angle))
        s = np.sin(FLOAT(angle))
        return cls(1, 0, 0,
                   0, c, -s,
                   0, s, c)

    @classmethod
    def create_rotation_y(cls, angle: float) -> "Matrix3":
        c = np.cos(FLOAT(angle))
        s = np.sin(FLOAT(angle))
        return cls(c, 0, s,
                   0, 1, 0,
                   -s, 0, c)

    @classmethod
    def create_rotation_z(cls, angle: float) -> "Matrix3":
        c = np.cos(FLOAT(angle))
        s = np.sin(FLOAT(angle))
        return cls(c, -s, 0,
                   s, c, 0,
                   0, 0, 1)

    @classmethod
    @ieee
    def create_rotation(cls, q) -> "Matrix3":
        """Rotation matrix of a quaternion."""
        return cls._wrap(rotation_block(q))

    @classmethod
    def from_matrix2(cls, m) -> "Matrix3":
        """Embed a 2x2 matrix in the upper-left corner; last row is (0, 0, 1)."""
        out = np.eye(3, dtype=FLOAT)
        out[:2, :2] = m._v
        return cls._wrap(out)

    @classmethod
    def from_matrix4(cls, m) -> "Matrix3":
        """Upper-left 3x3 block of a 4x4 matrix."""
        return cls._wrap(m._v[:3, :3].copy())

    def determinant(self) -> float:
        (a, b, c), (d, e, f), (g, h, i) = self._v
        return float(a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g))

    def adjoint(self) -> "Matrix3":
        (a, b, c), (d, e, f), (g, h, i) = self._v
        return Matrix3(
            e * i - f * h, c * h - b * i, b * f - c * e,
            f * g - d * i, a * i - c * g, c * d - a * f,
            d * h - e * g, b * g - a * h, a * e - b * d,
        )
