"""4x4 matrix: affine transforms, camera and projection matrices.

Column-vector convention: ``m @ v`` transforms ``v`` and translation lives
in the last column, matching the OpenGL matrix layout. Relative to a
row-vector API (translation in the bottom row), ``create_translation``,
``create_rotation``, ``look_at`` and ``perspective_fov`` are stored
transposed, so their raw buffers are the transpose of such an API's output.
"""

import numpy as np

from compactmath.constants import FLOAT
from compactmath.core.value import ieee
from compactmath.matrices.base import SquareMatrix
from compactmath.matrices.matrix3 import Matrix3, rotation_block


def _minors(m: np.ndarray):
    """2x2 minors of the top two rows (s) and bottom two rows (c)."""
    s0 = m[0, 0] * m[1, 1] - m[1, 0] * m[0, 1]
    s1 = m[0, 0] * m[1, 2] - m[1, 0] * m[0, 2]
    s2 = m[0, 0] * m[1, 3] - m[1, 0] * m[0, 3]
    s3 = m[0, 1] * m[1, 2] - m[1, 1] * m[0, 2]
    s4 = m[0, 1] * m[1, 3] - m[1, 1] * m[0, 3]
    s5 = m[0, 2] * m[1, 3] - m[1, 2] * m[0, 3]

    c5 = m[2, 2] * m[3, 3] - m[3, 2] * m[2, 3]
    c4 = m[2, 1] * m[3, 3] - m[3, 1] * m[2, 3]
    c3 = m[2, 1] * m[3, 2] - m[3, 1] * m[2, 2]
    c2 = m[2, 0] * m[3, 3] - m[3, 0] * m[2, 3]
    c1 = m[2, 0] * m[3, 2] - m[3, 0] * m[2, 2]
    c0 = m[2, 0] * m[3, 1] - m[3, 0] * m[2, 1]
    return (s0, s1, s2, s3, s4, s5), (c0, c1, c2, c3, c4, c5)


def _embed(block: np.ndarray) -> np.ndarray:
    out = np.eye(4, dtype=FLOAT)
    out[:3, :3] = block
    return out


class Matrix4(SquareMatrix):
    __slots__ = ()

    ROWS = 4
    COLS = 4

    @classmethod
    def from_matrix3(cls, m: Matrix3) -> "Matrix4":
        """Embed a 3x3 matrix; last row and column are those of the identity."""
        return cls._wrap(_embed(m._v))

    @classmethod
    def create_translation(cls, v) -> "Matrix4":
        out = np.eye(4, dtype=FLOAT)
        out[:3, 3] = v._v
        return cls._wrap(out)

    @classmethod
    def create_scale(cls, v) -> "Matrix4":
        out = np.eye(4, dtype=FLOAT)
        out[0, 0], out[1, 1], out[2, 2] = v._v
        return cls._wrap(out)

    @classmethod
    def create_rotation_x(cls, angle: float) -> "Matrix4":
        return cls._wrap(_embed(Matrix3.create_rotation_x(angle)._v))

    @classmethod
    def create_rotation_y(cls, angle: float) -> "Matrix4":
        return cls._wrap(_embed(Matrix3.create_rotation_y(angle)._v))

    @classmethod
    def create_rotation_z(cls, angle: float) -> "Matrix4":
        return cls._wrap(_embed(Matrix3.create_rotation_z(angle)._v))

    @classmethod
    @ieee
    def create_rotation(cls, q) -> "Matrix4":
        """Rotation matrix of a quaternion."""
        return cls._wrap(_embed(rotation_block(q)))

    @classmethod
    @ieee
    def look_at(cls, eye, target, up) -> "Matrix4":
        """View matrix for a camera at ``eye`` looking towards ``target``."""
        f = (target - eye).normalized()
        s = f.cross(up).normalized()
        u = s.cross(f)
        out = np.eye(4, dtype=FLOAT)
        out[0, :3] = s._v
        out[1, :3] = u._v
        out[2, :3] = -f._v
        out[0, 3] = -np.dot(s._v, eye._v)
        out[1, 3] = -np.dot(u._v, eye._v)
        out[2, 3] = np.dot(f._v, eye._v)
        return cls._wrap(out)

    @classmethod
    @ieee
    def perspective_fov(cls, fov: float, aspect: float, near: float, far: float) -> "Matrix4":
        """OpenGL perspective projection; ``fov`` is the vertical angle in radians.

        A zero ``fov`` or ``aspect`` produces infinite entries.
        """
        fov, aspect, near, far = (FLOAT(a) for a in (fov, aspect, near, far))
        f = FLOAT(1.0) / np.tan(fov / FLOAT(2.0))
        out = np.zeros((4, 4), dtype=FLOAT)
        out[0, 0] = f / aspect
        out[1, 1] = f
        out[2, 2] = (far + near) / (near - far)
        out[2, 3] = (FLOAT(2.0) * far * near) / (near - far)
        out[3, 2] = -1.0
        return cls._wrap(out)

    def determinant(self) -> float:
        (s0, s1, s2, s3, s4, s5), (c0, c1, c2, c3, c4, c5) = _minors(self._v)
        return float(s0 * c5 - s1 * c4 + s2 * c3 + s3 * c2 - s4 * c1 + s5 * c0)

    def adjoint(self) -> "Matrix4":
        m = self._v
        (s0, s1, s2, s3, s4, s5), (c0, c1, c2, c3, c4, c5) = _minors(m)
        return Matrix4(
            m[1, 1] * c5 - m[1, 2] * c4 + m[1, 3] * c3,
            -m[0, 1] * c5 + m[0, 2] * c4 - m[0, 3] * c3,
            m[3, 1] * s5 - m[3, 2] * s4 + m[3, 3] * s3,
            -m[2, 1] * s5 + m[2, 2] * s4 - m[2, 3] * s3,

            -m[1, 0] * c5 + m[1, 2] * c2 - m[1, 3] * c1,
            m[0, 0] * c5 - m[0, 2] * c2 + m[0, 3] * c1,
            -m[3, 0] * s5 + m[3, 2] * s2 - m[3, 3] * s1,
            m[2, 0] * s5 - m[2, 2] * s2 + m[2, 3] * s1,

            m[1, 0] * c4 - m[1, 1] * c2 + m[1, 3] * c0,
            -m[0, 0] * c4 + m[0, 1] * c2 - m[0, 3] * c0,
            m[3, 0] * s4 - m[3, 1] * s2 + m[3, 3] * s0,
            -m[2, 0] * s4 + m[2, 1] * s2 - m[2, 3] * s0,

            -m[1, 0] * c3 + m[1, 1] * c1 - m[1, 2] * c0,
            m[0, 0] * c3 - m[0, 1] * c1 + m[0, 2] * c0,
            -m[3, 0] * s3 + m[3, 1] * s1 - m[3, 2] * s0,
            m[2, 0] * s3 - m[2, 1] * s1 + m[2, 2] * s0,
        )
