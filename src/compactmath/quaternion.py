"""Quaternions ``xi + yj + zk + w`` stored as (x, y, z, w) float32 components."""

import logging
import operator

import numpy as np

from compactmath.constants import FLOAT
from compactmath.core.formatting import format_component, format_signed
from compactmath.core.value import CompactValue, constant, ieee, is_scalar
from compactmath.matrices import Matrix3, Matrix4
from compactmath.vectors import Vector3, Vector4

logger = logging.getLogger(__name__)

# Above this cosine slerp falls back to normalised lerp
SLERP_LINEAR_THRESHOLD = 0.9995


def _make(xyz, w) -> "Quaternion":
    data = np.empty(4, dtype=FLOAT)
    data[:3] = xyz
    data[3] = w
    return Quaternion._wrap(data)


class Quaternion(CompactValue):
    """Vector part (x, y, z) followed by scalar part w. Unit length is not enforced."""

    __slots__ = ()

    SHAPE = (4,)

    IDENTITY = constant()
    ZERO = constant(0.0, 0.0, 0.0, 0.0)
    I = constant(1.0, 0.0, 0.0, 0.0)
    J = constant(0.0, 1.0, 0.0, 0.0)
    K = constant(0.0, 0.0, 1.0, 0.0)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 1.0):
        self._v = np.array([x, y, z, w], dtype=FLOAT)

    @classmethod
    def from_parts(cls, xyz: Vector3, w: float) -> "Quaternion":
        return _make(xyz._v, w)

    @classmethod
    def from_vector4(cls, v: Vector4) -> "Quaternion":
        return cls._wrap(v._v.copy())

    @classmethod
    def from_euler_angles(cls, angles: Vector3) -> "Quaternion":
        """Rotation about x, then y, then z axes of the rotating frame.

        Equal to ``qx * qy * qz``; its matrix is ``Rx @ Ry @ Rz``.
        """
        half = angles._v * FLOAT(0.5)
        sx, sy, sz = np.sin(half)
        cx, cy, cz = np.cos(half)
        return cls(
            sx * cy * cz + cx * sy * sz,
            cx * sy * cz - sx * cy * sz,
            cx * cy * sz + sx * sy * cz,
            cx * cy * cz - sx * sy * sz,
        )

    @classmethod
    def from_axis_angle(cls, axis: Vector3, angle: float) -> "Quaternion":
        half = FLOAT(angle) * FLOAT(0.5)
        return _make(axis.normalized()._v * np.sin(half), np.cos(half))

    def to_vector4(self) -> Vector4:
        return Vector4._wrap(self._v.copy())

    def to_matrix3(self) -> Matrix3:
        return Matrix3.create_rotation(self)

    def to_matrix4(self) -> Matrix4:
        return Matrix4.create_rotation(self)

    # -- Components ----------------------------------------------------

    @property
    def x(self) -> float:
        return float(self._v[0])

    @x.setter
    def x(self, value: float) -> None:
        self._v[0] = value

    @property
    def y(self) -> float:
        return float(self._v[1])

    @y.setter
    def y(self, value: float) -> None:
        self._v[1] = value

    @property
    def z(self) -> float:
        return float(self._v[2])

    @z.setter
    def z(self, value: float) -> None:
        self._v[2] = value

    @property
    def w(self) -> float:
        return float(self._v[3])

    @w.setter
    def w(self, value: float) -> None:
        self._v[3] = value

    @property
    def xyz(self) -> Vector3:
        return Vector3._wrap(self._v[:3].copy())

    @xyz.setter
    def xyz(self, value: Vector3) -> None:
        self._v[:3] = value._v

    def _check_index(self, index) -> int:
        i = operator.index(index)
        if not 0 <= i < 4:
            raise IndexError(f"Quaternion index {i} out of range [0, 4)")
        return i

    def __getitem__(self, index) -> float:
        return float(self._v[self._check_index(index)])

    def __setitem__(self, index, value: float) -> None:
        self._v[self._check_index(index)] = value

    def __str__(self) -> str:
        x, y, z, w = self._v
        return (format_component(w) + format_signed(x) + "i"
                + format_signed(y) + "j" + format_signed(z) + "k")

    # -- Arithmetic ----------------------------------------------------

    @ieee
    def __mul__(self, other):
        if is_scalar(other):
            return self._wrap(self._v * FLOAT(other))
        if isinstance(other, Quaternion):
            v1, w1 = self._v[:3], self._v[3]
            v2, w2 = other._v[:3], other._v[3]
            return _make(w2 * v1 + w1 * v2 + np.cross(v1, v2), w1 * w2 - np.dot(v1, v2))
        return NotImplemented

    @ieee
    def __rmul__(self, other):
        if is_scalar(other):
            return self._wrap(FLOAT(other) * self._v)
        return NotImplemented

    @ieee
    def __truediv__(self, other):
        if not is_scalar(other):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("Quaternion division by zero")
        return self._wrap(self._v / FLOAT(other))

    def __imul__(self, other):
        result = self.__mul__(other)
        if result is NotImplemented:
            return result
        self._v[:] = result._v
        return self

    def __itruediv__(self, other):
        result = self.__truediv__(other)
        if result is NotImplemented:
            return result
        self._v[:] = result._v
        return self

    def dot(self, other: "Quaternion") -> float:
        return float(np.dot(self._v, other._v))

    def magnitude_squared(self) -> float:
        return float(np.dot(self._v, self._v))

    def magnitude(self) -> float:
        return float(np.sqrt(np.dot(self._v, self._v)))

    def conjugate(self) -> "Quaternion":
        return _make(-self._v[:3], self._v[3])

    @ieee
    def inverse(self) -> "Quaternion":
        """Conjugate over squared magnitude; the zero quaternion inverts to zero."""
        m = np.dot(self._v, self._v)
        if m == 0:
            logger.debug("inverse() of zero quaternion")
            return Quaternion.ZERO
        return self.conjugate() * (FLOAT(1.0) / m)

    def normalized(self) -> "Quaternion":
        m = np.sqrt(np.dot(self._v, self._v))
        if m > 0:
            return self._wrap(self._v / m)
        logger.debug("normalized() on zero quaternion")
        return Quaternion.ZERO

    def normalize(self) -> None:
        m = np.sqrt(np.dot(self._v, self._v))
        if m > 0:
            self._v /= m

    @ieee
    def rotate(self, v: Vector3) -> Vector3:
        """Rotate ``v`` by this (unit) quaternion."""
        qv, w = self._v[:3], self._v[3]
        t = FLOAT(2.0) * np.cross(qv, v._v)
        return Vector3._wrap(v._v + w * t + np.cross(qv, t))

    # -- Exponential map -----------------------------------------------

    @staticmethod
    @ieee
    def exp(q: "Quaternion") -> "Quaternion":
        """``e^w * (cos|v| + (v / |v|) sin|v|)``."""
        v, w = q._v[:3], q._v[3]
        scale = np.exp(w)
        m = np.sqrt(np.dot(v, v))
        if m == 0:
            return _make(0.0, scale)
        return _make(v / m * np.sin(m) * scale, np.cos(m) * scale)

    @staticmethod
    @ieee
    def log(q: "Quaternion") -> "Quaternion":
        """``(normalize(v) * acos(w / |q|), ln|q|)``."""
        v, w = q._v[:3], q._v[3]
        m = np.sqrt(np.dot(q._v, q._v))
        vm = np.sqrt(np.dot(v, v))
        axis = v / vm if vm > 0 else np.zeros(3, dtype=FLOAT)
        return _make(axis * np.arccos(w / m), np.log(m))

    @staticmethod
    def pow(q: "Quaternion", t: float) -> "Quaternion":
        return Quaternion.exp(Quaternion.log(q) * t)

    @staticmethod
    @ieee
    def slerp(a: "Quaternion", b: "Quaternion", t: float) -> "Quaternion":
        """Spherical linear interpolation along the shorter arc."""
        t = FLOAT(t)
        qa, qb = a._v, b._v
        cos_theta = np.dot(qa, qb)
        if cos_theta < 0:
            qb = -qb
            cos_theta = -cos_theta
        if cos_theta > SLERP_LINEAR_THRESHOLD:
            return Quaternion._wrap(qa + t * (qb - qa)).normalized()
        theta = np.arccos(np.clip(cos_theta, FLOAT(-1.0), FLOAT(1.0)))
        sin_theta = np.sin(theta)
        wa = np.sin((FLOAT(1.0) - t) * theta) / sin_theta
        wb = np.sin(t * theta) / sin_theta
        return Quaternion._wrap((wa * qa + wb * qb).astype(FLOAT)).normalized()
