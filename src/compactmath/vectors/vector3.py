"""Three-component vector with cross product and direction constants."""

import numpy as np

from compactmath.core.value import constant, ieee
from compactmath.vectors.base import VectorBase, _component, _swizzle
from compactmath.vectors.vector4 import Vector4


class Vector3(VectorBase):
    __slots__ = ()

    SIZE = 3

    UNIT_X = constant(1.0, 0.0, 0.0)
    UNIT_Y = constant(0.0, 1.0, 0.0)
    UNIT_Z = constant(0.0, 0.0, 1.0)
    # Right-handed, +y up, +z forward
    RIGHT = constant(1.0, 0.0, 0.0)
    UP = constant(0.0, 1.0, 0.0)
    FORWARD = constant(0.0, 0.0, 1.0)
    LEFT = constant(-1.0, 0.0, 0.0)
    DOWN = constant(0.0, -1.0, 0.0)
    BACK = constant(0.0, 0.0, -1.0)

    x = _component(0)
    y = _component(1)
    z = _component(2)

    xy = _swizzle(0, 1)
    xz = _swizzle(0, 2)
    yz = _swizzle(1, 2)

    @ieee
    def cross(self, other: "Vector3") -> "Vector3":
        """Cross product ``self x other``. Also usable as ``Vector3.cross(u, v)``."""
        return Vector3._wrap(np.cross(self._v, other._v))

    def extend(self, w: float = 0.0) -> Vector4:
        """Vector4 with this vector as ``xyz`` and the given ``w``."""
        return Vector4(self, w)
