"""Two-component vector."""

from compactmath.core.value import constant
from compactmath.vectors.base import VectorBase, _component
from compactmath.vectors.vector3 import Vector3


class Vector2(VectorBase):
    __slots__ = ()

    SIZE = 2

    UNIT_X = constant(1.0, 0.0)
    UNIT_Y = constant(0.0, 1.0)

    x = _component(0)
    y = _component(1)

    def extend(self, z: float = 0.0) -> Vector3:
        """Vector3 with this vector as ``xy`` and the given ``z``."""
        return Vector3(self, z)
