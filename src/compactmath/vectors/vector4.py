"""Four-component vector."""

from compactmath.core.value import constant
from compactmath.vectors.base import VectorBase, _component, _swizzle


class Vector4(VectorBase):
    __slots__ = ()

    SIZE = 4

    UNIT_X = constant(1.0, 0.0, 0.0, 0.0)
    UNIT_Y = constant(0.0, 1.0, 0.0, 0.0)
    UNIT_Z = constant(0.0, 0.0, 1.0, 0.0)
    UNIT_W = constant(0.0, 0.0, 0.0, 1.0)

    x = _component(0)
    y = _component(1)
    z = _component(2)
    w = _component(3)

    xy = _swizzle(0, 1)
    xz = _swizzle(0, 2)
    xw = _swizzle(0, 3)
    yz = _swizzle(1, 2)
    yw = _swizzle(1, 3)
    zw = _swizzle(2, 3)
    xyz = _swizzle(0, 1, 2)
    xyw = _swizzle(0, 1, 3)
    xzw = _swizzle(0, 2, 3)
    yzw = _swizzle(1, 2, 3)
