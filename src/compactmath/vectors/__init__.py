"""Fixed-size float32 vectors."""

from compactmath.vectors.base import VectorBase, vector_type
from compactmath.vectors.vector2 import Vector2
from compactmath.vectors.vector3 import Vector3
from compactmath.vectors.vector4 import Vector4

__all__ = ["VectorBase", "Vector2", "Vector3", "Vector4", "vector_type"]
