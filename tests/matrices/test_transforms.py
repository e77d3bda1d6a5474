"""Tests for rotation, affine and projection factories."""

import math
import warnings

import numpy as np
import pytest

from compactmath.complex_number import Complex
from compactmath.matrices import Matrix2, Matrix3, Matrix4
from compactmath.vectors import Vector2, Vector3, Vector4


def test_matrix2_rotation():
    r = Matrix2.create_rotation(math.pi / 2)
    assert (r @ Vector2(1, 0)).is_close(Vector2(0, 1))


def test_matrix2_from_complex():
    assert Matrix2.from_complex(Complex(1, 2)) == Matrix2(1, -2,
                                                          2, 1)


@pytest.mark.parametrize("angle", [0.3, math.pi / 2, -1.2])
def test_rotation_x_convention(angle):
    r = Matrix3.create_rotation_x(angle)
    expected = Vector3(0, math.cos(angle), math.sin(angle))
    assert (r @ Vector3(0, 1, 0)).is_close(expected)


def test_rotation_y():
    r = Matrix3.create_rotation_y(math.pi / 2)
    assert (r @ Vector3(0, 0, 1)).is_close(Vector3(1, 0, 0))


def test_rotation_z():
    r = Matrix3.create_rotation_z(math.pi / 2)
    assert (r @ Vector3(1, 0, 0)).is_close(Vector3(0, 1, 0))


def test_rotation_is_orthonormal():
    r = Matrix3.create_rotation_x(0.4) @ Matrix3.create_rotation_z(1.1)
    assert (r @ r.transposed()).is_close(Matrix3.IDENTITY)
    assert r.determinant() == pytest.approx(1.0, abs=1e-5)


def test_from_matrix2():
    m = Matrix3.from_matrix2(Matrix2(1, 2, 3, 4))
    assert m == Matrix3(1, 2, 0,
                        3, 4, 0,
                        0, 0, 1)


def test_from_matrix4():
    m4 = Matrix4(*range(16))
    assert Matrix3.from_matrix4(m4) == Matrix3(0, 1, 2,
                                               4, 5, 6,
                                               8, 9, 10)


def test_matrix4_from_matrix3():
    m = Matrix4.from_matrix3(Matrix3(*range(1, 10)))
    assert m.row(3) == Vector4(0, 0, 0, 1)
    assert m.column(3) == Vector4(0, 0, 0, 1)
    assert m[2, 2] == 9.0


def test_translation_in_last_column():
    t = Matrix4.create_translation(Vector3(1, 2, 3))
    assert t.column(3) == Vector4(1, 2, 3, 1)
    assert t @ Vector4(0, 0, 0, 1) == Vector4(1, 2, 3, 1)
    # directions are not translated
    assert t @ Vector4(1, 0, 0, 0) == Vector4(1, 0, 0, 0)


def test_scale():
    s = Matrix4.create_scale(Vector3(2, 3, 4))
    assert s @ Vector4(1, 1, 1, 1) == Vector4(2, 3, 4, 1)


def test_matrix4_rotations_embed_matrix3():
    for name in ("create_rotation_x", "create_rotation_y", "create_rotation_z"):
        m4 = getattr(Matrix4, name)(0.7)
        m3 = getattr(Matrix3, name)(0.7)
        assert Matrix3.from_matrix4(m4) == m3
        assert m4[3, 3] == 1.0


def test_compose_translate_rotate():
    m = Matrix4.create_translation(Vector3(5, 0, 0)) @ Matrix4.create_rotation_z(math.pi / 2)
    p = m @ Vector4(1, 0, 0, 1)
    assert p.is_close(Vector4(5, 1, 0, 1))


def test_look_at():
    view = Matrix4.look_at(Vector3(0, 0, 5), Vector3(0, 0, 0), Vector3(0, 1, 0))
    origin = view @ Vector4(0, 0, 0, 1)
    assert origin.is_close(Vector4(0, 0, -5, 1))
    up = view @ Vector4(0, 1, 0, 0)
    assert up.is_close(Vector4(0, 1, 0, 0))


def test_perspective_fov():
    fov = math.radians(60)
    p = Matrix4.perspective_fov(fov, 16 / 9, 0.1, 100.0)
    assert p[1, 1] == pytest.approx(1 / math.tan(fov / 2), rel=1e-6)
    assert p[0, 0] == pytest.approx(p[1, 1] / (16 / 9), rel=1e-6)
    assert p[3, 2] == -1.0
    assert p[3, 3] == 0.0
    # near plane maps to -1 in NDC
    clip = p @ Vector4(0, 0, -0.1, 1)
    assert clip.z / clip.w == pytest.approx(-1.0, abs=1e-4)


def test_perspective_zero_aspect_is_infinite():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        p = Matrix4.perspective_fov(1.0, 0.0, 0.1, 10.0)
    assert math.isinf(p[0, 0])


def test_to_array_layout_row_major():
    t = Matrix4.create_translation(Vector3(1, 2, 3))
    np.testing.assert_array_equal(t.to_array()[:3, 3], [1, 2, 3])
    # translation sits at flat indices 3, 7, 11 of the raw buffer
    flat = np.frombuffer(t.tobytes(), dtype=np.float32)
    np.testing.assert_array_equal(flat[[3, 7, 11]], [1, 2, 3])
    np.testing.assert_array_equal(flat[12:], [0, 0, 0, 1])
