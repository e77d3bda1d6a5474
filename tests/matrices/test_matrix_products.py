"""Tests for the shape-generic matrix operations and the product table."""

import itertools

import numpy as np
import pytest

from compactmath.matrices import (
    MatrixBase,
    Matrix2,
    Matrix2x3,
    Matrix2x4,
    Matrix3,
    Matrix3x2,
    Matrix4,
    Matrix4x2,
    matrix_type,
)
from compactmath.vectors import Vector2, Vector3, Vector4

SIZES = (2, 3, 4)


def _sample(rows, cols, start=1):
    return matrix_type(rows, cols)(*range(start, start + rows * cols))


def test_registry_covers_every_shape():
    for rows, cols in itertools.product(SIZES, SIZES):
        cls = matrix_type(rows, cols)
        assert cls.ROWS == rows and cls.COLS == cols
    with pytest.raises(ValueError):
        matrix_type(5, 2)


@pytest.mark.parametrize("rows,inner,cols", list(itertools.product(SIZES, SIZES, SIZES)))
def test_product_table(rows, inner, cols):
    a = _sample(rows, inner)
    b = _sample(inner, cols, start=-3)
    prod = a @ b
    assert type(prod) is matrix_type(rows, cols)
    np.testing.assert_array_equal(prod.to_array(), a.to_array() @ b.to_array())
    for i, j in itertools.product(range(rows), range(cols)):
        assert prod[i, j] == a.row(i).dot(b.column(j))


def test_inner_dimension_mismatch():
    with pytest.raises(ValueError):
        Matrix2x3() @ Matrix2()
    with pytest.raises(ValueError):
        Matrix4().multiply(Matrix3())


def test_identity_product():
    assert Matrix2.IDENTITY @ Matrix2.IDENTITY == Matrix2.IDENTITY
    m = _sample(3, 3)
    assert Matrix3.IDENTITY @ m == m
    assert m.multiply(Matrix3.IDENTITY) == m


def test_matrix_times_column_vector():
    m = Matrix2x3(1, 2, 3,
                  4, 5, 6)
    assert m @ Vector3(1, 0, -1) == Vector2(-2, -2)


def test_row_vector_times_matrix():
    m = Matrix2x3(1, 2, 3,
                  4, 5, 6)
    assert Vector2(1, 1) @ m == Vector3(5, 7, 9)


def test_vector_size_mismatch():
    m = Matrix2x3()
    with pytest.raises(ValueError):
        m @ Vector2(1, 2)
    with pytest.raises(ValueError):
        Vector3(1, 2, 3) @ m


def test_outer_product():
    m = MatrixBase.outer(Vector2(1, 2), Vector3(3, 4, 5))
    assert type(m) is Matrix2x3
    assert m == Matrix2x3(3, 4, 5,
                          6, 8, 10)
    assert type(Matrix4.outer(Vector4(1, 1, 1, 1), Vector2(1, 1))) is Matrix4x2


@pytest.mark.parametrize("rows,cols", list(itertools.product(SIZES, SIZES)))
def test_transpose_involution(rows, cols):
    m = _sample(rows, cols)
    t = m.transposed()
    assert type(t) is matrix_type(cols, rows)
    assert t[0, rows - 1] == m[rows - 1, 0]
    assert t.transposed() == m


def test_construct_from_rows():
    m = Matrix3x2(Vector2(1, 2), Vector2(3, 4), Vector2(5, 6))
    assert m == Matrix3x2(1, 2, 3, 4, 5, 6)
    assert m.shape == (3, 2)


def test_construct_diagonal():
    assert Matrix3(2) == Matrix3(2, 0, 0, 0, 2, 0, 0, 0, 2)


def test_bad_construction():
    with pytest.raises(ValueError):
        Matrix2x3(5)
    with pytest.raises(ValueError):
        Matrix2(1, 2, 3)
    with pytest.raises(ValueError):
        Matrix2(Vector3(1, 2, 3), Vector3(4, 5, 6))


def test_element_access():
    m = _sample(2, 3)
    assert m[1, 2] == 6.0
    m[0, 0] = -1
    assert m[0, 0] == -1.0
    with pytest.raises(IndexError):
        m[2, 0]
    with pytest.raises(IndexError):
        m[0, 3] = 1.0
    with pytest.raises(IndexError):
        m[-1, 0]


def test_rows_and_columns():
    m = Matrix2x3(1, 2, 3,
                  4, 5, 6)
    assert m.row(1) == Vector3(4, 5, 6)
    assert m.column(2) == Vector2(3, 6)
    assert list(m.rows()) == [Vector3(1, 2, 3), Vector3(4, 5, 6)]
    assert list(m.columns()) == [Vector2(1, 4), Vector2(2, 5), Vector2(3, 6)]
    with pytest.raises(IndexError):
        m.row(2)
    with pytest.raises(IndexError):
        m.column(3)


def test_set_row_and_column():
    m = Matrix2x3()
    m.set_row(0, Vector3(1, 2, 3))
    m.set_column(2, Vector2(9, 8))
    assert m == Matrix2x3(1, 2, 9,
                          0, 0, 8)
    with pytest.raises(ValueError):
        m.set_row(1, Vector2(1, 2))
    with pytest.raises(IndexError):
        m.set_column(5, Vector2(1, 2))


def test_row_is_a_copy():
    m = Matrix2(1, 2, 3, 4)
    r = m.row(0)
    r.x = 100
    assert m[0, 0] == 1.0


def test_add_subtract_scale():
    a = _sample(2, 4)
    b = _sample(2, 4, start=10)
    assert a + b == b + a
    assert (a + b) - b == a
    assert a * 2 == 2 * a
    assert (a * 2) / 2 == a
    assert type(a * 2) is Matrix2x4


def test_in_place_scale():
    m = Matrix2(1, 2, 3, 4)
    m *= 2
    m /= 4
    assert m == Matrix2(0.5, 1, 1.5, 2)


def test_mixing_shapes_is_type_error():
    with pytest.raises(TypeError):
        Matrix2() + Matrix3()
    with pytest.raises(TypeError):
        Matrix2x3() - Matrix3x2()


def test_str():
    assert str(Matrix2(1, 2, 3, 4.5)) == "(1, 2)\n(3, 4.5)"


def test_equality_and_hash():
    assert Matrix2(1, 2, 3, 4) == Matrix2(1, 2, 3, 4)
    assert Matrix2(1, 2, 3, 4) != Matrix2(1, 2, 3, 5)
    assert hash(Matrix2(1, 2, 3, 4)) == hash(Matrix2(1, 2, 3, 4))


def test_zero_constant_is_fresh():
    z = Matrix2x3.ZERO
    z[0, 0] = 3
    assert Matrix2x3.ZERO == Matrix2x3()
