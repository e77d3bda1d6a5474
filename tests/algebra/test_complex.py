"""Tests for Complex arithmetic and transcendental functions."""

import cmath
import math
import warnings

import pytest

from compactmath.complex_number import Complex
from compactmath.constants import PI
from compactmath.matrices import Matrix2
from compactmath.vectors import Vector2


def assert_complex_close(z, expected, tol=1e-5):
    assert z.re == pytest.approx(expected.real, abs=tol)
    assert z.im == pytest.approx(expected.imag, abs=tol)


SAMPLES = [Complex(1, 2), Complex(-3, 0.5), Complex(0.25, -4), Complex(-1, -1)]


def test_constants():
    assert Complex.ZERO == Complex(0, 0)
    assert Complex.ONE == Complex(1, 0)
    assert Complex.I == Complex(0, 1)
    assert Complex.imaginary(3) == Complex(0, 3)


def test_i_squared():
    assert Complex(0, 1) * Complex(0, 1) == Complex(-1, 0)


def test_addition_commutes():
    a, b = Complex(1, 2), Complex(-0.5, 3)
    assert a + b == b + a
    assert a - b == Complex(1.5, -1)


def test_real_operands_on_either_side():
    z = Complex(1, 1)
    assert 2 + z == Complex(3, 1)
    assert z + 2 == Complex(3, 1)
    assert z - 1 == Complex(0, 1)
    assert 1 - z == Complex(0, -1)
    assert 2 * Complex(1, 2) == Complex(2, 4)
    assert Complex(1, 2) * 2 == Complex(2, 4)
    assert Complex(2, 4) / 2 == Complex(1, 2)


def test_negation_and_conjugate():
    assert -Complex(1, -2) == Complex(-1, 2)
    assert Complex(1, -2).conjugate() == Complex(1, 2)


def test_general_division():
    assert_complex_close(Complex(1, 2) / Complex(3, 4), (1 + 2j) / (3 + 4j))


def test_division_by_real_valued_complex():
    # takes the real-division path, same result as the general formula
    assert Complex(1, 2) / Complex(4, 0) == Complex(0.25, 0.5)


def test_real_divided_by_complex():
    assert_complex_close(2 / Complex(0, 1), 2 / 1j)
    assert_complex_close(3 / Complex(1, 1), 3 / (1 + 1j))
    assert 2 / Complex(4, 0) == Complex(0.5, 0)


def test_division_by_zero_is_ieee():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        z = Complex(1, 1) / Complex(0, 0)
        w = 2 / Complex(0, 0)
    # general formula: 0 / 0 in both parts
    assert math.isnan(z.re) and math.isnan(z.im)
    assert math.isnan(w.re) and math.isnan(w.im)


def test_in_place_operators():
    z = Complex(1, 1)
    original = z
    z += 1
    z *= Complex(0, 1)
    z -= Complex(0, 2)
    z /= 2
    assert z is original
    assert z == Complex(-0.5, 0)


def test_metrics():
    z = Complex(3, 4)
    assert z.magnitude() == 5.0
    assert z.magnitude_squared() == 25.0
    assert Complex(0, 2).angle() == pytest.approx(math.pi / 2)
    assert Complex(-1, 0).angle() == pytest.approx(math.pi)


def test_sqrt_of_negative_real():
    assert Complex.sqrt(-4) == Complex(0, 2)
    assert Complex.sqrt(Complex(-4, 0)) == Complex(0, 2)


def test_sqrt_of_positive_real():
    assert Complex.sqrt(4) == Complex(2, 0)


def test_sqrt_principal_branch():
    assert_complex_close(Complex.sqrt(Complex(3, 4)), 2 + 1j)
    assert_complex_close(Complex.sqrt(Complex(3, -4)), 2 - 1j)
    for z in SAMPLES:
        root = Complex.sqrt(z)
        assert (root * root).is_close(z, tolerance=1e-4)


def test_log_of_negative_real():
    assert Complex.log(-1) == Complex(0, PI)
    assert_complex_close(Complex.log(-math.e), complex(1, math.pi))


def test_log_negative_real_with_negative_zero():
    z = Complex(-4, 0).conjugate()
    assert math.copysign(1.0, z.im) == -1.0
    assert Complex.log(z).im == pytest.approx(math.pi)
    assert Complex.log(z).is_close(Complex.log(-4))
    assert z.angle() == pytest.approx(math.pi)


def test_log_principal_branch():
    for z in SAMPLES:
        assert_complex_close(Complex.log(z), cmath.log(complex(z.re, z.im)))


@pytest.mark.parametrize("z", SAMPLES)
def test_exp_inverts_log(z):
    assert Complex.exp(Complex.log(z)).is_close(z, tolerance=1e-4)


def test_log_with_base():
    assert_complex_close(Complex.log(8, 2), 3 + 0j)
    assert_complex_close(Complex.log(Complex(0, 1), Complex(0, 1)), 1 + 0j)
    assert_complex_close(Complex.log10(100), 2 + 0j)
    assert_complex_close(Complex.log2(-8), complex(3, math.pi / math.log(2)), tol=1e-4)


def test_log_i():
    assert_complex_close(Complex.log_i(Complex(0, 1)), 1 + 0j)
    assert_complex_close(Complex.log_i(-1), 2 + 0j)
    z = Complex(2, 3)
    assert_complex_close(Complex.log_i(z), cmath.log(2 + 3j) / cmath.log(1j))


def test_exp():
    assert_complex_close(Complex.exp(Complex(0, math.pi)), -1 + 0j)
    assert_complex_close(Complex.exp(Complex(1, 0.5)), cmath.exp(1 + 0.5j))
    assert_complex_close(Complex.exp(2.0), math.exp(2.0) + 0j, tol=1e-5)


def test_integer_pow():
    assert Complex.pow(Complex(0, 1), 2) == Complex(-1, 0)
    assert Complex.pow(Complex(5, 7), 0) == Complex.ONE
    assert_complex_close(Complex.pow(Complex(1, 2), 5), (1 + 2j) ** 5, tol=1e-3)
    assert_complex_close(Complex.pow(Complex(1, 2), -2), (1 + 2j) ** -2)
    assert Complex(1, 1) ** 2 == Complex(0, 2)


def test_fractional_and_complex_pow():
    assert_complex_close(Complex.pow(Complex(1, 1), 0.5), (1 + 1j) ** 0.5)
    assert_complex_close(Complex.pow(Complex(1, 1), Complex(0.5, 1)), (1 + 1j) ** (0.5 + 1j))
    assert_complex_close(2 ** Complex(0, 1), 2 ** 1j)
    # negative real base goes through the complex logarithm
    assert_complex_close(Complex.pow(-4, 0.5), 2j)


def test_trigonometry():
    for z in SAMPLES[:3]:
        c = complex(z.re, z.im)
        assert_complex_close(Complex.sin(z), cmath.sin(c), tol=1e-3)
        assert_complex_close(Complex.cos(z), cmath.cos(c), tol=1e-3)
    assert_complex_close(Complex.tan(Complex(0.5, 0.25)), cmath.tan(0.5 + 0.25j))


def test_indexing():
    z = Complex(1, 2)
    assert z[0] == 1.0
    assert z[1] == 2.0
    z[1] = 5
    assert z.im == 5.0
    with pytest.raises(IndexError):
        z[2]
    with pytest.raises(IndexError):
        z[-1] = 0.0


def test_str():
    assert str(Complex(1, 2)) == "1+2i"
    assert str(Complex(3, -0.5)) == "3-0.5i"
    assert str(Complex(0, 0)) == "0+0i"


def test_vector_and_matrix_views():
    z = Complex(1, 2)
    assert z.to_vector() == Vector2(1, 2)
    assert Complex.from_vector(Vector2(3, 4)) == Complex(3, 4)
    assert z.to_matrix() == Matrix2(1, -2, 2, 1)
    assert Complex.from_matrix(z.to_matrix()) == z


def test_matrix_form_multiplies_like_complex():
    a, b = Complex(1, 2), Complex(-3, 0.5)
    assert (a.to_matrix() @ b.to_matrix()) == (a * b).to_matrix()


def test_hash_and_equality():
    assert hash(Complex(1, 2)) == hash(Complex(1, 2))
    assert Complex(1, 2) != Complex(2, 1)
