"""Tests for the elementwise numpy array field."""

import numpy as np
import pytest

from algebra_toolkit.errors import ShapeMismatchError
from algebra_toolkit.functions.polynomial import Polynomial, PolynomialSpace
from algebra_toolkit.operations import optional
from algebra_toolkit.operations.ndarray import NDArrayField


@pytest.fixture
def matrix_field():
    return NDArrayField((2, 2))


class TestNDArrayFieldBasics:
    """Identities, shapes and conversion."""

    def test_identities(self, matrix_field):
        np.testing.assert_array_equal(matrix_field.zero, np.zeros((2, 2)))
        np.testing.assert_array_equal(matrix_field.one, np.ones((2, 2)))

    def test_int_shape(self):
        assert NDArrayField(3).shape == (3,)

    def test_element_checks_shape(self, matrix_field):
        with pytest.raises(ShapeMismatchError):
            matrix_field.element([1.0, 2.0, 3.0])

    def test_no_silent_broadcast(self, vector_field):
        with pytest.raises(ShapeMismatchError):
            vector_field.add(vector_field.one, np.ones(3))

    def test_constant(self, vector_field):
        np.testing.assert_array_equal(vector_field.constant(2.5), np.full(4, 2.5))

    def test_dtype(self):
        field = NDArrayField(2, dtype=np.float32)
        assert field.zero.dtype == np.float32
        assert field.element([1, 2]).dtype == np.float32


class TestNDArrayFieldArithmetic:
    """Elementwise operations."""

    def test_multiply_is_elementwise(self, matrix_field):
        a = matrix_field.element([[1.0, 2.0], [3.0, 4.0]])
        b = matrix_field.element([[5.0, 6.0], [7.0, 8.0]])
        np.testing.assert_array_equal(matrix_field.multiply(a, b), [[5.0, 12.0], [21.0, 32.0]])

    def test_inputs_not_mutated(self, vector_field):
        a = vector_field.element([1.0, 2.0, 3.0, 4.0])
        before = a.copy()
        vector_field.add(a, a)
        vector_field.multiply_by_scalar(a, 3)
        vector_field.negate(a)
        np.testing.assert_array_equal(a, before)

    def test_divide(self, vector_field):
        a = vector_field.element([2.0, 4.0, 6.0, 8.0])
        np.testing.assert_allclose(vector_field.divide(a, a), vector_field.one)

    def test_transcendentals(self, vector_field):
        x = vector_field.element([0.1, 0.2, 0.3, 0.4])
        np.testing.assert_allclose(optional.sin(vector_field, x), np.sin(x))
        np.testing.assert_allclose(optional.exp(vector_field, x), np.exp(x))
        np.testing.assert_allclose(optional.sqrt(vector_field, x), np.sqrt(x))
        np.testing.assert_allclose(vector_field.atanh(x), np.arctanh(x))
        np.testing.assert_allclose(vector_field.acos(x), np.arccos(x))

    def test_norm(self, matrix_field):
        a = matrix_field.element([[3.0, 0.0], [0.0, 4.0]])
        assert optional.norm(matrix_field, a) == pytest.approx(5.0)
        assert isinstance(matrix_field.norm(a), float)

    def test_named_operations(self, vector_field):
        x = vector_field.element([1.0, 2.0, 3.0, 4.0])
        np.testing.assert_array_equal(
            vector_field.binary_operation(vector_field.TIMES_OPERATION, x, x), x * x)
        np.testing.assert_array_equal(
            vector_field.unary_operation(vector_field.MINUS_OPERATION, x), -x)


class TestNDArrayPolynomials:
    """Polynomials whose coefficients are arrays."""

    def test_space_over_arrays(self, vector_field):
        space = PolynomialSpace(vector_field)
        a = Polynomial([vector_field.constant(1.0)])
        b = Polynomial([vector_field.constant(2.0), vector_field.constant(3.0)])
        total = space.add(a, b)
        assert len(total) == 2
        np.testing.assert_array_equal(total.coefficients[0], np.full(4, 3.0))
        np.testing.assert_array_equal(total.coefficients[1], np.full(4, 3.0))

    def test_evaluate_grid(self, vector_field):
        x = vector_field.element([0.0, 1.0, 2.0, 3.0])
        p = Polynomial(vector_field.constant(c) for c in (1.0, 0.0, -1.0))
        np.testing.assert_allclose(p.value(vector_field, x), 1.0 - x ** 2)

    def test_equality_is_ambiguous_for_arrays(self, vector_field):
        """Array coefficients are compared entry by entry, not with ==."""
        a = Polynomial([vector_field.constant(1.0)])
        b = Polynomial([vector_field.constant(1.0)])
        with pytest.raises(ValueError):
            a == b
        np.testing.assert_array_equal(a.coefficients[0], b.coefficients[0])
