"""Tests for PolynomialSpace arithmetic."""

import pytest

from algebra_toolkit.errors import FieldError
from algebra_toolkit.functions.polynomial import Polynomial, PolynomialSpace, polynomial
from algebra_toolkit.operations.algebra import Space


@pytest.fixture
def real_space(real_field):
    return PolynomialSpace(real_field)


@pytest.fixture
def prime_space(prime_field):
    return PolynomialSpace(prime_field)


class TestPolynomialSpaceAdd:
    """Tests for coefficientwise addition."""

    def test_concrete(self, real_space):
        """[1, 2] + [10, 20, 30] = [11, 22, 30]."""
        result = real_space.add(Polynomial([1, 2]), Polynomial([10, 20, 30]))
        assert result == Polynomial([11, 22, 30])

    def test_commutative(self, real_space):
        a = Polynomial([1.0, -2.0, 3.0])
        b = Polynomial([4.0, 5.0, 6.0, 7.0, 8.0])
        assert real_space.add(a, b) == real_space.add(b, a)

    def test_associative(self, prime_space, prime_field, rng):
        """Exact check in Z_p, where float rounding cannot interfere."""
        for _ in range(10):
            a, b, c = (Polynomial(prime_field.random(rng=rng) for _ in range(rng.randint(0, 6)))
                       for _ in range(3))
            left = prime_space.add(prime_space.add(a, b), c)
            right = prime_space.add(a, prime_space.add(b, c))
            assert left == right

    @pytest.mark.parametrize("x", [-2.0, -0.5, 0.0, 1.0, 3.0])
    def test_padding_preserves_value(self, real_space, x):
        """(a + b)(x) == a(x) + b(x) for degrees 2 and 5."""
        a = Polynomial([1.0, 2.0, 3.0])
        b = Polynomial([-1.0, 0.5, 4.0, -2.0, 1.0, 0.25])
        total = real_space.add(a, b)
        assert total.degree == 5
        assert real_space.invoke(total, x) == pytest.approx(
            real_space.invoke(a, x) + real_space.invoke(b, x))

    def test_zero_is_identity(self, real_space):
        a = Polynomial([3.0, 1.0, 4.0])
        assert real_space.zero == Polynomial()
        assert real_space.add(real_space.zero, a) == a
        assert real_space.add(a, real_space.zero) == a

    def test_padding_uses_ring_zero(self, prime_space):
        """Missing coefficients come from the ring, not a literal 0.0."""
        result = prime_space.add(Polynomial([96]), Polynomial([2, 5]))
        assert result == Polynomial([1, 5])
        assert all(isinstance(c, int) for c in result.coefficients)

    def test_inputs_unchanged(self, real_space):
        a = Polynomial([1.0, 2.0])
        b = Polynomial([3.0])
        real_space.add(a, b)
        assert a == Polynomial([1.0, 2.0])
        assert b == Polynomial([3.0])


class TestPolynomialSpaceMultiply:
    """Tests for scaling by a number."""

    def test_concrete(self, real_space):
        """[1, 2, 3] * 2 = [2, 4, 6]."""
        assert real_space.multiply(Polynomial([1, 2, 3]), 2) == Polynomial([2, 4, 6])

    def test_alias(self, real_space):
        """multiply and multiply_by_scalar are the same operation."""
        a = Polynomial([1.5, -2.0])
        assert real_space.multiply(a, 3) == real_space.multiply_by_scalar(a, 3)

    def test_keeps_length(self, real_space):
        """Scaling by zero does not trim coefficients."""
        result = real_space.multiply(Polynomial([1.0, 2.0, 3.0]), 0)
        assert result == Polynomial([0.0, 0.0, 0.0])

    def test_distributive(self, prime_space, prime_field, rng):
        """(a + b) * k == a * k + b * k."""
        for k in (0, 1, 2, 5, 96):
            a = Polynomial(prime_field.random(rng=rng) for _ in range(3))
            b = Polynomial(prime_field.random(rng=rng) for _ in range(6))
            left = prime_space.multiply(prime_space.add(a, b), k)
            right = prime_space.add(prime_space.multiply(a, k), prime_space.multiply(b, k))
            assert left == right

    def test_ring_scalar_rules_apply(self, prime_space):
        """A prime field only scales by integers."""
        with pytest.raises(FieldError):
            prime_space.multiply(Polynomial([1, 2]), 0.5)

    def test_zero_polynomial(self, real_space):
        assert real_space.multiply(real_space.zero, 7) == real_space.zero


class TestPolynomialSpaceDerived:
    """Operations inherited from Space."""

    def test_is_space(self, real_space, real_field):
        assert isinstance(real_space, Space)
        assert real_space.ring is real_field

    def test_negate_and_subtract(self, real_space):
        a = Polynomial([1.0, 2.0, 3.0])
        assert real_space.negate(a) == Polynomial([-1.0, -2.0, -3.0])
        assert real_space.subtract(a, a) == Polynomial([0.0, 0.0, 0.0])

    def test_sum(self, real_space):
        polys = [Polynomial([1.0]), Polynomial([0.0, 1.0]), Polynomial([0.0, 0.0, 1.0])]
        assert real_space.sum(polys) == Polynomial([1.0, 1.0, 1.0])
        assert real_space.sum([]) == real_space.zero

    def test_divide_by_scalar(self, real_space):
        assert real_space.divide_by_scalar(Polynomial([2.0, 4.0]), 2) == Polynomial([1.0, 2.0])

    def test_named_operations(self, real_space):
        a = Polynomial([1.0, 2.0])
        assert real_space.binary_operation(Space.PLUS_OPERATION, a, a) == Polynomial([2.0, 4.0])
        assert real_space.unary_operation(Space.MINUS_OPERATION, a) == Polynomial([-1.0, -2.0])


class TestPolynomialSpaceInvoke:
    """Tests for evaluation through the space."""

    def test_invoke(self, real_space):
        assert real_space.invoke(Polynomial([1.0, 2.0, 3.0]), 2.0) == 17.0

    def test_invoke_zero(self, prime_space, prime_field):
        assert prime_space.invoke(prime_space.zero, 42) == prime_field.zero

    def test_polynomial_helper(self, prime_field):
        """polynomial() runs a block in a fresh space and returns its result."""
        seen = []

        def block(space):
            seen.append(space)
            return space.invoke(space.add(Polynomial([1]), Polynomial([0, 1])), 3)

        assert polynomial(prime_field, block) == 4
        assert isinstance(seen[0], PolynomialSpace)
        assert seen[0].ring is prime_field


class TestPolynomialSpaceDivide:
    """Division by a number goes through the ring's own division."""

    def test_prime_field(self, prime_space):
        assert prime_space.divide_by_scalar(Polynomial([2, 4]), 2) == Polynomial([1, 2])

    def test_prime_field_odd_coefficient(self, prime_space, prime_field):
        """3 / 2 in Z_97 is the field inverse, not a float."""
        result = prime_space.divide_by_scalar(Polynomial([3]), 2)
        assert result == Polynomial([prime_field.divide_by_scalar(3, 2)])
        assert result == Polynomial([50])

    def test_real_matches_ring_division(self, real_space, real_field):
        a = Polynomial([1.0, 2.0, 10.0])
        expected = Polynomial(real_field.divide_by_scalar(c, 3) for c in a.coefficients)
        assert real_space.divide_by_scalar(a, 3) == expected
