"""
Univariate Polynomials over an Arbitrary Ring.

A Polynomial is only its coefficient list; it does not know which ring its
coefficients live in. Anything that needs arithmetic (evaluation, addition,
scaling) takes the ring as an argument, so one coefficient list can be
evaluated over floats, complex numbers, Z_p or numpy arrays.

Representation:
    p(x) = c0 + c1*x + c2*x^2 + ... + cn*x^n   <->   Polynomial([c0, c1, ..., cn])

    The constant term comes first. Trailing zero coefficients are kept as
    given. The empty polynomial is the zero polynomial.

Evaluation:
    ``value`` walks the coefficients once, keeping the running power
    arg^i instead of recomputing it for every term:

        result = c0, power = x
        for i = 1..n:   result += ci * power;  power *= x

    This costs about 2n ring multiplications and never needs division or
    exponentiation from the ring.

Example:
    >>> from algebra_toolkit.operations.real import RealField
    >>> p = Polynomial([1.0, 2.0, 3.0])      # 1 + 2x + 3x^2
    >>> p.value(RealField(), 2.0)
    17.0
    >>> space = PolynomialSpace(RealField())
    >>> space.add(Polynomial([1.0, 2.0]), Polynomial([10.0, 20.0, 30.0]))
    Polynomial(coefficients=(11.0, 22.0, 30.0))
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, Tuple, TypeVar
import logging
import math

from ..operations.algebra import Number, Ring, Space
from .function import MathFunction

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class Polynomial(Generic[T]):
    """
    Polynomial coefficients without fixation on a specific ring.

    Attributes:
        coefficients: Tuple of coefficients, constant term first. Any
            iterable passed in is copied into a tuple.

    Equality compares the coefficient tuples, so it only works for
    coefficients whose ``==`` returns a bool. For numpy array coefficients
    compare ``coefficients`` entry by entry with ``numpy.testing`` instead.

    Example:
        >>> Polynomial.of(1, 2, 3).degree
        2
        >>> Polynomial().degree
        -1
    """
    coefficients: Tuple[T, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "coefficients", tuple(self.coefficients))

    @classmethod
    def of(cls, *coefficients: T) -> Polynomial[T]:
        """Build a polynomial from coefficients given as separate arguments."""
        return cls(coefficients)

    @property
    def degree(self) -> int:
        """Index of the last coefficient; -1 for the zero polynomial."""
        return len(self.coefficients) - 1

    def __len__(self) -> int:
        return len(self.coefficients)

    def __str__(self) -> str:
        if not self.coefficients:
            return "0"
        terms = []
        for index, coefficient in enumerate(self.coefficients):
            if index == 0:
                terms.append(f"{coefficient}")
            elif index == 1:
                terms.append(f"{coefficient}*x")
            else:
                terms.append(f"{coefficient}*x^{index}")
        return " + ".join(terms)

    def value(self, ring: Ring[T], arg: T) -> T:
        """
        Evaluate the polynomial at ``arg`` with the arithmetic of ``ring``.

        Args:
            ring: Supplies ``zero``, ``add`` and ``multiply`` for T
            arg: Evaluation point

        Returns:
            ``ring.zero`` for the zero polynomial, otherwise
            c0 + c1*arg + ... + cn*arg^n
        """
        if not self.coefficients:
            return ring.zero
        logger.debug("Evaluating degree %d polynomial over %r", self.degree, ring)

        result = self.coefficients[0]
        power_of_arg = arg
        for coefficient in self.coefficients[1:]:
            result = ring.add(result, ring.multiply(coefficient, power_of_arg))
            # carry arg^(i+1) into the next term
            power_of_arg = ring.multiply(power_of_arg, arg)
        return result

    def sum_of_self_powers(self) -> float:
        """
        Sum each float coefficient raised to the power of its own index.

        This is NOT evaluation at a point: there is no argument, and the
        result is c0^0 + c1^1 + c2^2 + ... For ``[2.0, 3.0, 4.0]`` that is
        1 + 3 + 16 = 20. Use ``value`` for ordinary evaluation.
        """
        return math.fsum(float(c) ** index for index, c in enumerate(self.coefficients))

    def as_function(self, ring: Ring[T]) -> Callable[[T], T]:
        """Represent the polynomial as a regular context-less function."""
        return lambda arg: self.value(ring, arg)

    def as_math_function(self) -> PolynomialFunction[T]:
        """Represent the polynomial as a function of (ring, arg)."""
        return PolynomialFunction(self)


class PolynomialFunction(MathFunction[T, T]):
    """Polynomial seen as a MathFunction; the ring is chosen at call time."""

    def __init__(self, polynomial: Polynomial[T]):
        self.polynomial = polynomial

    def __repr__(self) -> str:
        return f"PolynomialFunction({self.polynomial!r})"

    def invoke(self, context: Ring[T], arg: T) -> T:
        return self.polynomial.value(context, arg)


class PolynomialSpace(Space[Polynomial[T]]):
    """
    The algebra of polynomials over a ring.

    Polynomials form a Space: they can be added coefficientwise and scaled
    by numbers. Element arithmetic is delegated to the injected ring,
    which the space only reads.

    Attributes:
        ring: The coefficient ring

    Example:
        >>> from algebra_toolkit.common.field import PrimeField
        >>> space = PolynomialSpace(PrimeField(7))
        >>> space.multiply(Polynomial([1, 2, 3]), 3)
        Polynomial(coefficients=(3, 6, 2))
    """

    def __init__(self, ring: Ring[T]):
        self._ring = ring
        self._zero: Polynomial[T] = Polynomial()
        logger.debug("Created PolynomialSpace over %r", ring)

    def __repr__(self) -> str:
        return f"PolynomialSpace({self._ring!r})"

    @property
    def ring(self) -> Ring[T]:
        return self._ring

    @property
    def zero(self) -> Polynomial[T]:
        """The empty polynomial."""
        return self._zero

    def add(self, a: Polynomial[T], b: Polynomial[T]) -> Polynomial[T]:
        """
        Coefficientwise sum.

        The shorter coefficient list is padded with ``ring.zero``, so
        polynomials of different degree add without any preparation.
        """
        ring = self._ring
        dim = max(len(a.coefficients), len(b.coefficients))
        return Polynomial(
            ring.add(_get_or_zero(a.coefficients, index, ring),
                     _get_or_zero(b.coefficients, index, ring))
            for index in range(dim)
        )

    def multiply_by_scalar(self, a: Polynomial[T], k: Number) -> Polynomial[T]:
        """Scale every coefficient by the number ``k``."""
        return Polynomial(self._ring.multiply_by_scalar(c, k) for c in a.coefficients)

    def multiply(self, a: Polynomial[T], k: Number) -> Polynomial[T]:
        """Same as ``multiply_by_scalar``: polynomials here scale, they do not multiply."""
        return self.multiply_by_scalar(a, k)

    def divide_by_scalar(self, a: Polynomial[T], k: Number) -> Polynomial[T]:
        """Divide every coefficient by ``k`` with the ring's own division."""
        return Polynomial(self._ring.divide_by_scalar(c, k) for c in a.coefficients)

    def invoke(self, polynomial: Polynomial[T], arg: T) -> T:
        """Evaluate ``polynomial`` at ``arg`` in this space's ring."""
        return polynomial.value(self._ring, arg)


def _get_or_zero(coefficients: Tuple[T, ...], index: int, ring: Ring[T]) -> T:
    if index < len(coefficients):
        return coefficients[index]
    return ring.zero


def polynomial(ring: Ring[T], block: Callable[[PolynomialSpace[T]], R]) -> R:
    """
    Run ``block`` with a PolynomialSpace over ``ring`` and return its result.

    Example:
        >>> from algebra_toolkit.operations.real import RealField
        >>> polynomial(RealField(), lambda space: space.invoke(Polynomial([0.0, 1.0]), 5.0))
        5.0
    """
    return block(PolynomialSpace(ring))
