"""
Algebraic Structures as Context Objects.

An algebra here is an object that holds the operations for some element
type T. Values never know which algebra they belong to: generic code takes
the algebra as an explicit argument and calls its methods. This lets the
same float be treated as a real number by one context and the same int be
treated as an element of Z_p by another.

Hierarchy:
    Algebra  - name-based operation dispatch
    Space    - zero, addition, scaling by a plain number
    Ring     - one, multiplication of two elements
    Field    - division of two elements

Scalar multiplication (``multiply_by_scalar``, T x Number) and ring
multiplication (``multiply``, T x T) are separate methods, since Python
cannot overload on argument type.

Name-based dispatch:
    Every structure publishes operation-name constants (PLUS_OPERATION and
    friends). ``unary_operation`` and ``binary_operation`` route a name to
    the matching method; each capability handles its own names and hands
    the rest up the MRO, and the base Algebra rejects whatever is left.

Example:
    >>> from algebra_toolkit.operations.real import RealField
    >>> field = RealField()
    >>> field.binary_operation(Ring.TIMES_OPERATION, 3.0, 4.0)
    12.0
    >>> field.sum([1.0, 2.0, 3.0])
    6.0
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from functools import reduce
from typing import Generic, Iterable, TypeVar, Union

from ..errors import UnsupportedOperationError

T = TypeVar("T")

# Plain Python scalar accepted by ``multiply_by_scalar``
Number = Union[int, float, complex]


class Algebra(ABC, Generic[T]):
    """Root of every context: dispatches operations by name."""

    def unary_operation(self, operation: str, arg: T) -> T:
        """Apply the unary operation called ``operation`` to ``arg``."""
        raise UnsupportedOperationError(
            f"Unary operation '{operation}' is not supported by {type(self).__name__}"
        )

    def binary_operation(self, operation: str, left: T, right: T) -> T:
        """Apply the binary operation called ``operation``."""
        raise UnsupportedOperationError(
            f"Binary operation '{operation}' is not supported by {type(self).__name__}"
        )


class Space(Algebra[T]):
    """
    An additive group that can be scaled by plain numbers.

    Subclasses provide ``zero``, ``add`` and ``multiply_by_scalar``;
    negation, subtraction, division by a number and summation are derived
    from them and may be overridden when a faster form exists.
    """

    PLUS_OPERATION = "+"
    MINUS_OPERATION = "-"

    @property
    @abstractmethod
    def zero(self) -> T:
        """The additive identity."""

    @abstractmethod
    def add(self, a: T, b: T) -> T:
        """Sum of two elements."""

    @abstractmethod
    def multiply_by_scalar(self, a: T, k: Number) -> T:
        """Scale an element by the number ``k``."""

    def negate(self, a: T) -> T:
        return self.multiply_by_scalar(a, -1)

    def subtract(self, a: T, b: T) -> T:
        return self.add(a, self.negate(b))

    def divide_by_scalar(self, a: T, k: Number) -> T:
        return self.multiply_by_scalar(a, 1.0 / k)

    def sum(self, items: Iterable[T]) -> T:
        """Fold ``add`` over ``items`` starting from ``zero``."""
        return reduce(self.add, items, self.zero)

    def unary_operation(self, operation: str, arg: T) -> T:
        if operation == self.MINUS_OPERATION:
            return self.negate(arg)
        return super().unary_operation(operation, arg)

    def binary_operation(self, operation: str, left: T, right: T) -> T:
        if operation == self.PLUS_OPERATION:
            return self.add(left, right)
        if operation == self.MINUS_OPERATION:
            return self.subtract(left, right)
        return super().binary_operation(operation, left, right)


class Ring(Space[T]):
    """A space with a multiplicative identity and element-by-element product."""

    TIMES_OPERATION = "*"

    @property
    @abstractmethod
    def one(self) -> T:
        """The multiplicative identity."""

    @abstractmethod
    def multiply(self, a: T, b: T) -> T:
        """Product of two elements."""

    def binary_operation(self, operation: str, left: T, right: T) -> T:
        if operation == self.TIMES_OPERATION:
            return self.multiply(left, right)
        return super().binary_operation(operation, left, right)


class Field(Ring[T]):
    """A ring where every non-zero element can divide."""

    DIV_OPERATION = "/"

    @abstractmethod
    def divide(self, a: T, b: T) -> T:
        """Quotient of two elements."""

    def binary_operation(self, operation: str, left: T, right: T) -> T:
        if operation == self.DIV_OPERATION:
            return self.divide(left, right)
        return super().binary_operation(operation, left, right)
