"""
Optional Operation Families.

Not every numeric type supports every operation family: integers modulo p
have powers but no logarithms, and a generic ring has no sine at all. Each
family below is a small capability class, and a context inherits only the
ones that make sense for its element type.

Capabilities:
    - TrigonometricOperations: sin, cos, tan and their inverses
    - PowerOperations: power, sqrt
    - ExponentialOperations: exp, ln, e and the hyperbolic functions
    - Norm: absolute value / vector length

The module-level functions (``sin``, ``power``, ``norm``, ...) take the
context as their first argument and delegate to it. ``sqrt`` and ``sqr``
always go through the context's ``power``.

Example:
    >>> from algebra_toolkit.operations.real import RealField
    >>> field = RealField()
    >>> sqr(field, 3.0)
    9.0
    >>> field.unary_operation(TrigonometricOperations.COS_OPERATION, 0.0)
    1.0
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from .algebra import Algebra, Field, Number, T

R = TypeVar("R")


class TrigonometricOperations(Field[T]):
    """
    Trigonometric operations, available on fields only.

    The operations live on the context rather than on the values to keep
    element types small, and so a context can override any of them.
    """

    SIN_OPERATION = "sin"
    COS_OPERATION = "cos"
    TAN_OPERATION = "tan"
    ASIN_OPERATION = "asin"
    ACOS_OPERATION = "acos"
    ATAN_OPERATION = "atan"

    @abstractmethod
    def sin(self, arg: T) -> T:
        """Computes the sine of ``arg``."""

    @abstractmethod
    def cos(self, arg: T) -> T:
        """Computes the cosine of ``arg``."""

    @abstractmethod
    def tan(self, arg: T) -> T:
        """Computes the tangent of ``arg``."""

    @abstractmethod
    def asin(self, arg: T) -> T:
        """Computes the inverse sine of ``arg``."""

    @abstractmethod
    def acos(self, arg: T) -> T:
        """Computes the inverse cosine of ``arg``."""

    @abstractmethod
    def atan(self, arg: T) -> T:
        """Computes the inverse tangent of ``arg``."""

    def unary_operation(self, operation: str, arg: T) -> T:
        handlers = {
            self.SIN_OPERATION: self.sin,
            self.COS_OPERATION: self.cos,
            self.TAN_OPERATION: self.tan,
            self.ASIN_OPERATION: self.asin,
            self.ACOS_OPERATION: self.acos,
            self.ATAN_OPERATION: self.atan,
        }
        if operation in handlers:
            return handlers[operation](arg)
        return super().unary_operation(operation, arg)


class PowerOperations(Algebra[T]):
    """Exponentiation by a plain number, and square roots."""

    POW_OPERATION = "pow"
    SQRT_OPERATION = "sqrt"

    @abstractmethod
    def power(self, arg: T, exponent: Number) -> T:
        """Raises ``arg`` to the power ``exponent``."""

    def sqrt(self, arg: T) -> T:
        """Positive square root of ``arg``."""
        return self.power(arg, 0.5)

    def unary_operation(self, operation: str, arg: T) -> T:
        if operation == self.SQRT_OPERATION:
            return self.sqrt(arg)
        return super().unary_operation(operation, arg)

    def binary_operation(self, operation: str, left: T, right: T) -> T:
        if operation == self.POW_OPERATION:
            return self.power(left, right)
        return super().binary_operation(operation, left, right)


class ExponentialOperations(Field[T], PowerOperations[T]):
    """
    Operations built around Euler's number ``e``.

    Only ``exp`` and ``ln`` are required. The hyperbolic functions and
    their inverses have default definitions in terms of ``exp``, ``ln``,
    ``sqrt`` and field arithmetic:

        sinh(x)  = (exp(x) - exp(-x)) / 2
        cosh(x)  = (exp(x) + exp(-x)) / 2
        tanh(x)  = (exp(x) - exp(-x)) / (exp(-x) + exp(x))
        asinh(x) = ln(sqrt(x*x + 1) + x)
        acosh(x) = ln(x + sqrt((x - 1) * (x + 1)))
        atanh(x) = (ln(x + 1) - ln(1 - x)) / 2

    Contexts with a native implementation (``math.sinh`` etc.) should
    override them.
    """

    EXP_OPERATION = "exp"
    LN_OPERATION = "ln"
    SINH_OPERATION = "sinh"
    COSH_OPERATION = "cosh"
    TANH_OPERATION = "tanh"
    ASINH_OPERATION = "asinh"
    ACOSH_OPERATION = "acosh"
    ATANH_OPERATION = "atanh"

    @property
    def e(self) -> T:
        """Euler's number in this algebra."""
        return self.exp(self.one)

    @abstractmethod
    def exp(self, arg: T) -> T:
        """Computes ``e`` raised to the power ``arg``."""

    @abstractmethod
    def ln(self, arg: T) -> T:
        """Computes the natural logarithm of ``arg``."""

    def sinh(self, arg: T) -> T:
        return self.divide_by_scalar(
            self.subtract(self.exp(arg), self.exp(self.negate(arg))), 2)

    def cosh(self, arg: T) -> T:
        return self.divide_by_scalar(
            self.add(self.exp(arg), self.exp(self.negate(arg))), 2)

    def tanh(self, arg: T) -> T:
        exp_plus = self.exp(arg)
        exp_minus = self.exp(self.negate(arg))
        return self.divide(self.subtract(exp_plus, exp_minus),
                           self.add(exp_minus, exp_plus))

    def asinh(self, arg: T) -> T:
        return self.ln(self.add(
            self.sqrt(self.add(self.multiply(arg, arg), self.one)), arg))

    def acosh(self, arg: T) -> T:
        return self.ln(self.add(arg, self.sqrt(
            self.multiply(self.subtract(arg, self.one), self.add(arg, self.one)))))

    def atanh(self, arg: T) -> T:
        return self.divide_by_scalar(
            self.subtract(self.ln(self.add(arg, self.one)),
                          self.ln(self.subtract(self.one, arg))), 2)

    def unary_operation(self, operation: str, arg: T) -> T:
        handlers = {
            self.EXP_OPERATION: self.exp,
            self.LN_OPERATION: self.ln,
            self.SINH_OPERATION: self.sinh,
            self.COSH_OPERATION: self.cosh,
            self.TANH_OPERATION: self.tanh,
            self.ASINH_OPERATION: self.asinh,
            self.ACOSH_OPERATION: self.acosh,
            self.ATANH_OPERATION: self.atanh,
        }
        if operation in handlers:
            return handlers[operation](arg)
        return super().unary_operation(operation, arg)


class Norm(ABC, Generic[T, R]):
    """A norm functional; the result type may differ from the element type."""

    @abstractmethod
    def norm(self, arg: T) -> R:
        """Computes the norm of ``arg`` (absolute value or vector length)."""


# =============================================================================
# Free functions: the context is always passed in explicitly
# =============================================================================

def sin(context: TrigonometricOperations[T], arg: T) -> T:
    return context.sin(arg)


def cos(context: TrigonometricOperations[T], arg: T) -> T:
    return context.cos(arg)


def tan(context: TrigonometricOperations[T], arg: T) -> T:
    return context.tan(arg)


def asin(context: TrigonometricOperations[T], arg: T) -> T:
    return context.asin(arg)


def acos(context: TrigonometricOperations[T], arg: T) -> T:
    return context.acos(arg)


def atan(context: TrigonometricOperations[T], arg: T) -> T:
    return context.atan(arg)


def power(context: PowerOperations[T], arg: T, exponent: Number) -> T:
    """Raises ``arg`` to ``exponent`` using the context's ``power``."""
    return context.power(arg, exponent)


def sqrt(context: PowerOperations[T], arg: T) -> T:
    """Square root as ``power(arg, 0.5)``, whatever the context's own sqrt does."""
    return context.power(arg, 0.5)


def sqr(context: PowerOperations[T], arg: T) -> T:
    """Square as ``power(arg, 2.0)``."""
    return context.power(arg, 2.0)


def exp(context: ExponentialOperations[T], arg: T) -> T:
    return context.exp(arg)


def ln(context: ExponentialOperations[T], arg: T) -> T:
    return context.ln(arg)


def sinh(context: ExponentialOperations[T], arg: T) -> T:
    return context.sinh(arg)


def cosh(context: ExponentialOperations[T], arg: T) -> T:
    return context.cosh(arg)


def tanh(context: ExponentialOperations[T], arg: T) -> T:
    return context.tanh(arg)


def asinh(context: ExponentialOperations[T], arg: T) -> T:
    return context.asinh(arg)


def acosh(context: ExponentialOperations[T], arg: T) -> T:
    return context.acosh(arg)


def atanh(context: ExponentialOperations[T], arg: T) -> T:
    return context.atanh(arg)


def norm(context: Norm[T, R], arg: T) -> R:
    return context.norm(arg)
