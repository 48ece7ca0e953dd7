"""
Real and Complex Number Contexts.

RealField works on Python floats through ``math``; ComplexField works on
Python complex numbers through ``cmath``. Both implement every optional
capability, which makes them the reference contexts for tests and demos.

Example:
    >>> real = RealField()
    >>> real.add(1.5, 2.0)
    3.5
    >>> ComplexField().norm(3 + 4j)
    5.0
"""

from __future__ import annotations
import cmath
import math

from .algebra import Number
from .optional import ExponentialOperations, Norm, TrigonometricOperations


class RealField(ExponentialOperations[float], TrigonometricOperations[float],
                Norm[float, float]):
    """
    The field of real numbers backed by floats.

    Errors come straight from Python: dividing by zero raises
    ZeroDivisionError, ``ln(-1.0)`` raises ValueError.
    """

    def __repr__(self) -> str:
        return "RealField()"

    @property
    def zero(self) -> float:
        return 0.0

    @property
    def one(self) -> float:
        return 1.0

    def add(self, a: float, b: float) -> float:
        return a + b

    def subtract(self, a: float, b: float) -> float:
        return a - b

    def negate(self, a: float) -> float:
        return -a

    def multiply(self, a: float, b: float) -> float:
        return a * b

    def multiply_by_scalar(self, a: float, k: Number) -> float:
        return a * k

    def divide(self, a: float, b: float) -> float:
        return a / b

    def divide_by_scalar(self, a: float, k: Number) -> float:
        return a / k

    # Trigonometric

    def sin(self, arg: float) -> float:
        return math.sin(arg)

    def cos(self, arg: float) -> float:
        return math.cos(arg)

    def tan(self, arg: float) -> float:
        return math.tan(arg)

    def asin(self, arg: float) -> float:
        return math.asin(arg)

    def acos(self, arg: float) -> float:
        return math.acos(arg)

    def atan(self, arg: float) -> float:
        return math.atan(arg)

    # Power and exponential

    def power(self, arg: float, exponent: Number) -> float:
        return math.pow(arg, exponent)

    def sqrt(self, arg: float) -> float:
        return math.sqrt(arg)

    def exp(self, arg: float) -> float:
        return math.exp(arg)

    def ln(self, arg: float) -> float:
        return math.log(arg)

    def sinh(self, arg: float) -> float:
        return math.sinh(arg)

    def cosh(self, arg: float) -> float:
        return math.cosh(arg)

    def tanh(self, arg: float) -> float:
        return math.tanh(arg)

    def asinh(self, arg: float) -> float:
        return math.asinh(arg)

    def acosh(self, arg: float) -> float:
        return math.acosh(arg)

    def atanh(self, arg: float) -> float:
        return math.atanh(arg)

    def norm(self, arg: float) -> float:
        return abs(arg)


class ComplexField(ExponentialOperations[complex], TrigonometricOperations[complex],
                   Norm[complex, float]):
    """
    The field of complex numbers.

    Hyperbolic functions are left to the generic definitions in
    ExponentialOperations, so they are computed from ``exp`` and ``ln``.
    """

    def __repr__(self) -> str:
        return "ComplexField()"

    @property
    def zero(self) -> complex:
        return 0j

    @property
    def one(self) -> complex:
        return 1 + 0j

    @property
    def i(self) -> complex:
        """The imaginary unit."""
        return 1j

    def add(self, a: complex, b: complex) -> complex:
        return a + b

    def multiply(self, a: complex, b: complex) -> complex:
        return a * b

    def multiply_by_scalar(self, a: complex, k: Number) -> complex:
        return a * k

    def divide(self, a: complex, b: complex) -> complex:
        return a / b

    def sin(self, arg: complex) -> complex:
        return cmath.sin(arg)

    def cos(self, arg: complex) -> complex:
        return cmath.cos(arg)

    def tan(self, arg: complex) -> complex:
        return cmath.tan(arg)

    def asin(self, arg: complex) -> complex:
        return cmath.asin(arg)

    def acos(self, arg: complex) -> complex:
        return cmath.acos(arg)

    def atan(self, arg: complex) -> complex:
        return cmath.atan(arg)

    def power(self, arg: complex, exponent: Number) -> complex:
        # principal branch, matching cmath.exp(exponent * cmath.log(arg))
        return complex(arg) ** exponent

    def exp(self, arg: complex) -> complex:
        return cmath.exp(arg)

    def ln(self, arg: complex) -> complex:
        return cmath.log(arg)

    def norm(self, arg: complex) -> float:
        return abs(arg)
