"""
Finite Field Arithmetic over Prime Moduli.

This module implements modular arithmetic over prime fields as an algebra
context: elements are plain Python ints in [0, p-1], and the PrimeField
object carries every operation. Nothing about the modulus is stored on the
values themselves, so the same int can be fed to any field.

Key Concepts:
    - All arithmetic is done modulo a prime p
    - Addition: (a + b) mod p
    - Multiplication: (a * b) mod p
    - Subtraction: (a - b + p) mod p (to keep positive)
    - Division: a * b^(-1) mod p (multiply by modular inverse)
    - Inversion: Find b such that a * b = 1 mod p

Example:
    >>> field = PrimeField(97)  # Small prime for demo
    >>> a = field.element(45)
    >>> b = field.element(67)
    >>> field.add(a, b)  # (45 + 67) mod 97 = 15
    15

Because PrimeField is a Field, it plugs straight into generic code such as
polynomial evaluation:
    >>> from algebra_toolkit.functions.polynomial import Polynomial
    >>> Polynomial([1, 2, 3]).value(field, 50)  # 1 + 100 + 7500 mod 97
    35
"""

from __future__ import annotations
from typing import Optional
import logging
import random

from ..errors import FieldError
from ..operations.algebra import Field, Number
from ..operations.optional import PowerOperations

logger = logging.getLogger(__name__)


def _as_integer(k: Number, what: str) -> int:
    """Accept ints and integral floats; anything else has no meaning mod p."""
    if isinstance(k, int):
        return k
    if isinstance(k, float) and k.is_integer():
        return int(k)
    raise FieldError(f"{what} must be integral in a prime field, got {k!r}")


class PrimeField(Field[int], PowerOperations[int]):
    """
    A prime field Z_p for modular arithmetic.

    Elements are ints reduced into [0, p-1]. Every operation returns a
    reduced int; inputs are reduced on the fly, so callers may pass any
    integer (including negatives).

    Attributes:
        prime: The prime modulus p

    Common Primes:
        - 97: Good for testing (small, easy to verify by hand)
        - 2^64 - 2^32 + 1: Goldilocks prime (fast on 64-bit CPUs)

    Example:
        >>> field = PrimeField(97)
        >>> field.multiply(45, 67)  # 3015 mod 97
        8
        >>> field.inverse(45)
        69
    """

    SMALL_TEST_PRIME = 97
    GOLDILOCKS_PRIME = (1 << 64) - (1 << 32) + 1  # 2^64 - 2^32 + 1

    def __init__(self, prime: int):
        """
        Initialize a prime field.

        Args:
            prime: The prime modulus. Should be prime for correct behavior.
                   (We don't verify primality for performance reasons)
        """
        if prime < 2:
            raise FieldError("Prime must be at least 2")
        self.prime = prime
        logger.debug("Created prime field Z_%d", prime)

    def __repr__(self) -> str:
        return f"PrimeField({self.prime})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, PrimeField) and other.prime == self.prime

    def __hash__(self) -> int:
        return hash(("PrimeField", self.prime))

    def element(self, value: int) -> int:
        """Reduce an integer into the field."""
        return value % self.prime

    @property
    def zero(self) -> int:
        """The additive identity (0)."""
        return 0

    @property
    def one(self) -> int:
        """The multiplicative identity (1)."""
        return 1

    def random(self, exclude_zero: bool = False,
               rng: Optional[random.Random] = None) -> int:
        """
        Generate a random field element.

        Args:
            exclude_zero: If True, never returns zero (useful for testing inverses)
            rng: Optional seeded generator; the module-level one is used otherwise

        Returns:
            A random int in [0, p-1] or [1, p-1]
        """
        rng = rng or random
        if exclude_zero:
            return rng.randint(1, self.prime - 1)
        return rng.randint(0, self.prime - 1)

    # Space / ring / field operations

    def add(self, a: int, b: int) -> int:
        """Add two integers in the field."""
        return (a + b) % self.prime

    def subtract(self, a: int, b: int) -> int:
        """Subtract two integers in the field."""
        return (a - b) % self.prime

    def negate(self, a: int) -> int:
        """Negate an integer in the field."""
        return (-a) % self.prime

    def multiply(self, a: int, b: int) -> int:
        """Multiply two integers in the field."""
        return (a * b) % self.prime

    def multiply_by_scalar(self, a: int, k: Number) -> int:
        """Scale by an integer k, i.e. add a to itself k times."""
        return (a * _as_integer(k, "Scalar")) % self.prime

    def divide_by_scalar(self, a: int, k: Number) -> int:
        return self.multiply(a, self.inverse(_as_integer(k, "Scalar")))

    def inverse(self, a: int) -> int:
        """
        Compute modular inverse using Extended Euclidean Algorithm.

        Finds b such that a * b = 1 (mod p), i.e. x, y with a*x + p*y = 1.

        Raises:
            FieldError: If a is 0 mod p, or shares a factor with p
        """
        value = a % self.prime
        if value == 0:
            raise FieldError("Cannot invert zero")

        old_r, r = value, self.prime
        old_s, s = 1, 0

        while r != 0:
            quotient = old_r // r
            old_r, r = r, old_r - quotient * r
            old_s, s = s, old_s - quotient * s

        # old_r is the gcd; it is 1 whenever the modulus really is prime
        if old_r != 1:
            raise FieldError(f"No inverse exists (gcd = {old_r})")

        return old_s % self.prime

    def divide(self, a: int, b: int) -> int:
        """Division in the field: a * b^(-1) mod p"""
        return self.multiply(a, self.inverse(b))

    def power(self, arg: int, exponent: Number) -> int:
        """
        Raise arg to an integral power with square-and-multiply.

        Negative exponents invert first: a^(-n) = (a^(-1))^n.
        Non-integral exponents (including the 0.5 of ``sqrt``) raise
        FieldError, since modular square roots are not unique.
        """
        exponent = _as_integer(exponent, "Exponent")
        if exponent < 0:
            return self.power(self.inverse(arg), -exponent)
        return pow(arg, exponent, self.prime)
