"""
Algebra Contexts Demo

This script walks through the same operations in several contexts: real
numbers, complex numbers, a prime field and numpy arrays.

Run with:
    python -m algebra_toolkit.operations.demo
"""

from typing import Optional

import numpy as np

from algebra_toolkit.common.field import PrimeField
from algebra_toolkit.config import DemoConfig, create_default_config
from algebra_toolkit.errors import AlgebraError
from algebra_toolkit.logging_config import setup_logging
from algebra_toolkit.operations.ndarray import NDArrayField
from algebra_toolkit.operations.optional import (
    ExponentialOperations,
    TrigonometricOperations,
    exp,
    norm,
    sin,
    sinh,
    sqr,
    sqrt,
)
from algebra_toolkit.operations.real import ComplexField, RealField


def demo_free_functions(config: DemoConfig):
    """Same free functions, different contexts."""
    print("\n" + "=" * 70)
    print("DEMO 1: FREE FUNCTIONS OVER DIFFERENT CONTEXTS")
    print("=" * 70)

    real = RealField()
    complex_field = ComplexField()

    print(f"\n{'x':>8} | {'sin(x)':>10} | {'exp(x)':>10} | {'sqr(x)':>10}")
    print("-" * 48)
    for x in config.sample_points:
        print(f"{x:>8.2f} | {sin(real, x):>10.4f} | {exp(real, x):>10.4f} | {sqr(real, x):>10.4f}")

    print(f"\nsqrt(-1) in {complex_field}: {sqrt(complex_field, -1 + 0j)}")
    print(f"norm(3+4j): {norm(complex_field, 3 + 4j)}")
    print(f"sinh(1j) from exp/ln defaults: {sinh(complex_field, 1j):.4f}")


def demo_prime_field(config: DemoConfig):
    """Modular arithmetic and the operations a prime field refuses."""
    print("\n" + "=" * 70)
    print(f"DEMO 2: PRIME FIELD Z_{config.prime}")
    print("=" * 70)

    field = PrimeField(config.prime)
    a, b = field.element(45), field.element(67)
    print(f"\na = {a}, b = {b}")
    print(f"a + b = {field.add(a, b)}")
    print(f"a * b = {field.multiply(a, b)}")
    print(f"a / b = {field.divide(a, b)}")
    print(f"a^-1  = {field.inverse(a)}  (a * a^-1 = {field.multiply(a, field.inverse(a))})")

    try:
        field.sqrt(a)
    except AlgebraError as exc:
        print(f"sqrt(a) -> {type(exc).__name__}: {exc}")


def demo_named_operations(config: DemoConfig):
    """Operation-name dispatch, as used by expression evaluators."""
    print("\n" + "=" * 70)
    print("DEMO 3: DISPATCH BY OPERATION NAME")
    print("=" * 70)

    field = NDArrayField(config.num_samples)
    points = field.element(config.sample_points)
    print(f"\npoints = {points}")

    for name in (TrigonometricOperations.COS_OPERATION,
                 ExponentialOperations.TANH_OPERATION,
                 field.MINUS_OPERATION):
        print(f"{name:>5}(points) = {np.round(field.unary_operation(name, points), 4)}")
    print(f"    points * points = {field.binary_operation(field.TIMES_OPERATION, points, points)}")
    print(f"    |points| = {field.norm(points):.4f}")


def main(config: Optional[DemoConfig] = None):
    """Run all demos."""
    config = config or create_default_config()
    setup_logging(config.logging_level)

    print("\n" + "=" * 70)
    print("ALGEBRA CONTEXTS DEMO")
    print("=" * 70)

    demo_free_functions(config)
    demo_prime_field(config)
    demo_named_operations(config)

    print("\n" + "=" * 70)
    print("ALL DEMOS COMPLETE")
    print("=" * 70)


if __name__ == "__main__":
    main()
