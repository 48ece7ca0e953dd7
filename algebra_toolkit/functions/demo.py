"""
Polynomial Demo

This script demonstrates polynomial evaluation and polynomial arithmetic
over several rings, from simple to more unusual ones.

Run with:
    python -m algebra_toolkit.functions.demo
"""

from typing import Optional

from algebra_toolkit.common.field import PrimeField
from algebra_toolkit.config import DemoConfig, create_default_config
from algebra_toolkit.functions.polynomial import Polynomial, PolynomialSpace, polynomial
from algebra_toolkit.logging_config import setup_logging
from algebra_toolkit.operations.ndarray import NDArrayField
from algebra_toolkit.operations.real import ComplexField, RealField


def demo_evaluation(config: DemoConfig):
    """One coefficient list, several rings."""
    print("\n" + "=" * 70)
    print("DEMO 1: EVALUATION IN DIFFERENT RINGS")
    print("=" * 70)

    p = Polynomial.of(1, 2, 3)
    print(f"\np(x) = {p}")

    real = RealField()
    print(f"\nOver {real}:")
    for x in config.sample_points:
        print(f"  p({x}) = {p.value(real, x)}")

    complex_field = ComplexField()
    print(f"\nOver {complex_field}: p(i) = {p.value(complex_field, complex_field.i)}")

    field = PrimeField(config.prime)
    print(f"\nOver {field}:")
    for x in range(4):
        print(f"  p({x}) = {p.value(field, x)}")

    grid = NDArrayField(config.num_samples)
    p_grid = Polynomial(grid.constant(c) for c in p.coefficients)
    print(f"\nOver {grid}, all sample points at once:")
    print(f"  {p_grid.value(grid, grid.element(config.sample_points))}")


def demo_space(config: DemoConfig):
    """Addition and scaling in the polynomial space."""
    print("\n" + "=" * 70)
    print("DEMO 2: POLYNOMIAL SPACE")
    print("=" * 70)

    space = PolynomialSpace(RealField())
    a = Polynomial([1.0, 2.0])
    b = Polynomial([10.0, 20.0, 30.0])

    total = space.add(a, b)
    print(f"\na     = {a}")
    print(f"b     = {b}")
    print(f"a + b = {total}")
    print(f"2 * a = {space.multiply(a, 2)}")
    print(f"a - b = {space.subtract(a, b)}")

    x = config.sample_points[-1]
    print(f"\n(a + b)({x}) = {space.invoke(total, x)}")
    print(f"a({x}) + b({x}) = {space.invoke(a, x) + space.invoke(b, x)}")

    mod_sum = polynomial(PrimeField(config.prime),
                         lambda s: s.add(Polynomial([config.prime - 1, 1]), Polynomial([1])))
    print(f"\nIn Z_{config.prime}: [p-1, 1] + [1] = {list(mod_sum.coefficients)}")


def demo_self_powers():
    """The float-only self-powers sum, side by side with evaluation."""
    print("\n" + "=" * 70)
    print("DEMO 3: SUM OF SELF POWERS vs EVALUATION")
    print("=" * 70)

    p = Polynomial([2.0, 3.0, 4.0])
    print(f"\np = {list(p.coefficients)}")
    print(f"sum_of_self_powers = 2^0 + 3^1 + 4^2 = {p.sum_of_self_powers()}")
    print(f"value at x=1       = 2 + 3 + 4     = {p.value(RealField(), 1.0)}")


def main(config: Optional[DemoConfig] = None):
    """Run all demos."""
    config = config or create_default_config()
    setup_logging(config.logging_level)

    print("\n" + "=" * 70)
    print("POLYNOMIAL DEMO")
    print("=" * 70)

    demo_evaluation(config)
    demo_space(config)
    demo_self_powers()

    print("\n" + "=" * 70)
    print("ALL DEMOS COMPLETE")
    print("=" * 70)


if __name__ == "__main__":
    main()
