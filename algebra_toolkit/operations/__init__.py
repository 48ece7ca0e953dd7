"""
Algebra contexts and optional operation families.

Structures:
    - Algebra, Space, Ring, Field: the arithmetic hierarchy
    - TrigonometricOperations, PowerOperations, ExponentialOperations, Norm:
      capabilities a context may opt into

Contexts:
    - RealField, ComplexField: Python floats and complex numbers
    - NDArrayField: elementwise arithmetic on fixed-shape numpy arrays
"""

from .algebra import Algebra, Field, Number, Ring, Space
from .optional import (
    ExponentialOperations,
    Norm,
    PowerOperations,
    TrigonometricOperations,
    acos,
    acosh,
    asin,
    asinh,
    atan,
    atanh,
    cos,
    cosh,
    exp,
    ln,
    norm,
    power,
    sin,
    sinh,
    sqr,
    sqrt,
    tan,
    tanh,
)
from .real import ComplexField, RealField
from .ndarray import NDArrayField

__all__ = [
    "Algebra",
    "Space",
    "Ring",
    "Field",
    "Number",
    "TrigonometricOperations",
    "PowerOperations",
    "ExponentialOperations",
    "Norm",
    "RealField",
    "ComplexField",
    "NDArrayField",
    "sin", "cos", "tan", "asin", "acos", "atan",
    "power", "sqrt", "sqr",
    "exp", "ln", "sinh", "cosh", "tanh", "asinh", "acosh", "atanh",
    "norm",
]
