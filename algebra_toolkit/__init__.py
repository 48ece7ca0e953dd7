"""
Algebra Toolkit
===============

Generic algebraic operations and polynomials over arbitrary rings.

Arithmetic lives in algebra "context" objects (RealField, ComplexField,
PrimeField, NDArrayField, ...) that are passed explicitly to generic code,
rather than in the values themselves.

Modules:
    - operations: algebra hierarchy, optional operation families, contexts
    - functions: polynomials and context-dependent functions
    - common: prime-field arithmetic

Quick Start:
    >>> from algebra_toolkit.functions import Polynomial
    >>> from algebra_toolkit.operations import RealField
    >>> Polynomial([1.0, 2.0, 3.0]).value(RealField(), 2.0)
    17.0
"""

__version__ = "0.1.0"
__author__ = "Your Name"

from . import errors
from . import operations
from . import common
from . import functions
