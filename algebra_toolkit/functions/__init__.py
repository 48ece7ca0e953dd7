"""
Functions over algebra contexts.

Components:
    - MathFunction: a function evaluated inside a caller-chosen algebra
    - Polynomial: coefficient list, evaluated over any Ring
    - PolynomialSpace: addition and scaling of polynomials over a Ring
"""

from .function import MathFunction
from .polynomial import Polynomial, PolynomialFunction, PolynomialSpace, polynomial

__all__ = [
    "MathFunction",
    "Polynomial",
    "PolynomialFunction",
    "PolynomialSpace",
    "polynomial",
]
