"""
Common utilities for the Algebra Toolkit.

This module provides:
    - Modular integer arithmetic (PrimeField)
"""

from .field import PrimeField

__all__ = [
    "PrimeField",
]
