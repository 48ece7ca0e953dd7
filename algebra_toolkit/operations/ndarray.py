"""
Elementwise Field over numpy Arrays.

NDArrayField treats arrays of one fixed shape as a field with elementwise
operations: the product of two matrices here is the Hadamard product, not
the matrix product. A polynomial whose coefficients are ``constant(c)``
arrays can then be evaluated over a whole grid of points in one call.

Key Points:
    - zero/one are arrays of zeros/ones with the context's shape
    - Every operation returns a new array; operands are never written to
    - Operands of the wrong shape raise ShapeMismatchError instead of
      silently broadcasting
    - ``norm`` is the 2-norm of the flattened array (Frobenius for matrices)

Example:
    >>> import numpy as np
    >>> field = NDArrayField((3,))
    >>> field.add(np.array([1.0, 2.0, 3.0]), field.one)
    array([2., 3., 4.])
"""

from __future__ import annotations
from typing import Sequence, Tuple, Union
import logging

import numpy as np

from ..errors import ShapeMismatchError
from .algebra import Number
from .optional import ExponentialOperations, Norm, TrigonometricOperations

logger = logging.getLogger(__name__)


class NDArrayField(ExponentialOperations[np.ndarray], TrigonometricOperations[np.ndarray],
                   Norm[np.ndarray, float]):
    """
    Elementwise field of fixed-shape numpy arrays.

    Attributes:
        shape: Shape every element must have
        dtype: numpy dtype used for zero, one and converted inputs
    """

    def __init__(self, shape: Union[int, Sequence[int]], dtype=np.float64):
        self.shape: Tuple[int, ...] = (shape,) if isinstance(shape, int) else tuple(shape)
        self.dtype = np.dtype(dtype)
        logger.debug("Created NDArrayField shape=%s dtype=%s", self.shape, self.dtype)

    def __repr__(self) -> str:
        return f"NDArrayField({self.shape}, dtype={self.dtype})"

    def element(self, values) -> np.ndarray:
        """Convert ``values`` to an array of this context, checking its shape."""
        return self._check(np.array(values, dtype=self.dtype))

    def constant(self, value: Number) -> np.ndarray:
        """An array of this context filled with ``value``."""
        return np.full(self.shape, value, dtype=self.dtype)

    def _check(self, *arrays: np.ndarray) -> np.ndarray:
        for array in arrays:
            if np.shape(array) != self.shape:
                raise ShapeMismatchError(
                    f"Expected shape {self.shape}, got {np.shape(array)}")
        return arrays[0]

    @property
    def zero(self) -> np.ndarray:
        return np.zeros(self.shape, dtype=self.dtype)

    @property
    def one(self) -> np.ndarray:
        return np.ones(self.shape, dtype=self.dtype)

    def add(self, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        self._check(a, b)
        return np.add(a, b)

    def subtract(self, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        self._check(a, b)
        return np.subtract(a, b)

    def negate(self, a: np.ndarray) -> np.ndarray:
        self._check(a)
        return np.negative(a)

    def multiply(self, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        self._check(a, b)
        return np.multiply(a, b)

    def multiply_by_scalar(self, a: np.ndarray, k: Number) -> np.ndarray:
        self._check(a)
        return np.multiply(a, k)

    def divide(self, a: np.ndarray, b: np.ndarray) -> np.ndarray:
        self._check(a, b)
        return np.divide(a, b)

    def sin(self, arg: np.ndarray) -> np.ndarray:
        return np.sin(self._check(arg))

    def cos(self, arg: np.ndarray) -> np.ndarray:
        return np.cos(self._check(arg))

    def tan(self, arg: np.ndarray) -> np.ndarray:
        return np.tan(self._check(arg))

    def asin(self, arg: np.ndarray) -> np.ndarray:
        return np.arcsin(self._check(arg))

    def acos(self, arg: np.ndarray) -> np.ndarray:
        return np.arccos(self._check(arg))

    def atan(self, arg: np.ndarray) -> np.ndarray:
        return np.arctan(self._check(arg))

    def power(self, arg: np.ndarray, exponent: Number) -> np.ndarray:
        return np.power(self._check(arg), exponent)

    def sqrt(self, arg: np.ndarray) -> np.ndarray:
        return np.sqrt(self._check(arg))

    def exp(self, arg: np.ndarray) -> np.ndarray:
        return np.exp(self._check(arg))

    def ln(self, arg: np.ndarray) -> np.ndarray:
        return np.log(self._check(arg))

    def sinh(self, arg: np.ndarray) -> np.ndarray:
        return np.sinh(self._check(arg))

    def cosh(self, arg: np.ndarray) -> np.ndarray:
        return np.cosh(self._check(arg))

    def tanh(self, arg: np.ndarray) -> np.ndarray:
        return np.tanh(self._check(arg))

    def norm(self, arg: np.ndarray) -> float:
        return float(np.linalg.norm(np.ravel(self._check(arg))))
