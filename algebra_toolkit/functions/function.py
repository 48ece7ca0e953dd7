"""Functions whose meaning depends on the algebra they are evaluated in."""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar

from ..operations.algebra import Algebra

T = TypeVar("T")
R = TypeVar("R")


class MathFunction(ABC, Generic[T, R]):
    """
    A function of one argument that needs an algebra to be computed.

    The same MathFunction can be evaluated over floats, complex numbers or
    a prime field, depending on the context handed to ``invoke``.
    """

    @abstractmethod
    def invoke(self, context: Algebra[T], arg: T) -> R:
        """Evaluate at ``arg`` using the operations of ``context``."""

    def bind(self, context: Algebra[T]) -> Callable[[T], R]:
        """Fix the context, giving back an ordinary one-argument callable."""
        return lambda arg: self.invoke(context, arg)
