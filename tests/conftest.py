"""Shared fixtures for the algebra toolkit tests."""

import random

import pytest

from algebra_toolkit.common.field import PrimeField
from algebra_toolkit.operations.algebra import Ring
from algebra_toolkit.operations.ndarray import NDArrayField
from algebra_toolkit.operations.real import ComplexField, RealField


class CountingRing(Ring[float]):
    """Float ring that counts how often each operation is used."""

    def __init__(self):
        self.additions = 0
        self.multiplications = 0

    @property
    def zero(self):
        return 0.0

    @property
    def one(self):
        return 1.0

    def add(self, a, b):
        self.additions += 1
        return a + b

    def multiply(self, a, b):
        self.multiplications += 1
        return a * b

    def multiply_by_scalar(self, a, k):
        return a * k


@pytest.fixture
def real_field():
    return RealField()


@pytest.fixture
def complex_field():
    return ComplexField()


@pytest.fixture
def prime_field():
    return PrimeField(PrimeField.SMALL_TEST_PRIME)


@pytest.fixture
def vector_field():
    return NDArrayField((4,))


@pytest.fixture
def counting_ring():
    return CountingRing()


@pytest.fixture
def rng():
    return random.Random(1234)
