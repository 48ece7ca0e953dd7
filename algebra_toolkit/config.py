"""
Configuration for the Algebra Toolkit Demos.

The demos are parameterized by a small dataclass instead of scattered
constants, so tests and the console entry point can run the same code with
different settings.

Example:
    >>> config = DemoConfig(name="tiny", prime=7, sample_points=(0.0, 1.0))
    >>> config.num_samples
    2
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
import logging

from .errors import ConfigError

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class DemoConfig:
    """
    Settings shared by the demo scripts.

    Attributes:
        name: Configuration name for identification
        prime: Modulus for the prime-field examples
        sample_points: Points where the example polynomials are evaluated
        log_level: Name of the logging level for the ``algebra_toolkit`` logger
    """

    name: str = "default"
    prime: int = 97
    sample_points: Tuple[float, ...] = (-2.0, -0.5, 0.0, 1.0, 2.0, 3.0)
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate configuration."""
        self.sample_points = tuple(self.sample_points)
        self.log_level = self.log_level.upper()
        if self.prime < 2:
            raise ConfigError("prime must be at least 2")
        if not self.sample_points:
            raise ConfigError("sample_points must not be empty")
        if self.log_level not in VALID_LOG_LEVELS:
            raise ConfigError(
                f"log_level must be one of {VALID_LOG_LEVELS}, got {self.log_level!r}")

    @property
    def num_samples(self) -> int:
        return len(self.sample_points)

    @property
    def logging_level(self) -> int:
        """The numeric ``logging`` level for ``log_level``."""
        return getattr(logging, self.log_level)


def create_default_config() -> DemoConfig:
    """Settings used by the console entry points."""
    return DemoConfig()


def create_debug_config() -> DemoConfig:
    """Small prime, few points, debug logging: easy to follow by hand."""
    return DemoConfig(
        name="debug",
        prime=7,
        sample_points=(0.0, 1.0, 2.0),
        log_level="DEBUG",
    )
