"""Exception hierarchy for the algebra toolkit."""


class AlgebraError(Exception):
    """Base class for errors raised by the toolkit itself.

    Errors raised by a user-supplied context (overflow, division by zero
    in a custom ring, ...) are not wrapped and propagate unchanged.
    """

    pass


class UnsupportedOperationError(AlgebraError, NotImplementedError):
    """An operation name is not implemented by the algebra it was sent to.

    Raised by name-based dispatch (``unary_operation`` /
    ``binary_operation``) when no capability of the context recognizes
    the requested operation.
    """

    pass


class FieldError(AlgebraError, ValueError):
    """Invalid arithmetic in a modular field.

    Raised for a modulus below 2, inversion of zero, and non-integral
    exponents or scalars in a prime field.
    """

    pass


class ShapeMismatchError(AlgebraError, ValueError):
    """Array operand does not have the shape its context was built for."""

    pass


class ConfigError(AlgebraError, ValueError):
    """Demo configuration value is out of range or unknown."""

    pass
