"""
Vector-related domain exceptions.
"""

from collections.abc import Hashable, Sequence

from .base import DomainException


class InvalidDimensionException(DomainException, ValueError):
    """Raised when a vector is requested with a negative dimension."""

    def __init__(self, dimension: int):
        super().__init__(
            "Dimension must be zero or greater",
            error_code="INVALID_DIMENSION",
        )
        self.dimension = dimension


class VectorSpaceException(DomainException, ValueError):
    """Raised when two vectors do not share a vector space."""


class DimensionMismatchException(VectorSpaceException):
    """Raised when the operands of a binary operation differ in dimension."""

    def __init__(self, expected: int, actual: int):
        super().__init__(
            "The vectors must be of the same dimension",
            error_code="DIMENSION_MISMATCH",
        )
        self.expected = expected
        self.actual = actual


class KeyMismatchException(VectorSpaceException):
    """Raised when same-dimension operands are keyed differently."""

    def __init__(self, expected_keys: Sequence[Hashable], actual_keys: Sequence[Hashable]):
        super().__init__(
            "The vectors' components must have the same keys",
            error_code="KEY_MISMATCH",
        )
        self.expected_keys = tuple(expected_keys)
        self.actual_keys = tuple(actual_keys)


class WrongDimensionException(DomainException, ValueError):
    """Raised when a cross-product operand is not 3-dimensional."""

    def __init__(self, dimension: int):
        super().__init__(
            "Both vectors must be 3-dimensional",
            error_code="WRONG_DIMENSION",
        )
        self.dimension = dimension


class DivideByZeroException(DomainException, ZeroDivisionError):
    """Raised when a division, normalization or angle has a zero denominator."""

    def __init__(self):
        super().__init__("Cannot divide by zero", error_code="DIVIDE_BY_ZERO")
