"""
Immutable Euclidean vectors.

Provides the :class:`Vector` value object with its algebraic operations
(sums, scalar products, dot/cross/triple products, normalization,
projection and angles) and the domain exceptions those operations raise.
"""

from .common.logging import configure_structured_logging
from .domain import (
    DimensionMismatchException,
    DivideByZeroException,
    DomainException,
    InvalidDimensionException,
    KeyMismatchException,
    Vector,
    VectorSpaceException,
    WrongDimensionException,
)

__version__ = "0.1.0"

__all__ = [
    "Vector",
    "DomainException",
    "InvalidDimensionException",
    "VectorSpaceException",
    "DimensionMismatchException",
    "KeyMismatchException",
    "WrongDimensionException",
    "DivideByZeroException",
    "configure_structured_logging",
]
