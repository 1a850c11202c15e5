"""
Vector domain.

Holds the immutable Vector value object and the exceptions its operations raise.
"""

# Domain Exceptions
from .exceptions.base import DomainException
from .exceptions.vector_exceptions import (
    DimensionMismatchException,
    DivideByZeroException,
    InvalidDimensionException,
    KeyMismatchException,
    VectorSpaceException,
    WrongDimensionException,
)

# Value Objects
from .value_objects.vector import Vector

__all__ = [
    # Value Objects
    "Vector",
    # Exceptions
    "DomainException",
    "InvalidDimensionException",
    "VectorSpaceException",
    "DimensionMismatchException",
    "KeyMismatchException",
    "WrongDimensionException",
    "DivideByZeroException",
]
