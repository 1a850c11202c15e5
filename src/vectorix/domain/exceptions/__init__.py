"""
Domain exceptions.
"""

from .base import DomainException
from .vector_exceptions import (
    DimensionMismatchException,
    DivideByZeroException,
    InvalidDimensionException,
    KeyMismatchException,
    VectorSpaceException,
    WrongDimensionException,
)

__all__ = [
    "DomainException",
    "InvalidDimensionException",
    "VectorSpaceException",
    "DimensionMismatchException",
    "KeyMismatchException",
    "WrongDimensionException",
    "DivideByZeroException",
]
