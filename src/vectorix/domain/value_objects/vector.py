"""
Vector value object.
"""

import math
from collections.abc import Hashable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Union

from ...common.logging import get_logger
from ..exceptions import (
    DimensionMismatchException,
    DivideByZeroException,
    InvalidDimensionException,
    KeyMismatchException,
    WrongDimensionException,
)

Number = Union[int, float]

logger = get_logger(__name__)


@dataclass(frozen=True, eq=False)
class Vector:
    """
    An immutable Euclidean vector.

    Components are kept as an ordered mapping from key to number. Keys are
    either positional indices (when built from a sequence) or arbitrary
    hashable labels. Every operation returns a new vector or a scalar; no
    instance changes state after construction.
    """

    components: Mapping[Hashable, Number]

    def __post_init__(self):
        components = self.components
        if isinstance(components, Mapping):
            stored = dict(components)
        else:
            stored = dict(enumerate(components))
        object.__setattr__(self, "components", MappingProxyType(stored))

    @classmethod
    def zero_vector(cls, dimension: int) -> "Vector":
        """Create a vector of ``dimension`` integer zeros keyed ``0..dimension-1``."""
        if dimension < 0:
            logger.debug("invalid_dimension", dimension=dimension)
            raise InvalidDimensionException(dimension)
        return cls([0] * dimension)

    @property
    def dimension(self) -> int:
        """Number of components."""
        return len(self.components)

    def keys(self) -> tuple:
        """Component keys in order."""
        return tuple(self.components)

    def length(self) -> float:
        """Euclidean norm."""
        return math.sqrt(sum(component**2 for component in self.components.values()))

    def is_equal(self, other: "Vector") -> bool:
        """
        Whether both vectors have the same keys, order and values.

        Values compare with Python numeric equality and no tolerance, so
        ``1`` and ``1.0`` are equal while ``1.0`` and ``1.0 + 1e-12`` are not.
        """
        return list(self.components.items()) == list(other.components.items())

    def is_same_dimension(self, other: "Vector") -> bool:
        """Whether both vectors have the same number of components."""
        return self.dimension == other.dimension

    def is_same_vector_space(self, other: "Vector") -> bool:
        """Whether both vectors are keyed identically, in the same order."""
        return self.keys() == other.keys()

    def _check_vector_space(self, other: "Vector") -> None:
        if not self.is_same_dimension(other):
            logger.debug(
                "vector_space_mismatch",
                reason="dimension",
                expected=self.dimension,
                actual=other.dimension,
            )
            raise DimensionMismatchException(self.dimension, other.dimension)
        if not self.is_same_vector_space(other):
            logger.debug(
                "vector_space_mismatch",
                reason="keys",
                expected=list(self.keys()),
                actual=list(other.keys()),
            )
            raise KeyMismatchException(self.keys(), other.keys())

    def add(self, other: "Vector") -> "Vector":
        """Componentwise sum."""
        self._check_vector_space(other)
        return Vector(
            {key: value + other.components[key] for key, value in self.components.items()}
        )

    def subtract(self, other: "Vector") -> "Vector":
        """Componentwise difference."""
        return self.add(other.multiply_by_scalar(-1))

    def multiply_by_scalar(self, scalar: Number) -> "Vector":
        """Scale every component by ``scalar``."""
        return Vector({key: value * scalar for key, value in self.components.items()})

    def divide_by_scalar(self, scalar: Number) -> "Vector":
        """
        Divide every component by ``scalar``.

        The result always holds floats, even for integer inputs.

        Raises:
            DivideByZeroException: If ``scalar`` is zero
        """
        if scalar == 0:
            logger.debug("divide_by_zero", operation="divide_by_scalar")
            raise DivideByZeroException()
        return self.multiply_by_scalar(1.0 / scalar)

    def dot_product(self, other: "Vector") -> Number:
        """
        Sum of the componentwise products.

        Integer operands give an integer result.
        """
        self._check_vector_space(other)
        return sum(value * other.components[key] for key, value in self.components.items())

    def cross_product(self, other: "Vector") -> "Vector":
        """
        Right-handed cross product of two 3-dimensional vectors.

        The result uses the operands' keys in their iteration order, so any
        three labels are accepted, not only ``0, 1, 2``.

        Raises:
            DimensionMismatchException: If the dimensions differ
            KeyMismatchException: If the keys differ
            WrongDimensionException: If the vectors are not 3-dimensional
        """
        self._check_vector_space(other)
        if self.dimension != 3:
            logger.debug("wrong_dimension", operation="cross_product", dimension=self.dimension)
            raise WrongDimensionException(self.dimension)

        k0, k1, k2 = self.keys()
        a = self.components
        b = other.components
        return Vector(
            {
                k0: a[k1] * b[k2] - a[k2] * b[k1],
                k1: a[k2] * b[k0] - a[k0] * b[k2],
                k2: a[k0] * b[k1] - a[k1] * b[k0],
            }
        )

    def scalar_triple_product(self, b: "Vector", c: "Vector") -> Number:
        """``self . (b x c)``."""
        return self.dot_product(b.cross_product(c))

    def vector_triple_product(self, b: "Vector", c: "Vector") -> "Vector":
        """``self x (b x c)``."""
        return self.cross_product(b.cross_product(c))

    def normalize(self) -> "Vector":
        """
        Unit vector in the same direction.

        Raises:
            DivideByZeroException: If the vector has zero length
        """
        return self.divide_by_scalar(self.length())

    def project_onto(self, other: "Vector") -> "Vector":
        """Vector projection of ``self`` onto ``other``."""
        unit = other.normalize()
        return unit.multiply_by_scalar(self.dot_product(unit))

    def angle_between(self, other: "Vector") -> float:
        """
        Angle to ``other`` in radians.

        Raises:
            DimensionMismatchException: If the dimensions differ
            KeyMismatchException: If the keys differ
            DivideByZeroException: If either vector has zero length
        """
        self._check_vector_space(other)
        denominator = self.length() * other.length()
        if denominator == 0:
            logger.debug("divide_by_zero", operation="angle_between")
            raise DivideByZeroException()

        # Rounding can push parallel vectors just past +/-1.
        cosine = max(-1.0, min(1.0, self.dot_product(other) / denominator))
        return math.acos(cosine)

    def __getitem__(self, key: Hashable) -> Number:
        return self.components[key]

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.components)

    def __contains__(self, key: object) -> bool:
        return key in self.components

    def __reduce__(self):
        return (Vector, (dict(self.components),))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.is_equal(other)

    def __hash__(self) -> int:
        return hash(tuple(self.components.items()))

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "Vector":
        return self.multiply_by_scalar(-1)

    def __mul__(self, scalar: Number) -> "Vector":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self.multiply_by_scalar(scalar)

    def __rmul__(self, scalar: Number) -> "Vector":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: Number) -> "Vector":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self.divide_by_scalar(scalar)

    def __matmul__(self, other: "Vector") -> Number:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dot_product(other)

    def __str__(self) -> str:
        return f"Vector({self.dimension}d)"

    def __repr__(self) -> str:
        return f"Vector(components={dict(self.components)})"
