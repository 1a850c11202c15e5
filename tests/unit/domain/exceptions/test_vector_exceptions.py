"""
Vector exception unit tests.
"""

import unittest

from vectorix.domain.exceptions import (
    DimensionMismatchException,
    DivideByZeroException,
    DomainException,
    InvalidDimensionException,
    KeyMismatchException,
    VectorSpaceException,
    WrongDimensionException,
)


class TestVectorExceptions(unittest.TestCase):
    """Error codes, messages and hierarchy."""

    def test_error_codes_and_messages(self):
        cases = [
            (
                InvalidDimensionException(-1),
                "INVALID_DIMENSION",
                "Dimension must be zero or greater",
            ),
            (
                DimensionMismatchException(3, 2),
                "DIMENSION_MISMATCH",
                "The vectors must be of the same dimension",
            ),
            (
                KeyMismatchException([0, 1], ["x", "y"]),
                "KEY_MISMATCH",
                "The vectors' components must have the same keys",
            ),
            (
                WrongDimensionException(2),
                "WRONG_DIMENSION",
                "Both vectors must be 3-dimensional",
            ),
            (DivideByZeroException(), "DIVIDE_BY_ZERO", "Cannot divide by zero"),
        ]

        for exception, error_code, message in cases:
            with self.subTest(exception=type(exception).__name__):
                self.assertIsInstance(exception, DomainException)
                self.assertEqual(exception.error_code, error_code)
                self.assertEqual(exception.message, message)
                self.assertEqual(str(exception), f"[{error_code}] {message}")

    def test_vector_space_hierarchy(self):
        """Dimension and key mismatches share a base and are ValueErrors."""
        for exception in (
            DimensionMismatchException(3, 2),
            KeyMismatchException([0], ["x"]),
        ):
            with self.subTest(exception=type(exception).__name__):
                self.assertIsInstance(exception, VectorSpaceException)
                self.assertIsInstance(exception, ValueError)

    def test_wrong_dimension_is_not_a_vector_space_error(self):
        """Catching space mismatches does not catch the 3-D-only error."""
        exception = WrongDimensionException(2)

        self.assertNotIsInstance(exception, VectorSpaceException)
        self.assertIsInstance(exception, DomainException)
        self.assertIsInstance(exception, ValueError)

    def test_invalid_dimension_is_value_error(self):
        self.assertIsInstance(InvalidDimensionException(-1), ValueError)
        self.assertNotIsInstance(InvalidDimensionException(-1), VectorSpaceException)

    def test_divide_by_zero_is_zero_division_error(self):
        with self.assertRaises(ZeroDivisionError):
            raise DivideByZeroException()

    def test_attributes_carry_offending_values(self):
        mismatch = DimensionMismatchException(3, 2)
        keys = KeyMismatchException([0, 1], ["x", "y"])

        self.assertEqual((mismatch.expected, mismatch.actual), (3, 2))
        self.assertEqual(keys.expected_keys, (0, 1))
        self.assertEqual(keys.actual_keys, ("x", "y"))
        self.assertEqual(WrongDimensionException(4).dimension, 4)
        self.assertEqual(InvalidDimensionException(-7).dimension, -7)


if __name__ == "__main__":
    unittest.main()
