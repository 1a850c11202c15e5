"""
Domain value objects.
"""

from .vector import Number, Vector

__all__ = [
    "Number",
    "Vector",
]
