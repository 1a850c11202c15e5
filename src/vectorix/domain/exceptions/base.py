"""
Base class for domain exceptions.
"""

from typing import Optional


class DomainException(Exception):
    """
    Base class for every exception raised by the vectorix domain.

    Carries a human readable message and an optional stable error code.
    """

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message
