"""
Security module for caller input validation.

Every tool argument passes through InputValidator before the store is touched.
"""

from .exceptions import SecurityError, ValidationError
from .input_validator import InputValidator

__all__ = [
    "SecurityError",
    "ValidationError",
    "InputValidator",
]
