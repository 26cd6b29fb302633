"""
Security-related exceptions.

Kept apart from the domain exceptions: these are caller mistakes, not store failures.
"""


class SecurityError(Exception):
    """Base exception for rejected caller input."""

    pass


class ValidationError(SecurityError):
    """Raised when input validation fails."""

    pass
