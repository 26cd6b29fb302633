"""
Input validation for tool arguments.

Runs before any store access, so malformed calls never reach Redis.
"""

from typing import Any

from .exceptions import ValidationError


class InputValidator:
    """
    Validates caller-supplied tool arguments.

    Keys are compared byte-for-byte downstream, so nothing here strips,
    escapes, truncates or case-folds them.
    """

    @staticmethod
    def validate_key(key: Any, field_name: str = "title") -> str:
        """
        Validate a store key (paper title or memory ID).

        :param key: Caller-supplied key
        :param field_name: Argument name for error messages
        :return: The key, unchanged
        :raises ValidationError: If key is not a string
        """
        if not isinstance(key, str):
            raise ValidationError(f"argument '{field_name}' is missing or not a string")
        return key

    @staticmethod
    def optional_text(value: Any) -> str:
        """Optional text argument; anything that is not a string reads as empty."""
        return value if isinstance(value, str) else ""

    @staticmethod
    def parse_top_k(value: Any, default: int) -> int:
        """
        Coerce a caller-supplied top_k.

        Numbers are truncated, numeric strings parsed; anything else, or a value
        below 1, falls back to default.
        """
        if isinstance(value, bool):
            return default

        top_k = default
        try:
            if isinstance(value, (int, float)):
                top_k = int(value)
            elif isinstance(value, str):
                top_k = int(value.strip())
        except (ValueError, OverflowError):
            return default

        if top_k < 1:
            return default
        return top_k
