"""
Validation helpers for the bank records model.

This module contains the single error type raised by the entities and the
shared string check they use.
"""

from typing import Optional


class InvalidArgument(ValueError):
    """Raised when an entity is built or used with an invalid value."""


def validate_string(value: Optional[str], field: str = "Value") -> None:
    """
    Ensure a string is neither None nor blank.

    Args:
        value: String to check
        field: Human-readable field name used in the error message

    Raises:
        InvalidArgument: If the value is None, not a string, empty or whitespace only
    """
    if value is None or not isinstance(value, str) or not value.strip():
        raise InvalidArgument(f"{field} cannot be None or blank")
