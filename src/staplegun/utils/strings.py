"""String helpers."""

from typing import Any


def is_blank(value: Any) -> bool:
    """
    Check whether a value is missing or an all-whitespace string.

    Whitespace is whatever ``str.strip()`` removes. Non-string values
    other than None are never blank.

    Args:
        value: The value to check.

    Returns:
        True if the value is None or a string with no visible characters.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False
