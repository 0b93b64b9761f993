"""Conversions between stored property strings and typed values."""

import re
from typing import Any

from .exceptions import FormatError

_INT_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")


def to_property_string(value: Any) -> str:
    """Convert a typed value to the string form kept in the property store.

    Booleans are written as lowercase ``"true"``/``"false"``; everything else
    uses ``str()``.

    Args:
        value: Value to convert, must not be None

    Returns:
        String representation of the value
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def parse_int(key: str, raw: str) -> int:
    """Parse a stored property string as a base-10 integer.

    Args:
        key: Property name, used in the error message
        raw: Stored string value

    Returns:
        Parsed integer

    Raises:
        FormatError: If the value is not a base-10 integer literal, or has more
            digits than the interpreter allows for int/str conversion
    """
    if _INT_PATTERN.fullmatch(raw) is None:
        raise FormatError(f"Property {key} has value {raw!r} which is not a valid integer")
    try:
        return int(raw)
    except ValueError as e:
        # digit count above the interpreter int/str conversion limit
        raise FormatError(f"Property {key} has an integer value that is too long to convert") from e


def parse_bool(key: str, raw: str) -> bool:
    """Parse a stored property string as a boolean literal (case-insensitive)."""
    normalized = raw.strip().lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    raise FormatError(f"Property {key} has value {raw!r} which is not a valid boolean")
