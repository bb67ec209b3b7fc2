"""Leading-zero removal for the integer part of a numeric string."""

from __future__ import annotations

from numfield.domain.decimals import split_number
from numfield.domain.types import DEFAULT_DECIMAL_SEPARATOR


def strip_leading_zeros(value: str, separator: str = DEFAULT_DECIMAL_SEPARATOR) -> str:
    """Collapse redundant leading zeros, keeping a single ``0`` when needed.

    The fractional part is never touched.

    Examples:
        >>> strip_leading_zeros("007")
        '7'
        >>> strip_leading_zeros("-00.5")
        '-0.5'
        >>> strip_leading_zeros("0")
        '0'
    """
    parts = split_number(value, separator)
    if parts.integer in ("", "0"):
        return value
    integer = parts.integer.lstrip("0") or "0"
    tail = f"{separator}{parts.fraction}" if parts.has_separator else ""
    return f"{parts.sign}{integer}{tail}"
