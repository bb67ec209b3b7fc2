"""Fractional-part rules: truncation, separator dedup, and padding.

All functions split on the *first* separator; the integer part keeps any
leading sign untouched. Nothing here rounds.
"""

from __future__ import annotations

from dataclasses import dataclass

from numfield.domain.types import DEFAULT_DECIMAL_SEPARATOR, MINUS_SIGN


@dataclass(frozen=True)
class NumberParts:
    """A numeric string split at its first separator."""

    sign: str
    integer: str
    fraction: str
    has_separator: bool


def split_number(value: str, separator: str = DEFAULT_DECIMAL_SEPARATOR) -> NumberParts:
    """Split *value* into sign, integer and fractional parts.

    Examples:
        >>> split_number("-12.5")
        NumberParts(sign='-', integer='12', fraction='5', has_separator=True)
    """
    sign = MINUS_SIGN if value.startswith(MINUS_SIGN) else ""
    integer, found, fraction = value[len(sign) :].partition(separator)
    return NumberParts(sign=sign, integer=integer, fraction=fraction, has_separator=bool(found))


def limit_decimals(
    value: str,
    max_decimals: int | None,
    separator: str = DEFAULT_DECIMAL_SEPARATOR,
) -> str:
    """Truncate the fractional part of *value* to *max_decimals* characters.

    ``None`` leaves *value* alone; ``0`` drops the separator and everything
    after it.

    Examples:
        >>> limit_decimals("1.239", 2)
        '1.23'
        >>> limit_decimals("1.5", 0)
        '1'
        >>> limit_decimals("12", 2)
        '12'
    """
    if max_decimals is None:
        return value
    integer, found, fraction = value.partition(separator)
    if not found:
        return value
    if max_decimals == 0:
        return integer
    return f"{integer}{separator}{fraction[:max_decimals]}"


def remove_extra_separators(value: str, separator: str = DEFAULT_DECIMAL_SEPARATOR) -> str:
    """Keep the first *separator* in *value* and drop every later one.

    Examples:
        >>> remove_extra_separators("1.2.3.4")
        '1.234'
    """
    head, found, tail = value.partition(separator)
    if not found:
        return value
    return f"{head}{separator}{tail.replace(separator, '')}"


def ensure_min_decimals(
    value: str,
    min_decimals: int,
    separator: str = DEFAULT_DECIMAL_SEPARATOR,
) -> str:
    """Pad the fractional part of *value* with zeros to *min_decimals*.

    Never truncates. A value without a separator gains one.

    Examples:
        >>> ensure_min_decimals("1.5", 2)
        '1.50'
        >>> ensure_min_decimals("-1", 2)
        '-1.00'
        >>> ensure_min_decimals("1.123", 2)
        '1.123'
    """
    if min_decimals <= 0:
        return value
    parts = split_number(value, separator)
    fraction = parts.fraction.ljust(min_decimals, "0")
    return f"{parts.sign}{parts.integer}{separator}{fraction}"
