"""Character allow-list filtering.

Keeps ASCII digits and the configured decimal separator. The minus sign
is handled separately: it survives only at position 0 and only when the
config allows negatives.
"""

from __future__ import annotations

import functools
import re
from typing import TYPE_CHECKING

from numfield.domain.patterns import escape_separator
from numfield.domain.types import MINUS_SIGN

if TYPE_CHECKING:
    from numfield.domain.types import SanitizationConfig


@functools.lru_cache(maxsize=64)
def _disallowed(separator: str) -> re.Pattern[str]:
    return re.compile(f"[^0-9{escape_separator(separator)}]")


def strip_disallowed(raw: str, separator: str) -> str:
    """Drop everything that is not an ASCII digit or *separator*."""
    return _disallowed(separator).sub("", raw)


def filter_characters(raw: str, config: SanitizationConfig) -> str:
    """Strip characters outside the allowed alphabet.

    With ``allow_negative``, a leading ``-`` is kept when something
    survives after it, and a lone ``-`` is kept so a negative number can
    be typed from scratch. Interior minus signs are always dropped.

    Examples:
        >>> from numfield.domain.types import SanitizationConfig
        >>> filter_characters("-1a-2", SanitizationConfig(allow_negative=True))
        '-12'
        >>> filter_characters("-", SanitizationConfig(allow_negative=False))
        ''
    """
    separator = config.decimal_separator
    if not config.allow_negative or not raw.startswith(MINUS_SIGN):
        return strip_disallowed(raw, separator)

    body = strip_disallowed(raw[1:], separator)
    if body:
        return MINUS_SIGN + body
    if raw == MINUS_SIGN:
        return MINUS_SIGN
    return ""
