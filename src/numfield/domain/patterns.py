"""Validation pattern construction.

The pattern is what a host widget installs as its native constraint
(``<input pattern=...>``). Every value the sanitizers return matches it.
"""

from __future__ import annotations

import functools
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from numfield.domain.types import SanitizationConfig


def escape_separator(separator: str) -> str:
    """Escape *separator* for safe use inside a regex character class.

    Examples:
        >>> escape_separator(".")
        '\\\\.'
        >>> escape_separator(",")
        ','
    """
    return re.escape(separator)


def build_pattern(separator: str, allow_negative: bool) -> str:
    """Return an anchored pattern for a partial or complete decimal number.

    Optional leading minus (only when *allow_negative*), digits, at most
    one *separator*, digits. The empty string matches.
    """
    sign = "-?" if allow_negative else ""
    return f"^{sign}[0-9]*[{escape_separator(separator)}]?[0-9]*$"


@functools.lru_cache(maxsize=64)
def _compile(separator: str, allow_negative: bool) -> re.Pattern[str]:
    return re.compile(build_pattern(separator, allow_negative))


def compile_pattern(config: SanitizationConfig) -> re.Pattern[str]:
    """Compiled :func:`build_pattern` for *config* (cached per policy)."""
    return _compile(config.decimal_separator, config.allow_negative)


def matches_pattern(value: str, config: SanitizationConfig) -> bool:
    """Check whether *value* is an acceptable field value under *config*."""
    return compile_pattern(config).fullmatch(value) is not None
