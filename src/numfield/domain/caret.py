"""Caret arithmetic.

Carets are pure functions of lengths and offsets; nothing here tracks
cursor state between calls. Every result is clamped to ``[0, len(value)]``.
"""

from __future__ import annotations


def clamp_caret(position: int, value: str) -> int:
    """Clamp *position* into the valid caret range of *value*."""
    return max(0, min(position, len(value)))


def compensate_caret(caret: int, raw_length: int, sanitized: str) -> int:
    """Shift *caret* left by the number of characters sanitization removed.

    *raw_length* is the length of the value as the browser saw it;
    *sanitized* is what survived.

    Examples:
        >>> compensate_caret(5, 5, "1.23")
        4
        >>> compensate_caret(0, 3, "")
        0
    """
    removed = raw_length - len(sanitized)
    return clamp_caret(caret - removed, sanitized)
