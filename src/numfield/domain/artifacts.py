"""Mobile keyboard and IME artifact filtering.

Virtual keyboards and input method editors insert non-breaking or
typographic spaces where a plain space (or nothing) was meant. These are
folded to a plain space and then all whitespace is dropped, so sign and
separator detection downstream never sees them.
"""

from __future__ import annotations

import re

# NBSP, U+2000..U+200B (en/em/thin/hair/zero-width spaces), narrow NBSP,
# medium mathematical space, ideographic space.
_ARTIFACT_SPACES = re.compile(r"[\u00a0\u2000-\u200b\u202f\u205f\u3000]")
_WHITESPACE = re.compile(r"\s")


def normalize_artifacts(raw: str) -> str:
    """Remove whitespace-like artifacts regardless of their Unicode form.

    Examples:
        >>> normalize_artifacts("1\\u00a0234")
        '1234'
        >>> normalize_artifacts("1 234")
        '1234'
    """
    return _WHITESPACE.sub("", _ARTIFACT_SPACES.sub(" ", raw))
