"""Keydown gate for separator and sign keys.

Runs before the browser applies a keystroke so that an edit which could
only be reverted afterwards (a second separator, a misplaced minus) is
never applied in the first place. Both ``.`` and ``,`` are treated as
"the decimal key" and written as the configured separator.
"""

from __future__ import annotations

from numfield.domain.types import (
    MINUS_SIGN,
    KeyAction,
    KeyDecision,
    KeyEvent,
    SanitizationConfig,
)

SEPARATOR_KEYS = frozenset({".", ","})


def _decision(action: KeyAction, value: str, caret: int) -> KeyDecision:
    return KeyDecision(action=action, value=value, caret_position=caret)


def handle_key(event: KeyEvent, config: SanitizationConfig) -> KeyDecision:
    """Decide whether a keystroke is allowed, blocked, or rewritten.

    Text inside the current selection is about to be overwritten, so a
    separator or sign inside it does not count as already present.
    """
    value = event.value
    start = min(event.selection_start, len(value))
    end = min(event.selection_end, len(value))
    untouched = value[:start] + value[end:]
    separator = config.decimal_separator
    key = event.key

    if key in SEPARATOR_KEYS or key == separator:
        if config.max_decimals == 0 or separator in untouched:
            return _decision(KeyAction.BLOCK, value, start)
        if key != separator:
            replaced = value[:start] + separator + value[end:]
            return _decision(KeyAction.REPLACE, replaced, start + 1)
        return _decision(KeyAction.ALLOW, value, start)

    if key == MINUS_SIGN:
        if not config.allow_negative or start != 0 or MINUS_SIGN in untouched:
            return _decision(KeyAction.BLOCK, value, start)

    return _decision(KeyAction.ALLOW, value, start)
