"""Edit and paste sanitizers — the pipeline the host widget calls.

Stage order is fixed: artifact normalizer, character filter, separator
gate or dedup, optional leading-zero strip, decimal limiter. The caret is
computed last, from lengths only.

INVARIANT: every returned value matches ``build_pattern`` for the same
config, and every caret lies in ``[0, len(value)]``.
"""

from __future__ import annotations

from numfield.domain.artifacts import normalize_artifacts
from numfield.domain.caret import clamp_caret, compensate_caret
from numfield.domain.characters import filter_characters
from numfield.domain.decimals import ensure_min_decimals, limit_decimals, remove_extra_separators
from numfield.domain.leading_zeros import strip_leading_zeros
from numfield.domain.types import (
    MINUS_SIGN,
    EditEvent,
    PasteEvent,
    SanitizationConfig,
    SanitizationResult,
)


def _clean(raw: str, config: SanitizationConfig) -> str:
    return filter_characters(normalize_artifacts(raw), config)


def _finish(value: str, config: SanitizationConfig) -> str:
    separator = config.decimal_separator
    if not config.allow_leading_zeros:
        value = strip_leading_zeros(value, separator)
    return limit_decimals(value, config.max_decimals, separator)


def sanitize_value(raw: str, config: SanitizationConfig) -> str:
    """Run the full pipeline on a standalone value.

    Used for programmatic assignment and for reverting an edit. Extra
    separators are dropped rather than rejected since there is no
    previous value to fall back to.
    """
    cleaned = remove_extra_separators(_clean(raw, config), config.decimal_separator)
    return _finish(cleaned, config)


def finalize_value(raw: str, config: SanitizationConfig) -> str:
    """Sanitize *raw* and pad it to ``config.min_decimals`` (on commit/blur)."""
    value = sanitize_value(raw, config)
    if value in ("", MINUS_SIGN):
        return value
    return ensure_min_decimals(value, config.min_decimals, config.decimal_separator)


def sanitize_edit(event: EditEvent, config: SanitizationConfig) -> SanitizationResult:
    """Sanitize a value the browser has already edited in place.

    An edit that leaves two separators behind is reverted to the previous
    value with the caret where it was before the edit. Otherwise the caret
    moves left by however many characters the pipeline removed.
    """
    filtered = _clean(event.proposed_value, config)
    if filtered.count(config.decimal_separator) > 1:
        reverted = sanitize_value(event.previous_value, config)
        return SanitizationResult(
            value=reverted,
            caret_position=clamp_caret(event.caret_before, reverted),
            reverted=True,
        )

    candidate = _finish(filtered, config)
    caret = compensate_caret(event.caret_after, len(event.proposed_value), candidate)
    return SanitizationResult(value=candidate, caret_position=caret)


def _inserted_span_length(pasted: str, head: str, config: SanitizationConfig) -> int:
    """Length of the pasted text that survives once spliced after *head*."""
    separator = config.decimal_separator
    span = limit_decimals(
        remove_extra_separators(_clean(pasted, config), separator),
        config.max_decimals,
        separator,
    )
    length = len(span)
    # The earlier separator wins, so the span's own one is dropped.
    if separator in span and separator in head:
        length -= 1
    # A sign only survives at position 0.
    if span.startswith(MINUS_SIGN) and head:
        length -= 1
    return length


def sanitize_paste(event: PasteEvent, config: SanitizationConfig) -> SanitizationResult:
    """Splice pasted text over the selection and sanitize the result.

    The caret lands right after the sanitized inserted span:
    ``selection_start + surviving span length``, shifted left by any
    leading zeros stripped in front of it and clamped to the value.
    """
    previous = event.previous_value
    start = min(event.selection_start, len(previous))
    end = min(event.selection_end, len(previous))
    head, tail = previous[:start], previous[end:]
    separator = config.decimal_separator

    spliced = remove_extra_separators(_clean(head + event.pasted_text + tail, config), separator)
    stripped = spliced if config.allow_leading_zeros else strip_leading_zeros(spliced, separator)
    value = limit_decimals(stripped, config.max_decimals, separator)

    caret = start + _inserted_span_length(event.pasted_text, head, config)
    # Stripped zeros form one block right after the sign.
    removed = len(spliced) - len(stripped)
    sign = 1 if spliced.startswith(MINUS_SIGN) else 0
    caret -= min(removed, max(0, caret - sign))
    return SanitizationResult(value=value, caret_position=clamp_caret(caret, value))
