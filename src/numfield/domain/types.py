"""Value types flowing through the sanitization pipeline.

A :class:`SanitizationConfig` lives as long as its host widget; events
and results live for a single call. All models are frozen, so a config
can be shared between widget instances without copying.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Self

from pydantic import BaseModel, Field, field_validator, model_validator

from numfield.domain.artifacts import normalize_artifacts

DEFAULT_DECIMAL_SEPARATOR = "."
DEFAULT_MAX_DECIMALS = 2
MINUS_SIGN = "-"


class SanitizationConfig(BaseModel):
    """Per-widget sanitization policy.

    Attributes:
        decimal_separator: The one character accepted as the fractional
            delimiter. Any other separator is stripped, never mapped.
        allow_negative: Keep a single ``-`` at position 0.
        max_decimals: Fractional digit cap; ``None`` means unbounded.
        min_decimals: Fractional digits padded in on commit (blur).
        allow_leading_zeros: When False, ``007`` collapses to ``7``.
    """

    model_config = {"frozen": True}

    decimal_separator: str = DEFAULT_DECIMAL_SEPARATOR
    allow_negative: bool = False
    max_decimals: int | None = Field(default=DEFAULT_MAX_DECIMALS, ge=0)
    min_decimals: int = Field(default=0, ge=0)
    allow_leading_zeros: bool = True

    @field_validator("decimal_separator")
    @classmethod
    def _check_separator(cls, value: str) -> str:
        if len(value) != 1:
            msg = f"decimal_separator must be a single character, got {value!r}"
            raise ValueError(msg)
        if value.isdigit() or value == MINUS_SIGN:
            msg = f"decimal_separator cannot be a digit or the minus sign, got {value!r}"
            raise ValueError(msg)
        # Whitespace and keyboard artifacts are removed before filtering.
        if normalize_artifacts(value) != value:
            msg = f"decimal_separator cannot be whitespace, got {value!r}"
            raise ValueError(msg)
        return value

    @model_validator(mode="after")
    def _check_decimal_bounds(self) -> Self:
        if self.max_decimals is not None and self.min_decimals > self.max_decimals:
            msg = (
                f"min_decimals ({self.min_decimals}) cannot exceed "
                f"max_decimals ({self.max_decimals})"
            )
            raise ValueError(msg)
        return self


class EditEvent(BaseModel):
    """A text mutation the browser has already applied to the field."""

    model_config = {"frozen": True}

    previous_value: str = ""
    proposed_value: str = ""
    caret_before: int = Field(default=0, ge=0)
    caret_after: int = Field(default=0, ge=0)


class _SelectionEvent(BaseModel):
    """Base for events carrying a [start, end) selection."""

    model_config = {"frozen": True}

    selection_start: int = Field(default=0, ge=0)
    selection_end: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _check_selection(self) -> Self:
        if self.selection_start > self.selection_end:
            msg = (
                f"selection_start ({self.selection_start}) is after "
                f"selection_end ({self.selection_end})"
            )
            raise ValueError(msg)
        return self


class PasteEvent(_SelectionEvent):
    """A clipboard paste intercepted before the browser applies it."""

    previous_value: str = ""
    pasted_text: str = ""


class KeyEvent(_SelectionEvent):
    """A keydown observed before the browser edits the field."""

    key: str
    value: str = ""


class SanitizationResult(BaseModel):
    """Corrected field value and the caret position to restore.

    ``reverted`` is set when the edit was rejected outright and ``value``
    is the previous value rather than a corrected proposal.
    """

    model_config = {"frozen": True}

    value: str
    caret_position: int = Field(ge=0)
    reverted: bool = False


class KeyAction(StrEnum):
    """What the host should do with a keydown."""

    ALLOW = "allow"
    BLOCK = "block"
    REPLACE = "replace"


class KeyDecision(BaseModel):
    """Outcome of the keydown gate.

    For ``replace`` the host cancels the native keystroke and writes
    ``value``/``caret_position`` itself; for ``allow`` and ``block`` they
    echo the current field state.
    """

    model_config = {"frozen": True}

    action: KeyAction
    value: str
    caret_position: int = Field(ge=0)
