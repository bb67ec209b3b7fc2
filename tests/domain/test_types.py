"""Tests for domain value types and config validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from numfield.domain.types import (
    EditEvent,
    KeyAction,
    KeyDecision,
    KeyEvent,
    PasteEvent,
    SanitizationConfig,
    SanitizationResult,
)


class TestSanitizationConfig:
    def test_defaults(self) -> None:
        cfg = SanitizationConfig()
        assert cfg.decimal_separator == "."
        assert cfg.allow_negative is False
        assert cfg.max_decimals == 2
        assert cfg.min_decimals == 0
        assert cfg.allow_leading_zeros is True

    def test_frozen(self) -> None:
        cfg = SanitizationConfig()
        with pytest.raises(ValidationError):
            cfg.allow_negative = True  # type: ignore[misc]

    def test_unbounded_decimals(self) -> None:
        assert SanitizationConfig(max_decimals=None).max_decimals is None

    @pytest.mark.parametrize("sep", [",", "'", "^", "\\"])
    def test_accepts_single_character(self, sep: str) -> None:
        assert SanitizationConfig(decimal_separator=sep).decimal_separator == sep

    @pytest.mark.parametrize("sep", ["", ",,", "0", "7", "-", " ", "\u00a0", "\t"])
    def test_rejects_colliding_separator(self, sep: str) -> None:
        with pytest.raises(ValidationError, match="decimal_separator"):
            SanitizationConfig(decimal_separator=sep)

    def test_negative_max_decimals(self) -> None:
        with pytest.raises(ValidationError):
            SanitizationConfig(max_decimals=-1)

    def test_min_above_max(self) -> None:
        with pytest.raises(ValidationError, match="cannot exceed"):
            SanitizationConfig(min_decimals=3, max_decimals=2)

    def test_min_with_unbounded_max(self) -> None:
        assert SanitizationConfig(min_decimals=5, max_decimals=None).min_decimals == 5


class TestEvents:
    def test_edit_defaults(self) -> None:
        event = EditEvent()
        assert event.previous_value == ""
        assert event.caret_after == 0

    def test_edit_negative_caret(self) -> None:
        with pytest.raises(ValidationError):
            EditEvent(proposed_value="1", caret_after=-1)

    def test_paste_inverted_selection(self) -> None:
        with pytest.raises(ValidationError, match="is after"):
            PasteEvent(previous_value="12", pasted_text="3", selection_start=2, selection_end=1)

    def test_key_inverted_selection(self) -> None:
        with pytest.raises(ValidationError, match="is after"):
            KeyEvent(key=".", value="12", selection_start=2, selection_end=0)

    def test_key_requires_key(self) -> None:
        with pytest.raises(ValidationError):
            KeyEvent(value="12")  # type: ignore[call-arg]


class TestResults:
    def test_result_defaults(self) -> None:
        result = SanitizationResult(value="1.2", caret_position=3)
        assert result.reverted is False

    def test_result_negative_caret(self) -> None:
        with pytest.raises(ValidationError):
            SanitizationResult(value="", caret_position=-1)

    def test_key_action_values(self) -> None:
        assert [a.value for a in KeyAction] == ["allow", "block", "replace"]
        assert str(KeyAction.REPLACE) == "replace"

    def test_key_decision_coerces_action(self) -> None:
        decision = KeyDecision(action="block", value="1", caret_position=1)
        assert decision.action is KeyAction.BLOCK
