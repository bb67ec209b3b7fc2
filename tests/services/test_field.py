"""Tests for FieldService."""

from __future__ import annotations

import logging

import pytest

from numfield.domain.types import SanitizationConfig
from numfield.services.field import FieldService
from numfield.services.telemetry import enable_telemetry


@pytest.fixture
def svc(config: SanitizationConfig) -> FieldService:
    return FieldService(config)


class TestPattern:
    def test_default(self, svc: FieldService) -> None:
        result = svc.pattern()
        assert result.ok
        assert result.op == "pattern"
        assert result.data == {
            "pattern": r"^[0-9]*[\.]?[0-9]*$",
            "decimal_separator": ".",
            "allow_negative": False,
        }

    def test_config_exposed(self, comma_config: SanitizationConfig) -> None:
        svc = FieldService(comma_config)
        assert svc.config is comma_config
        assert svc.pattern().data["pattern"] == "^[0-9]*[,]?[0-9]*$"


class TestSanitize:
    def test_changed(self, svc: FieldService) -> None:
        result = svc.sanitize("1 234.567")
        assert result.data == {"raw": "1 234.567", "value": "1234.56", "changed": True}

    def test_unchanged(self, svc: FieldService) -> None:
        assert svc.sanitize("12.5").data["changed"] is False

    def test_finalize(self) -> None:
        svc = FieldService(SanitizationConfig(min_decimals=2))
        result = svc.finalize("7")
        assert result.op == "finalize"
        assert result.data["value"] == "7.00"
        assert result.data["changed"] is True


class TestEdit:
    def test_corrected(self, svc: FieldService) -> None:
        result = svc.edit("12", "1a2", 1, 2)
        assert result.ok
        assert result.data == {
            "value": "12",
            "caret_position": 1,
            "reverted": False,
            "valid": True,
        }
        assert result.warnings == []

    def test_reverted_warns(self, svc: FieldService, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="numfield.services.field")
        result = svc.edit("1.2", "1..2", 2, 3)
        assert result.ok
        assert result.data["value"] == "1.2"
        assert result.data["reverted"] is True
        assert result.warnings == ["Edit reverted: a second decimal separator was entered"]
        assert "Edit reverted" in caplog.text

    def test_invalid_event(self, svc: FieldService) -> None:
        result = svc.edit("1", "12", -1, 2)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_EVENT"
        assert result.error.message.startswith("caret_before:")
        assert result.error.detail["errors"][0] == result.error.message


class TestPaste:
    def test_splice(self, svc: FieldService) -> None:
        result = svc.paste("1.2", "5.5", 1, 2)
        assert result.data == {"value": "15.52", "caret_position": 4, "valid": True}

    def test_inverted_selection(self, svc: FieldService) -> None:
        result = svc.paste("12", "3", 2, 1)
        assert not result.ok
        assert result.op == "paste"
        assert result.error is not None
        assert result.error.code == "INVALID_EVENT"
        assert "is after" in result.error.message


class TestKey:
    def test_replace(self, svc: FieldService) -> None:
        result = svc.key(",", "12", 2, 2)
        assert result.data == {"action": "replace", "value": "12.", "caret_position": 3}

    def test_block(self, svc: FieldService) -> None:
        assert svc.key("-", "12", 0, 0).data["action"] == "block"

    def test_negative_selection(self, svc: FieldService) -> None:
        result = svc.key(".", "12", -1, 0)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_EVENT"


class TestTelemetry:
    def test_meta_absent_by_default(self, svc: FieldService) -> None:
        assert svc.sanitize("1").meta is None

    def test_span_tree(self, svc: FieldService) -> None:
        enable_telemetry()
        result = svc.sanitize("1a2")
        assert result.meta is not None
        tree = result.meta["telemetry"]
        assert tree["name"] == "FieldService.sanitize"
        assert tree["children"][0]["name"] == "sanitize_value"
        assert tree["children"][0]["annotations"] == {"removed": 1}

    def test_edit_annotates_revert(self, svc: FieldService) -> None:
        enable_telemetry()
        result = svc.edit("1.2", "1..2", 2, 3)
        assert result.meta is not None
        assert result.meta["telemetry"]["children"][0]["annotations"] == {"reverted": True}
