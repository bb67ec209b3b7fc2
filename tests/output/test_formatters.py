"""Tests for the format_result dispatcher and OutputSettings."""

from __future__ import annotations

import json

from numfield.output.formatters import OutputSettings, format_result
from numfield.services.result import ServiceError, ServiceResult


def _ok(op: str = "sanitize", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "edit", msg: str = "fail") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="ERR", message=msg))


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResult:
    def test_json_mode(self) -> None:
        output = format_result(_ok(value="1.2"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "sanitize"
        assert data["data"]["value"] == "1.2"

    def test_json_shorthand(self) -> None:
        data = json.loads(format_result(_err(msg="Bad"), json_output=True))
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_json_beats_quiet(self) -> None:
        output = format_result(
            _ok(value="1.2"), settings=OutputSettings(json_output=True, quiet=True)
        )
        assert json.loads(output)["data"]["value"] == "1.2"

    def test_quiet(self) -> None:
        assert format_result(_ok(value="1.2"), settings=OutputSettings(quiet=True)) == "1.2"

    def test_rich_default(self) -> None:
        output = format_result(_ok(value="1.2"))
        assert output.startswith("OK")
        assert "'1.2'" in output
