"""Tests for the pattern command."""

from __future__ import annotations

import json

from click.testing import CliRunner

from numfield.cli import cli


class TestPatternCommand:
    def test_default(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["pattern"])
        assert result.exit_code == 0
        assert "OK" in result.stdout
        assert r"^[0-9]*[\.]?[0-9]*$" in result.stdout

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "--separator", ",", "--allow-negative", "pattern"])
        assert result.exit_code == 0
        assert result.stdout == "^-?[0-9]*[,]?[0-9]*$\n"

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "pattern"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["op"] == "pattern"
        assert data["data"]["decimal_separator"] == "."
        assert data["data"]["allow_negative"] is False

    def test_invalid_separator(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "--separator", "5", "pattern"])
        assert result.exit_code == 1
        assert result.stdout == ""
        data = json.loads(result.stderr)
        assert data["ok"] is False
        assert data["op"] == "pattern"
        assert data["error"]["code"] == "INVALID_CONFIG"
        assert data["error"]["message"].startswith("decimal_separator:")

    def test_invalid_separator_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--separator", "-", "pattern"])
        assert result.exit_code == 1
        assert "ERROR" in result.stderr
        assert "decimal_separator" in result.stderr
