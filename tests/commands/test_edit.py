"""Tests for the edit command."""

from __future__ import annotations

import json

from click.testing import CliRunner

from numfield.cli import cli

REVERT_ARGS = ["edit", "--previous", "1.2", "--proposed", "1..2", "--caret-before", "2"]


class TestEditCommand:
    def test_corrected(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            ["--json", "edit", "--previous", "12", "--proposed", "1a2", "--caret-after", "2"],
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)["data"]
        assert data == {"value": "12", "caret_position": 1, "reverted": False, "valid": True}

    def test_caret_after_defaults_to_end(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "edit", "--proposed", "1.234"])
        data = json.loads(result.stdout)["data"]
        assert data["value"] == "1.23"
        assert data["caret_position"] == 4

    def test_revert_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", *REVERT_ARGS, "--caret-after", "3"])
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["data"]["value"] == "1.2"
        assert payload["data"]["caret_position"] == 2
        assert payload["data"]["reverted"] is True
        assert payload["warnings"] == ["Edit reverted: a second decimal separator was entered"]
        assert "WARNING" not in result.stderr

    def test_revert_warning_on_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, REVERT_ARGS)
        assert result.exit_code == 0
        assert "1.|2" in result.stdout
        assert "WARNING: Edit reverted" in result.stderr
        assert "WARNING" not in result.stdout

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "edit", "--proposed", "9x9"])
        assert result.stdout == "99\n"

    def test_requires_proposed(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["edit", "--previous", "1"])
        assert result.exit_code == 2

    def test_negative_caret_rejected(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["edit", "--proposed", "1", "--caret-before", "-1"])
        assert result.exit_code == 2
