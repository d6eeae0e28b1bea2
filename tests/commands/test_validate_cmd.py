"""Tests for the validate command."""

from __future__ import annotations

import json

from click.testing import CliRunner

from near_account_id.cli import cli


class TestValidateCommand:
    def test_valid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "alice.near"])
        assert result.exit_code == 0
        assert "OK" in result.output
        assert "alice.near" in result.output

    def test_invalid_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "ƒelicia.near"])
        assert result.exit_code == 1
        assert "ERROR" in result.output
        assert "invalid character" in result.output

    def test_invalid_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "validate", "a__ƒƒluent."])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["ok"] is False
        assert data["error"]["code"] == "redundant_separator"
        assert data["error"]["detail"]["index"] == 2

    def test_many(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "validate", "alice.near", "bob.near"])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["valid"] == ["alice.near", "bob.near"]

    def test_many_with_failure(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "alice.near", "near."])
        assert result.exit_code == 1
        assert "1 of 2 account IDs are invalid" in result.output
        assert "near." in result.output

    def test_requires_argument(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate"])
        assert result.exit_code == 2

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "--examples"])
        assert result.exit_code == 0
        assert "near-account-id validate alice.near" in result.output
