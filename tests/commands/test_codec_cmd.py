"""Tests for the encode, decode, and schema commands."""

from __future__ import annotations

import json

from click.testing import CliRunner

from near_account_id.cli import cli
from near_account_id.domain.validation import ACCOUNT_ID_PATTERN


class TestEncodeCommand:
    def test_encode(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "encode", "alice.near"])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["hex"] == "0a000000616c6963652e6e656172"

    def test_encode_invalid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["encode", "--", "-near"])
        assert result.exit_code == 1
        assert "redundant separator" in result.output


class TestDecodeCommand:
    def test_decode(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "decode", "0a000000616c6963652e6e656172"])
        assert result.exit_code == 0
        assert result.output.strip() == "alice.near"

    def test_decode_trailing_bytes(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "decode", "0a000000616c6963652e6e65617200"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "malformed_payload"

    def test_decode_not_hex(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "xyz"])
        assert result.exit_code == 1
        assert "payload is not hex" in result.output


class TestSchemaCommand:
    def test_schema(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["schema"])
        assert result.exit_code == 0
        schema = json.loads(result.output)
        assert schema["pattern"] == ACCOUNT_ID_PATTERN

    def test_schema_json_envelope(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "schema"])
        assert json.loads(result.output)["data"]["schema"]["minLength"] == 2
