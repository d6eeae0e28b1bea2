"""Tests for the format_result dispatcher and OutputSettings."""

import json

from near_account_id.output.formatters import OutputSettings, format_result
from near_account_id.services.result import ServiceError, ServiceResult


def _ok(op: str = "validate", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "validate", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="too_short", message=msg),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResult:
    def test_json_mode_returns_valid_json(self) -> None:
        result = _ok("inspect", account_id="alice.near")
        output = format_result(result, settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "inspect"
        assert data["data"]["account_id"] == "alice.near"

    def test_json_mode_error(self) -> None:
        output = format_result(_err(msg="Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_json_wins_over_quiet(self) -> None:
        output = format_result(
            _ok(account_id="alice.near"),
            settings=OutputSettings(json_output=True, quiet=True),
        )
        assert json.loads(output)["ok"] is True

    def test_quiet_mode(self) -> None:
        output = format_result(_ok(account_id="alice.near"), settings=OutputSettings(quiet=True))
        assert output == "alice.near"

    def test_default_is_rich(self) -> None:
        output = format_result(_ok("inspect", account_id="alice.near"))
        assert "OK" in output
        assert "alice.near" in output
