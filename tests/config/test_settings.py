"""Tests for AccountIdSettings: CLI flags, env vars, and defaults."""

import pytest

from near_account_id.config.settings import AccountIdSettings


class TestDefaults:
    def test_all_defaults(self) -> None:
        settings = AccountIdSettings.from_cli()
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_json is False

    def test_frozen(self) -> None:
        settings = AccountIdSettings.from_cli()
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestEnvVars:
    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NEAR_ACCOUNT_ID_JSON_OUTPUT", "true")
        monkeypatch.setenv("NEAR_ACCOUNT_ID_VERBOSE", "1")
        settings = AccountIdSettings.from_cli()
        assert settings.json_output is True
        assert settings.verbose is True


class TestCliFlags:
    def test_cli_flags_override(self) -> None:
        settings = AccountIdSettings.from_cli(json_output=True, quiet=True, verbose=True)
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True

    def test_unset_flags_keep_env_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A flag left at False does not override an env var set to true."""
        monkeypatch.setenv("NEAR_ACCOUNT_ID_QUIET", "true")
        settings = AccountIdSettings.from_cli(quiet=False, verbose=True)
        assert settings.quiet is True
        assert settings.verbose is True
