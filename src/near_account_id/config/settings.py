"""Unified settings — CLI flags, env vars, and code defaults in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``NEAR_ACCOUNT_ID_*`` prefix
  3. Code defaults

Uses Pydantic Settings v2.
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict


class AccountIdSettings(BaseSettings):
    """Settings for the ``near-account-id`` CLI, frozen after construction."""

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="NEAR_ACCOUNT_ID_",
    )

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> AccountIdSettings:
        """Construct settings from a CLI invocation.

        Flags left at their click default (False) do not override env vars.
        """
        overrides = {name: value for name, value in cli_flags.items() if value}
        return cls(**overrides)
