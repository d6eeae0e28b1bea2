"""Shared pytest fixtures for near-account-id tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
from click.testing import CliRunner

from near_account_id.domain.account_id import INTERNAL_UNSTABLE_ENV_VAR


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep NEAR_ACCOUNT_ID_* variables from the host out of tests."""
    for name in (
        INTERNAL_UNSTABLE_ENV_VAR,
        "NEAR_ACCOUNT_ID_JSON_OUTPUT",
        "NEAR_ACCOUNT_ID_QUIET",
        "NEAR_ACCOUNT_ID_VERBOSE",
        "NEAR_ACCOUNT_ID_LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Restore root and package logger state after a test that configures logging."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    package = logging.getLogger("near_account_id")
    package_level = package.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    package.setLevel(package_level)
