"""Root CLI group for near-account-id with global flags and command registration."""

from __future__ import annotations

import click

from near_account_id import __version__
from near_account_id.commands import register_commands
from near_account_id.commands._context import AppContext
from near_account_id.config.settings import AccountIdSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="near-account-id")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
) -> None:
    """near-account-id: validate and inspect NEAR account IDs."""
    settings = AccountIdSettings.from_cli(
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
