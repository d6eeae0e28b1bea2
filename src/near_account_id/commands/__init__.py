"""Subcommand modules for near-account-id.

Provides register_commands() which uses deferred imports to keep
``near-account-id --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from near_account_id.commands.codec import decode, encode
    from near_account_id.commands.inspect import inspect_cmd, sub_account
    from near_account_id.commands.schema import schema
    from near_account_id.commands.validate import validate

    cli.add_command(validate)
    cli.add_command(inspect_cmd)
    cli.add_command(sub_account)
    cli.add_command(schema)
    cli.add_command(encode)
    cli.add_command(decode)
