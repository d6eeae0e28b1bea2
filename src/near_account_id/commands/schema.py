"""Command: print the JSON schema of an account ID."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from near_account_id.commands._base import AccountCommand

if TYPE_CHECKING:
    from near_account_id.commands._context import AppContext


@click.command(cls=AccountCommand, examples=["schema", "--json schema"])
@click.pass_obj
def schema(app: AppContext) -> None:
    """Print the JSON schema for an account ID string."""
    app.emit(app.service.schema())
