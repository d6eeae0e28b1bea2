"""Commands: classify an account ID and check sub-account relationships."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from near_account_id.commands._base import AccountCommand

if TYPE_CHECKING:
    from near_account_id.commands._context import AppContext


@click.command(
    "inspect",
    cls=AccountCommand,
    examples=[
        "inspect app.alice.near",
        "inspect 0xb794f5ea0ba39494ce839613fffba74279579268",
        "-v inspect system",
    ],
)
@click.argument("account_id")
@click.pass_obj
def inspect_cmd(app: AppContext, account_id: str) -> None:
    """Show the account type, top-level status, and parent of ACCOUNT_ID."""
    app.emit(app.service.inspect(account_id))


@click.command(
    "sub-account",
    cls=AccountCommand,
    examples=["sub-account alice.near near", "sub-account app.alice.near alice.near"],
)
@click.argument("child")
@click.argument("parent")
@click.pass_obj
def sub_account(app: AppContext, child: str, parent: str) -> None:
    """Check whether CHILD is a direct sub-account of PARENT."""
    app.emit(app.service.sub_account(child, parent))
