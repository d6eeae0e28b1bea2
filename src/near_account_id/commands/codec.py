"""Commands: borsh encode/decode of account IDs as hex."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from near_account_id.commands._base import AccountCommand

if TYPE_CHECKING:
    from near_account_id.commands._context import AppContext


@click.command(
    cls=AccountCommand,
    examples=["encode alice.near"],
)
@click.argument("account_id")
@click.pass_obj
def encode(app: AppContext, account_id: str) -> None:
    """Borsh-encode ACCOUNT_ID and print it as hex."""
    app.emit(app.service.encode(account_id))


@click.command(
    cls=AccountCommand,
    examples=["decode 0a000000616c6963652e6e656172"],
)
@click.argument("payload")
@click.pass_obj
def decode(app: AppContext, payload: str) -> None:
    """Decode a hex borsh PAYLOAD into an account ID."""
    app.emit(app.service.decode(payload))
