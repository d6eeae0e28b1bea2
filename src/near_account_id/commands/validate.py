"""Command: validate one or more account IDs."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from near_account_id.commands._base import AccountCommand

if TYPE_CHECKING:
    from near_account_id.commands._context import AppContext


@click.command(
    cls=AccountCommand,
    examples=[
        "validate alice.near",
        "validate alice.near bob.near 'ƒelicia.near'",
        "--json validate a__b",
    ],
)
@click.argument("account_ids", nargs=-1, required=True)
@click.pass_obj
def validate(app: AppContext, account_ids: tuple[str, ...]) -> None:
    """Validate account IDs; exits 1 if any is invalid."""
    if len(account_ids) == 1:
        app.emit(app.service.validate(account_ids[0]))
    else:
        app.emit(app.service.validate_many(list(account_ids)))
