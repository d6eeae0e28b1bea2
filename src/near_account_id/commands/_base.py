"""Click Command subclass with an ``--examples`` flag.

``--help`` stays short; ``--examples`` prints ready-to-run invocations
and exits.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import click

PROG_NAME = "near-account-id"


def _add_examples_option(cmd: click.Command, examples: Sequence[str]) -> None:
    """Attach an eager ``--examples`` flag that prints *examples* and exits."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{PROG_NAME} {cmd.name}':\n")
        for example in examples:
            click.echo(f"  {PROG_NAME} {example}")
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class AccountCommand(click.Command):
    """Command that accepts ``examples=[...]``, each line given without the program name."""

    def __init__(self, *args: Any, examples: Sequence[str] = (), **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = tuple(examples)
        if self.examples:
            _add_examples_option(self, self.examples)
