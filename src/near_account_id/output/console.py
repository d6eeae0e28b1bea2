"""Rich Console factory and theme for near-account-id output.

Consoles render into a StringIO buffer so renderers can return ``str``;
click decides where it goes. Rich drops color codes when the process is
not attached to a terminal (tests, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

from near_account_id.domain.types import AccountType

_TYPE_COLORS: dict[AccountType, str] = {
    AccountType.NAMED_ACCOUNT: "green",
    AccountType.NEAR_IMPLICIT_ACCOUNT: "magenta",
    AccountType.ETH_IMPLICIT_ACCOUNT: "yellow",
    AccountType.NEAR_DETERMINISTIC_ACCOUNT: "cyan",
}

ACCOUNT_THEME = Theme(
    {
        "acct.ok": "bold green",
        "acct.error": "bold red",
        "acct.op": "bold cyan",
        "acct.key": "dim",
        "acct.id": "bold blue",
        **{f"acct.type.{t.value}": color for t, color in _TYPE_COLORS.items()},
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width; 120 columns otherwise.
    """
    return Console(
        file=StringIO(),
        theme=ACCOUNT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_type(account_type: str) -> str:
    """Theme style for an ``AccountType`` value, or ``""`` if unknown."""
    style = f"acct.type.{account_type}"
    return style if style in ACCOUNT_THEME.styles else ""
