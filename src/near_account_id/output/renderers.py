"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from near_account_id.output.console import create_console, get_output, style_for_type

if TYPE_CHECKING:
    from rich.console import Console

    from near_account_id.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if "account_id" in result.data:
        return str(result.data["account_id"])
    if "is_sub_account" in result.data:
        return "yes" if result.data["is_sub_account"] else "no"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="acct.ok")
    op = Text(f"  {result.op}", style="acct.op")
    console.print(label, op, sep="", end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="acct.key")
    if key in ("account_id", "parent", "child"):
        v = Text(str(value), style="acct.id")
    elif key == "account_type":
        v = Text(str(value), style=style_for_type(str(value)))
    elif isinstance(value, (dict, list)):
        v = Text(_json.dumps(value, separators=(",", ":"), ensure_ascii=False))
    else:
        v = Text(str(value))
    console.print(k, v, sep="", end="")
    console.print()


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="acct.error")
    op = Text(f"  {result.op}", style="acct.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    invalid = result.data.get("invalid")
    if invalid:
        for entry in invalid:
            line = Text(f" {entry.get('account_id')}: {entry.get('message')}")
            console.print(Text("  invalid", style="acct.error"), line, sep="")
    elif verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}", markup=False)


# ── Op renderers ──────────────────────────────────────────────────────


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    if "valid" in result.data:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("Account ID", style="acct.id", no_wrap=True)
        for account_id in result.data["valid"]:
            table.add_row(account_id)
        console.print(table)
    else:
        _field(console, "account_id", result.data["account_id"])
        _field(console, "account_type", result.data["account_type"])


def _render_inspect(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    for key in ("account_id", "account_type", "is_implicit", "is_top_level", "parent"):
        _field(console, key, d.get(key))
    if verbose:
        _field(console, "is_system", d.get("is_system"))
        _field(console, "length", d.get("length"))


def _render_schema(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(_json.dumps(result.data["schema"], indent=2), markup=False, soft_wrap=True)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "validate": _render_validate,
    "inspect": _render_inspect,
    "decode": _render_inspect,
    "schema": _render_schema,
}
