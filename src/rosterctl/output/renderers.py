"""Rich renderers for the menu, the roster table, and ServiceResults.

Each renderer writes to a Rich Console (backed by StringIO) and returns the
rendered text. Result renderers are dispatched by ``result.op`` in
:func:`render_result`; unknown ops fall through to a generic key-value
renderer.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from rosterctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from rosterctl.services.result import ServiceResult

DEFAULT_TITLE = "Players"


# ── Public API ────────────────────────────────────────────────────────


def render_menu(commands: Iterable[tuple[int, str]], *, width: int | None = None) -> str:
    """Render the list of available commands."""
    console = create_console(width=width)
    console.print(Text("Available commands", style="bold"))
    for index, description in commands:
        console.print(Text(f"{index:>3}", style="roster.index"), Text(description))
    return get_output(console).rstrip("\n")


def render_result(
    result: ServiceResult, *, title: str = DEFAULT_TITLE, width: int | None = None
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, title=title)
    else:
        _render_error(result, console)

    return get_output(console).rstrip("\n")


# ── Helpers ───────────────────────────────────────────────────────────


def _roster_table(rows: list[dict[str, Any]], *, title: str) -> Table:
    table = Table(title=title, show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("No", style="roster.id", justify="right", no_wrap=True)
    table.add_column("Name", style="roster.name")
    table.add_column("Level", justify="right")
    table.add_column("Banned", justify="center")

    for row in rows:
        banned = bool(row.get("banned"))
        table.add_row(
            str(row.get("id", "")),
            Text(str(row.get("name", ""))),
            str(row.get("level", "")),
            Text("yes", style="roster.banned") if banned else Text("no"),
        )
    return table


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="roster.ok")
    op = Text(f"  {result.op}", style="roster.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="roster.key")
    style = "roster.id" if key == "id" else ""
    console.print(k, Text(str(value), style=style), sep="")


# ── Op renderers ──────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, **_: Any) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_list(result: ServiceResult, console: Console, *, title: str, **_: Any) -> None:
    # One row per store entry, in listing order.
    items = result.data.get("items", [])
    console.print(_roster_table(items, title=title))
    if not items:
        console.print(Text("  (no players)", style="dim"))


def _render_exit(result: ServiceResult, console: Console, **_: Any) -> None:
    if result.data.get("cancelled"):
        console.print(Text("Exit cancelled.", style="dim"))
    else:
        _render_generic(result, console)


def _render_error(result: ServiceResult, console: Console) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="roster.error")
    op = Text(f"  {result.op}", style="roster.op")
    console.print(label, op, Text("—"), Text(msg))


_OP_RENDERERS = {
    "list_players": _render_list,
    "exit": _render_exit,
}
