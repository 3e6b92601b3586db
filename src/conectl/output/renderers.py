"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a StringIO-backed Console; ``render_result``
returns the captured text.  Renderers are dispatched on ``result.op``;
unknown ops fall through to a generic key-value renderer.

Served lines are always printed in the order the service returned them.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from conectl.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from conectl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet``: served lines or identifiers only."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    d = result.data
    if result.op == "serve_order":
        return "\n".join(d.get("lines", []))
    if result.op == "demo":
        return "\n\n".join("\n".join(o.get("lines", [])) for o in d.get("orders", []))
    if result.op == "reorder":
        return "\n".join(d.get("ingredients", []))
    if result.op == "menu":
        return "\n".join(item["id"] for item in d.get("items", []))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="cone.ok"), Text(f"  {result.op}", style="cone.op"))


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="cone.key"), Text(str(value)), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        if key == "telemetry":
            _render_span(console, value, indent=4)
        else:
            console.print(f"    {key}: {value}")


def _render_span(console: Console, span: dict[str, Any], *, indent: int) -> None:
    pad = " " * indent
    console.print(Text(f"{pad}{span['name']} ({span['duration_ms']}ms)", style="dim"))
    for child in span.get("children", []):
        _render_span(console, child, indent=indent + 2)


def _narrate(console: Console, lines: list[str]) -> None:
    """Greeting, layer lines, closing. Fewer than two lines prints as-is."""
    if len(lines) < 2:
        for line in lines:
            console.print(Text(line))
        return
    console.print(Text(lines[0], style="cone.greeting"))
    for line in lines[1:-1]:
        console.print(Text(f"  {line}"))
    console.print(Text(lines[-1], style="cone.closing"))


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    msg = result.error.message if result.error else "Unknown error"
    console.print(
        Text("ERROR", style="cone.error"),
        Text(f"  {result.op}", style="cone.op"),
        Text(f" — {msg}"),
    )
    if verbose and result.error and result.error.detail:
        for key, value in result.error.detail.items():
            _field(console, key, value)


def _render_order(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    if verbose:
        _status_line(console, result)
        _field(console, "customer", d.get("customer"))
        if d.get("engineer"):
            _field(console, "engineer", d["engineer"])
        _field(console, "ingredients", ", ".join(d.get("ingredients", [])))
        console.print()
    _narrate(console, d.get("lines", []))
    if verbose:
        _render_meta(console, result)


def _render_reorder(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    for pos, (ident, kind) in enumerate(zip(d.get("ingredients", []), d.get("kinds", [])), 1):
        console.print(
            Text(f"  {pos}. "),
            Text(ident, style="bold"),
            Text(f" ({kind})", style=style_for_kind(kind)),
            sep="",
        )
    if verbose:
        _render_meta(console, result)


def _render_demo(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    for index, order in enumerate(result.data.get("orders", [])):
        if index:
            console.print()
        header = f"── {order.get('engineer') or 'shop'} serving {order['customer']} ──"
        console.print(Text(header, style="cone.op"))
        if "error" in order:
            console.print(Text(f"  failed: {order['error']}", style="cone.error"))
            continue
        _narrate(console, order.get("lines", []))
    if verbose:
        _render_meta(console, result)


def _render_menu(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    table = Table(title=d.get("shop"), show_edge=False, pad_edge=False)
    table.add_column("Ingredient", style="bold")
    table.add_column("Kind")
    table.add_column("Served as", overflow="fold")
    for item in d.get("items", []):
        kind = Text(item["kind"], style=style_for_kind(item["kind"]))
        table.add_row(Text(item["id"]), kind, Text(item["message"]))
    console.print(table)
    if verbose:
        _field(console, "count", d.get("count", 0))
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "serve_order": _render_order,
    "reorder": _render_reorder,
    "demo": _render_demo,
    "menu": _render_menu,
}
