"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Only the ops the services emit have a renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from rich.table import Table
from rich.text import Text

from solidex.output.console import create_console, get_output, style_for_principle

if TYPE_CHECKING:
    from rich.console import Console

    from solidex.services.result import ServiceResult


def render_result(result: ServiceResult) -> str:
    """Render a ServiceResult to a string via Rich."""
    console = create_console()
    if result.ok:
        _OP_RENDERERS[result.op](result, console)
    else:
        _render_error(result, console)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet``: bare lines or variant names only."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if result.op == "run_showcase":
        return "\n".join(result.data.get("lines", []))
    return "\n".join(str(item.get("variant", "")) for item in result.data.get("items", []))


# ── Per-op renderers ──────────────────────────────────────────────────


def _render_showcase(result: ServiceResult, console: Console) -> None:
    console.print(Text(result.data.get("header", ""), style="solidex.header"))
    console.print()
    for section in result.data.get("sections", []):
        style = style_for_principle(section.get("principle", ""))
        for line in section.get("lines", []):
            # soft_wrap keeps each example on one physical line.
            console.print(Text(line, style=style), soft_wrap=True)


def _render_variants(result: ServiceResult, console: Console) -> None:
    table = Table(title=f"Variants ({result.data.get('count', 0)})")
    table.add_column("Principle", no_wrap=True)
    table.add_column("Abstraction")
    table.add_column("Variant", no_wrap=True)
    table.add_column("Class")
    table.add_column("Operations")
    for item in result.data.get("items", []):
        principle = item.get("principle", "")
        variant = Text(item.get("variant", ""))
        if not item.get("builtin", True):
            variant.append(" (plugin)", style="solidex.plugin")
        table.add_row(
            Text(principle.upper(), style=style_for_principle(principle)),
            item.get("abstraction", ""),
            variant,
            item.get("class", ""),
            ", ".join(item.get("operations", [])),
        )
    console.print(table)


def _render_error(result: ServiceResult, console: Console) -> None:
    message = result.error.message if result.error else "Unknown error"
    code = f" [{result.error.code}]" if result.error else ""
    console.print(Text("ERROR", style="solidex.error"), Text(f"{result.op}{code} — {message}"))


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "run_showcase": _render_showcase,
    "list_variants": _render_variants,
}
