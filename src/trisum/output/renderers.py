"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from trisum.output.console import create_console, get_output, style_for_method

if TYPE_CHECKING:
    from rich.console import Console

    from trisum.services.result import ServiceResult


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
    """Render minimal output for ``--quiet`` mode.

    A successful sum prints only its value so it can be piped.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "sum":
        return str(result.data["value"])
    if result.op == "test_values":
        return "\n".join(str(v) for v in result.data.get("values", []))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="trisum.ok")
    op = Text(f"  {result.op}", style="trisum.op")
    console.print(label, op)


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="trisum.key")
    if key == "value":
        v = Text(str(value), style="trisum.value")
    elif key == "method":
        v = Text(str(value), style=style_for_method(str(value)))
    elif key == "kind":
        v = Text(str(value), style="trisum.kind")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text("  warning: ", style="trisum.warning"), Text(warning), sep="")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="trisum.error")
    op = Text(f"  {result.op}", style="trisum.op")
    console.print(label, op, Text(" — "), Text(msg), sep="")
    if err:
        _field(console, "kind", err.code)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_sum(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("input", "method", "value"):
        _field(console, key, result.data[key])
    if verbose:
        _field(console, "execution_time_ms", result.data.get("execution_time_ms"))


def _render_compare(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "input", result.data["input"])

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Method")
    table.add_column("Result", justify="right")
    for method, outcome in result.data["methods"].items():
        cell = (
            Text(str(outcome["value"]), style="trisum.value")
            if outcome["ok"]
            else Text(outcome["kind"], style="trisum.kind")
        )
        table.add_row(Text(method, style=style_for_method(method)), cell)
    console.print(table)

    agree = result.data["agree"]
    console.print(
        Text("  agree: ", style="trisum.key"),
        Text(str(agree), style="trisum.ok" if agree else "trisum.error"),
        sep="",
    )
    if verbose:
        _render_warnings(console, result)


def _render_benchmark(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("input", "method", "iterations", "average_time_ms"):
        _field(console, key, result.data[key])
    if verbose:
        _field(console, "total_time_ms", result.data["total_time_ms"])
        _field(console, "value", result.data["value"])


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    if d["valid"]:
        _status_line(console, result)
        keys: tuple[str, ...] = ("input", "normalized_value", "overflow_risk", "stack_overflow_risk")
    else:
        console.print(Text("INVALID", style="trisum.warning"), Text(f"  {result.op}", style="trisum.op"))
        keys = ("input", "message", "kind")
    for key in keys:
        _field(console, key, d[key])


def _render_test_values(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "count", result.data["count"])
    _field(console, "values", ", ".join(str(v) for v in result.data["values"]))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    "sum": _render_sum,
    "compare": _render_compare,
    "benchmark": _render_benchmark,
    "validate": _render_validate,
    "test_values": _render_test_values,
}
