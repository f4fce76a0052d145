"""Human-readable rendering of ServiceResult.

:func:`render_result` picks a renderer from ``result.op``; operations
without a dedicated renderer list their ``data`` as ``key: value`` lines.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text
from rich.tree import Tree

from cordova_android.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from cordova_android.services.result import ServiceResult

Renderer = Callable[["ServiceResult", "Console", bool], None]

_VALUE_STYLES = {
    "path": "cda.path",
    "root": "cda.path",
    "name": "cda.name",
    "activity": "cda.name",
    "target": "cda.target",
}

# Keys of create/update payloads, in display order.
_PROJECT_KEYS = ("path", "package", "name", "activity", "target", "version")

_SLOW_SPAN_MS = 1000.0


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    console = create_console()
    if result.ok:
        _RENDERERS.get(result.op, _render_generic)(result, console, verbose)
    else:
        _render_error(result, console, verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """One line for ``--quiet``: the project path, ``OK: <op>`` or ``ERROR: <op> — <msg>``."""
    if not result.ok:
        message = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {message}"
    path = result.data.get("path")
    return str(path) if path else f"OK: {result.op}"


def _line(console: Console, key: str, value: Any) -> None:
    console.print(
        Text.assemble(
            (f"  {key}: ", "cda.key"),
            (str(value), _VALUE_STYLES.get(key, "")),
        )
    )


def _header(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "cda.ok"), (f"  {result.op}", "cda.op")))


def _telemetry(console: Console, result: ServiceResult) -> None:
    span = (result.meta or {}).get("telemetry")
    if not span:
        return
    tree = Tree(_span_label(span), guide_style="dim")
    _add_children(tree, span)
    console.print()
    console.print(Text("  timings:", style="dim"))
    console.print(tree)


def _span_label(span: dict[str, Any]) -> Text:
    duration = span.get("duration_ms", 0.0)
    label = Text.assemble(
        (f"{duration:>8.2f}ms", "yellow" if duration > _SLOW_SPAN_MS else "dim"),
        f"  {span.get('name', '?')}",
    )
    annotations = span.get("annotations")
    if annotations:
        label.append("  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")")
    return label


def _add_children(tree: Tree, span: dict[str, Any]) -> None:
    for child in span.get("children", []):
        _add_children(tree.add(_span_label(child)), child)


def _render_error(result: ServiceResult, console: Console, verbose: bool) -> None:
    error = result.error
    console.print(
        Text.assemble(
            ("ERROR", "cda.error"),
            (f"  {result.op}", "cda.op"),
            " — ",
            error.message if error else "Unknown error",
        )
    )
    # Output captured from a failed SDK command is always worth showing.
    if error and error.detail and (verbose or "stderr" in error.detail):
        console.print(Text("  detail:", style="dim"))
        for key, value in error.detail.items():
            console.print(Text(f"    {key}: {value}"))


def _render_project(result: ServiceResult, console: Console, verbose: bool) -> None:
    _header(console, result)
    data = result.data
    for key in _PROJECT_KEYS:
        if key in data:
            _line(console, key, data[key])
    if data.get("shared"):
        _line(console, "framework", "shared")
    if data.get("hint"):
        console.print()
        console.print(Text(f"  {data['hint']}", style="cda.warning"))
    if verbose:
        _telemetry(console, result)


def _render_check(result: ServiceResult, console: Console, verbose: bool) -> None:
    _header(console, result)
    _line(console, "root", result.data.get("root", ""))
    _line(console, "target", result.data.get("target", ""))
    if verbose:
        _telemetry(console, result)


def _render_generic(result: ServiceResult, console: Console, verbose: bool) -> None:
    _header(console, result)
    for key, value in result.data.items():
        _line(console, key, value)
    if verbose:
        _telemetry(console, result)


_RENDERERS: dict[str, Renderer] = {
    "create_project": _render_project,
    "update_project": _render_project,
    "check_requirements": _render_check,
}
