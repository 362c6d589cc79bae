"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.text import Text

from epochctl.domain.render import LABELS
from epochctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from epochctl.services.result import ServiceResult

# Result keys in the order of domain.render.LABELS.
_CONVERSION_KEYS = ("epoch_seconds", "epoch_millis", "gmt", "local")

# Labels printed in the highlight style; the others stay plain.
_HIGHLIGHTED = {"Epoch timestamp", "Date and time (GMT)"}


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    color: bool | None = None,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal, which is
    the case inside Click's CliRunner and piped output, unless *color*
    forces terminal styling.
    """
    console = create_console(force_terminal=color)

    if result.ok:
        renderer = _OP_RENDERERS[result.op]
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: the bare epoch seconds."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return str(result.data["epoch_seconds"])


# ── Helpers ───────────────────────────────────────────────────────────


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="dim")
    console.print(k, Text(str(value)), sep="")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="epoch.error")
    op = Text(f"  {result.op}", style="epoch.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Conversion renderer ───────────────────────────────────────────────


def _render_conversion(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the notice (if any) followed by the four labelled lines."""
    d = result.data
    if d.get("notice"):
        console.print(Text(d["notice"]))
    for label, key in zip(LABELS, _CONVERSION_KEYS, strict=True):
        style = "epoch.label" if label in _HIGHLIGHTED else ""
        console.print(Text(label, style=style), Text(f": {d[key]}"), sep="", end="")
        console.print()
    if verbose:
        for key in ("unit", "nanoseconds", "output_fmt"):
            if key in d:
                _field(console, key, d[key])


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "convert_epoch": _render_conversion,
    "convert_datetime": _render_conversion,
    "convert_now": _render_conversion,
}
