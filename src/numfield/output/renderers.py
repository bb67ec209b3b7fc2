"""Rich text rendering of ServiceResult for the human (non-JSON) output mode.

Every successful result is drawn the same way: a status line, then one
indented ``key: value`` row per field, then (verbose only) the meta block
with the telemetry span tree. What differs per operation is only which rows
are shown; that is decided by the ``_rows_*`` functions in ``_ROWS``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any

from rich.text import Text

from numfield.output.console import create_console, get_output, style_for_action

if TYPE_CHECKING:
    from rich.console import Console

    from numfield.services.result import ServiceResult

CARET_MARKER = "|"

Row = tuple[str, Any]


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* as plain or styled text.

    Rich emits no ANSI codes when stdout is not a terminal, so output under
    CliRunner or a pipe is plain text.
    """
    console = create_console()
    if not result.ok:
        _print_error(console, result, verbose=verbose)
        return get_output(console).rstrip("\n")

    console.print(Text("OK", style="nf.ok"), Text(f"  {result.op}", style="nf.op"))
    rows = _ROWS.get(result.op, _rows_generic)
    for key, value in rows(result.data, verbose):
        console.print(Text(f"  {key}: ", style="nf.key"), _as_text(value), sep="")
    if verbose and result.meta:
        _print_meta(console, result.meta)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """``--quiet`` output: the bare value or pattern, nothing else."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    for key in ("value", "pattern"):
        if key in result.data:
            return str(result.data[key])
    return f"OK: {result.op}"


def with_caret(value: str, caret: int) -> Text:
    """Return *value* with a caret marker inserted at *caret*."""
    return Text.assemble(
        (value[:caret], "nf.value"),
        (CARET_MARKER, "nf.caret"),
        (value[caret:], "nf.value"),
    )


def _as_text(value: Any) -> Text:
    if isinstance(value, Text):
        return value
    if isinstance(value, str):
        # repr keeps empty strings and stray separators visible
        return Text(repr(value))
    return Text(str(value))


def _caret_text(data: dict[str, Any]) -> tuple[Text, int]:
    value = str(data.get("value", ""))
    caret = int(data.get("caret_position", len(value)))
    return with_caret(value, caret), caret


def _print_error(console: Console, result: ServiceResult, *, verbose: bool) -> None:
    err = result.error
    console.print(
        Text("ERROR", style="nf.error"),
        Text(f"  {result.op}", style="nf.op"),
        Text(" — "),
        err.message if err else "Unknown error",
        sep="",
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for key, value in err.detail.items():
            console.print(f"    {key}: {value}")


def _print_meta(console: Console, meta: dict[str, Any]) -> None:
    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in meta.items():
        if key == "telemetry":
            for line in _span_lines(value, depth=1):
                console.print(line)
        else:
            console.print(f"    {key}: {value}")


def _span_lines(span: dict[str, Any], depth: int) -> Iterator[Text]:
    """Yield one line per span, children indented under their parent."""
    line = Text(f"{'    ' * depth}{span.get('duration_ms', 0.0):>8.3f}ms  ", style="dim")
    line.append(str(span.get("name", "?")))
    notes = span.get("annotations")
    if notes:
        line.append("  (" + ", ".join(f"{k}={v}" for k, v in notes.items()) + ")")
    yield line
    for child in span.get("children", []):
        yield from _span_lines(child, depth + 1)


def _rows_pattern(data: dict[str, Any], verbose: bool) -> Iterator[Row]:
    yield "pattern", Text(str(data.get("pattern", "")), style="nf.pattern")
    yield "decimal_separator", data.get("decimal_separator", "")
    yield "allow_negative", data.get("allow_negative", False)


def _rows_value(data: dict[str, Any], verbose: bool) -> Iterator[Row]:
    yield "value", data.get("value", "")
    if verbose:
        yield "raw", data.get("raw", "")
        yield "changed", data.get("changed", False)


def _rows_caret(data: dict[str, Any], verbose: bool) -> Iterator[Row]:
    marked, caret = _caret_text(data)
    yield "value", marked
    yield "caret_position", caret
    if data.get("reverted"):
        yield "reverted", True
    if verbose:
        yield "valid", data.get("valid", True)


def _rows_key(data: dict[str, Any], verbose: bool) -> Iterator[Row]:
    action = str(data.get("action", ""))
    yield "action", Text(action, style=style_for_action(action))
    yield "value", _caret_text(data)[0]


def _rows_generic(data: dict[str, Any], verbose: bool) -> Iterator[Row]:
    yield from data.items()


_ROWS: dict[str, Callable[[dict[str, Any], bool], Iterator[Row]]] = {
    "pattern": _rows_pattern,
    "sanitize": _rows_value,
    "finalize": _rows_value,
    "edit": _rows_caret,
    "paste": _rows_caret,
    "key": _rows_key,
}
