"""The Rich theme numfield renders with, and a buffer-backed Console.

Renderers never write to the terminal directly: they draw into a Console
whose file is a StringIO and hand the text back, so ``format_result``
stays a plain ``-> str`` function and click decides where it goes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEFAULT_WIDTH = 120

NF_THEME = Theme(
    {
        "nf.ok": "bold green",
        "nf.error": "bold red",
        "nf.warning": "bold yellow",
        "nf.op": "bold cyan",
        "nf.key": "dim",
        "nf.value": "bold",
        "nf.caret": "bold magenta",
        "nf.pattern": "blue",
        "nf.action.allow": "green",
        "nf.action.block": "red",
        "nf.action.replace": "yellow",
    }
)


def create_console(*, width: int | None = None) -> Console:
    """Return a Console drawing into a fresh StringIO.

    Color is left to Rich's terminal detection, so a StringIO file always
    yields plain text.
    """
    return Console(
        file=StringIO(),
        theme=NF_THEME,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_action(action: str) -> str:
    """Theme style for a key gate action, or ``""`` for an unknown one."""
    name = f"nf.action.{action}"
    return name if name in NF_THEME.styles else ""
