"""Rich rendering into strings.

Renderers draw on a Console backed by ``StringIO`` and return the text,
so :func:`format_result` stays a pure ``ServiceResult -> str`` function
and the command layer decides which stream it goes to.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

# Styles referenced by name from output/renderers.py.
ANDROID_THEME = Theme(
    {
        "cda.ok": "bold green",
        "cda.error": "bold red",
        "cda.warning": "yellow",
        "cda.op": "bold cyan",
        "cda.key": "dim",
        "cda.path": "underline",
        "cda.name": "bold",
        "cda.target": "magenta",
    }
)

DEFAULT_WIDTH = 120


def create_console(*, width: int = DEFAULT_WIDTH) -> Console:
    """A Console that writes into an in-memory buffer.

    Color is decided by Rich's own terminal detection, which is always
    off for a ``StringIO`` target.
    """
    return Console(file=StringIO(), theme=ANDROID_THEME, highlight=False, width=width)


def get_output(console: Console) -> str:
    buffer = console.file
    if not isinstance(buffer, StringIO):
        msg = "console was not created by create_console()"
        raise TypeError(msg)
    return buffer.getvalue()
