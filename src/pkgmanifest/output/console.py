"""Rich Console factory and theme for pkgmanifest output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PKG_THEME = Theme(
    {
        "pkg.ok": "bold green",
        "pkg.error": "bold red",
        "pkg.warning": "bold yellow",
        "pkg.op": "bold cyan",
        "pkg.key": "dim",
        "pkg.name": "bold",
        "pkg.range": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Lines are never wrapped, so paths and requirements stay intact.
    """
    return Console(
        file=StringIO(),
        theme=PKG_THEME,
        no_color=no_color,
        highlight=False,
        soft_wrap=True,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
