"""Rich Console factory and theme for trisum output.

Consoles render to a StringIO buffer so renderers return plain strings.
In non-TTY environments (tests, pipes) Rich drops color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TRISUM_THEME = Theme(
    {
        "trisum.ok": "bold green",
        "trisum.error": "bold red",
        "trisum.warning": "bold yellow",
        "trisum.op": "bold cyan",
        "trisum.key": "dim",
        "trisum.value": "bold",
        "trisum.kind": "magenta",
        "trisum.method.iterative": "green",
        "trisum.method.formula": "blue",
        "trisum.method.recursive": "yellow",
    }
)

_METHOD_STYLES: dict[str, str] = {
    "iterative": "trisum.method.iterative",
    "formula": "trisum.method.formula",
    "recursive": "trisum.method.recursive",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps test output stable).
    """
    return Console(
        file=StringIO(),
        theme=TRISUM_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_method(method: str) -> str:
    """Return the Rich style name for a strategy name."""
    return _METHOD_STYLES.get(method, "")
