"""Click base command with --examples support, plus argument parsing.

``--examples`` prints usage examples and exits, keeping ``--help`` short.
"""

from __future__ import annotations

import re
from typing import Any

import click

from trisum.domain.constants import MAX_SAFE_INTEGER

_DIGITS = re.compile(r"[+-]?\d+")


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class TrisumCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def parse_number(text: str) -> int | float | str:
    """Parse a CLI argument as an int, then a float, else return it unchanged.

    Unparseable text is passed through so the validator can reject it
    with a classified error instead of Click rejecting it up front.
    Integer text too long for int() is clamped just past the safe range
    so it still reads as an out-of-range integer rather than infinity.
    """
    stripped = text.strip()
    try:
        return int(stripped)
    except ValueError:
        if _DIGITS.fullmatch(stripped):
            sign = -1 if stripped.startswith("-") else 1
            return sign * (MAX_SAFE_INTEGER + 1)
    try:
        return float(stripped)
    except ValueError:
        return text
