"""Command: pre-flight check of a raw input without summing."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from trisum.commands._base import TrisumCommand, parse_number

if TYPE_CHECKING:
    from trisum.commands._context import AppContext


@click.command(
    cls=TrisumCommand,
    examples="""\
  trisum validate 42
  trisum validate 3.14
  trisum validate 3.6 --no-strict
  trisum validate abc
  trisum validate --allow-negative -- -3""",
)
@click.argument("value")
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Reject fractional values instead of rounding (default: [validation] strict).",
)
@click.option(
    "--allow-negative/--no-allow-negative",
    default=None,
    help="Accept negative values (default: [validation] allow_negative).",
)
@click.pass_obj
def validate(app: AppContext, value: str, strict: bool | None, allow_negative: bool | None) -> None:
    """Report whether VALUE is a usable input and what it normalizes to."""
    app.emit(
        app.service.check_input(
            parse_number(value),
            strict=strict,
            allow_negative=allow_negative,
        )
    )
