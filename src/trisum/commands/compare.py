"""Command: run every strategy on N and check that they agree."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from trisum.commands._base import TrisumCommand, parse_number

if TYPE_CHECKING:
    from trisum.commands._context import AppContext


@click.command(
    cls=TrisumCommand,
    examples="""\
  trisum compare 100
  trisum compare 6000
  trisum --json compare 5""",
)
@click.argument("n")
@click.pass_obj
def compare(app: AppContext, n: str) -> None:
    """Run all strategies on N and report whether they agree."""
    app.emit(app.service.compare(parse_number(n)))
