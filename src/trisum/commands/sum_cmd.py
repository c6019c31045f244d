"""Command: compute 1 + 2 + ... + N with one strategy."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from trisum.commands._base import TrisumCommand, parse_number
from trisum.domain.strategies import SumMethod

if TYPE_CHECKING:
    from trisum.commands._context import AppContext


@click.command(
    "sum",
    cls=TrisumCommand,
    examples="""\
  trisum sum 100
  trisum sum 100 --method iterative
  trisum --json sum 4000 --method recursive
  trisum sum -- -7""",
)
@click.argument("n")
@click.option(
    "-m",
    "--method",
    type=click.Choice([m.value for m in SumMethod]),
    default=SumMethod.FORMULA.value,
    show_default=True,
    help="Summation strategy.",
)
@click.pass_obj
def sum_cmd(app: AppContext, n: str, method: str) -> None:
    """Sum the integers from 1 to N."""
    app.emit(app.service.compute(parse_number(n), method=method))
