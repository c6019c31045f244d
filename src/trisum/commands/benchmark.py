"""Command: time repeated runs of one strategy."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from trisum.commands._base import TrisumCommand, parse_number
from trisum.domain.strategies import SumMethod

if TYPE_CHECKING:
    from trisum.commands._context import AppContext


@click.command(
    cls=TrisumCommand,
    examples="""\
  trisum benchmark 1000
  trisum benchmark 1000 --method iterative --iterations 50
  trisum -v benchmark 5000 --method recursive""",
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
@click.option(
    "-i",
    "--iterations",
    type=int,
    default=None,
    help="Number of timed runs (default: [benchmark] iterations).",
)
@click.pass_obj
def benchmark(app: AppContext, n: str, method: str, iterations: int | None) -> None:
    """Measure the average execution time of a strategy on N."""
    app.emit(app.service.benchmark(parse_number(n), method=method, iterations=iterations))
