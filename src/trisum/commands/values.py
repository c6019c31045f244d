"""Command: list the representative test inputs."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from trisum.commands._base import TrisumCommand

if TYPE_CHECKING:
    from trisum.commands._context import AppContext


@click.command(
    cls=TrisumCommand,
    examples="""\
  trisum values
  trisum -q values --no-edge-cases""",
)
@click.option("--edge-cases/--no-edge-cases", default=True, help="Include 0 and large inputs.")
@click.pass_obj
def values(app: AppContext, edge_cases: bool) -> None:
    """List representative inputs for exercising the strategies."""
    app.emit(app.service.test_values(include_edge_cases=edge_cases))
