"""Subcommand modules for trisum.

Provides register_commands() which uses deferred imports to keep
``trisum --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from trisum.commands.benchmark import benchmark
    from trisum.commands.compare import compare
    from trisum.commands.sum_cmd import sum_cmd
    from trisum.commands.validate import validate
    from trisum.commands.values import values

    cli.add_command(sum_cmd)
    cli.add_command(compare)
    cli.add_command(benchmark)
    cli.add_command(validate)
    cli.add_command(values)
