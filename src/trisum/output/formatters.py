"""Output mode dispatch for ServiceResult.

JSON for machines (--json), a single status line for --quiet, and Rich
rendering for everyone else.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from trisum.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from trisum.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags lifted from the CLI settings."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display. JSON wins over quiet."""
    opts = settings or OutputSettings()
    if opts.json_output:
        return result.model_dump_json(indent=2)
    if opts.quiet:
        return render_quiet(result)
    return render_result(result, verbose=opts.verbose)
