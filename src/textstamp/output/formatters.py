"""Output mode dispatch for ServiceResult.

The CLI renders ServiceResult for humans (Rich), for scripts (--quiet,
stamp text only) or for machines (--json).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from textstamp.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from textstamp.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output-related flags, frozen after construction."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet, quiet wins over the default Rich rendering.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
