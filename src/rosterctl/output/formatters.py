"""Rich/JSON output selection.

The run loop shows ServiceResults to humans (Rich tables and status lines)
or to machines (``--json``). The formatter picks the mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from rosterctl.output.renderers import DEFAULT_TITLE, render_result

if TYPE_CHECKING:
    from rosterctl.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Display preferences resolved from settings."""

    model_config = {"frozen": True}

    json_output: bool = False
    title: str = DEFAULT_TITLE
    width: int | None = None


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    return render_result(result, title=settings.title, width=settings.width)
