"""Human/JSON output dispatch.

Every command ends in :func:`format_result`: ``--json`` gives the
ServiceResult envelope verbatim, otherwise Rich renders it for people.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from legtime.output.renderers import render_result

if TYPE_CHECKING:
    from legtime.services.result import ServiceResult


def format_result(
    result: ServiceResult,
    *,
    json_output: bool = False,
    verbose: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The result to format.
        json_output: Return the JSON envelope instead of human text.
        verbose: Include error detail and secondary fields in human text.
    """
    if json_output:
        return result.model_dump_json(indent=2)
    return render_result(result, verbose=verbose)
