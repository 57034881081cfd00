"""Glue between click commands and workflow results."""

from mygit.core.outcome import WorkflowOutcome, WorkflowResult
from mygit.output import error_text, user_output


def exit_with_result(result: WorkflowResult) -> None:
    """Print a FAIL message and exit 1; CONTINUE and ABORT return normally (exit 0)."""
    if result.outcome is WorkflowOutcome.FAIL:
        user_output(error_text(result.message))
        raise SystemExit(result.exit_code)
