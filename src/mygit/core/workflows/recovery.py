"""Recovery offered when a merge or pull stops part-way."""

import click

from mygit.core.branches import validate_new_branch_name
from mygit.core.context import MygitContext
from mygit.core.outcome import WorkflowResult
from mygit.output import user_output, warning_text


def recover_from_conflict(ctx: MygitContext, *, operation: str) -> WorkflowResult:
    """Offer to save the in-progress state on a new branch after ``operation`` failed.

    Declining yields a FAIL result telling the user to resolve things manually.
    Accepting checks out a new branch from the current state; the original
    operation still counts as not completed and must be retried after the
    conflicts are resolved.

    Raises:
        ValidationFailure: If the new branch name is empty, invalid, or taken
    """
    user_output(warning_text(f"The {operation} did not complete. There may be conflicts."))
    if not ctx.console.confirm(
        "Create a new branch from the current state to keep your changes?", default=False
    ):
        return WorkflowResult.failed(
            f"No branch was created. Resolve the {operation} manually (see 'git status')."
        )

    name = validate_new_branch_name(ctx.git, ctx.console.prompt("New branch name"))
    ctx.git.checkout_new(name)
    user_output(f"Created and switched to branch {click.style(name, fg='cyan')}.")
    user_output(f"Resolve the conflicts, then retry the {operation}.")
    return WorkflowResult.aborted(f"The {operation} was not completed.")
