"""Create workflow: start a new local branch at HEAD."""

import click

from mygit.core.branches import validate_new_branch_name
from mygit.core.context import MygitContext
from mygit.core.outcome import WorkflowResult
from mygit.core.workflows.push import offer_push_with_tracking
from mygit.output import ORANGE, user_output


def create_branch(ctx: MygitContext, *, name: str | None) -> WorkflowResult:
    """Create local branch ``name`` (prompted for when None) and offer to push it.

    Raises:
        ValidationFailure: If the name is empty, invalid, or already taken
    """
    branch = validate_new_branch_name(
        ctx.git, name if name is not None else ctx.console.prompt("New branch name")
    )
    ctx.git.create_branch(branch, None)
    user_output(f"Created local branch {click.style(branch, fg=ORANGE)}.")
    offer_push_with_tracking(ctx, branch, verb="created")
    return WorkflowResult.done()
