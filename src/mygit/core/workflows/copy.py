"""Copy workflow: create a new branch from another branch's tip."""

import click

from mygit.core.branches import branch_select_options, validate_new_branch_name
from mygit.core.context import MygitContext
from mygit.core.outcome import WorkflowResult
from mygit.core.workflows.push import offer_push_with_tracking
from mygit.errors import ValidationFailure
from mygit.output import ORANGE, user_output


def copy_branch(ctx: MygitContext, *, source: str | None, new_name: str | None) -> WorkflowResult:
    """Create ``new_name`` from the tip of ``source`` and offer to push it.

    Raises:
        ValidationFailure: If the source is missing or the new name is invalid or taken
    """
    if source is None:
        options = branch_select_options(ctx.git, remote=ctx.remote, exclude=frozenset())
        source = ctx.console.fuzzy_select("Branch to copy", options)
        if source is None:
            user_output("No branch selected.")
            return WorkflowResult.aborted("No branch selected.")

    resolved = ctx.resolver.resolve(source)
    source_ref = resolved.existing_ref
    if source_ref is None:
        raise ValidationFailure(
            f"Source branch '{source}' was not found locally or on remote '{ctx.remote}'."
        )

    name = validate_new_branch_name(
        ctx.git, new_name if new_name is not None else ctx.console.prompt("New branch name")
    )
    ctx.git.create_branch(name, source_ref)
    user_output(
        f"Copied {click.style(source_ref, fg='cyan')} to new branch "
        f"{click.style(name, fg=ORANGE)}."
    )
    offer_push_with_tracking(ctx, name, verb="copied")
    return WorkflowResult.done()
