"""Merge workflow: merge another branch into the current one."""

import click

from mygit.core.branches import branch_select_options
from mygit.core.context import MygitContext
from mygit.core.outcome import WorkflowOutcome, WorkflowResult
from mygit.core.workflows.guard import guard_uncommitted_changes
from mygit.core.workflows.recovery import recover_from_conflict
from mygit.errors import ValidationFailure
from mygit.output import success_text, user_output


def merge_branch(ctx: MygitContext, *, source: str | None) -> WorkflowResult:
    """Merge ``source`` into the checked-out branch.

    On success the merged local branch may be deleted. When the merge stops
    (typically on conflicts), conflict recovery takes over.

    Raises:
        ValidationFailure: If HEAD is detached, or the source is missing or is the
            current branch itself
    """
    current = ctx.git.current_branch()
    if current is None:
        raise ValidationFailure("Cannot determine the current branch (is HEAD detached?).")

    if guard_uncommitted_changes(ctx, action="merge") is WorkflowOutcome.ABORT:
        return WorkflowResult.aborted("Merge cancelled.")

    own_tracking = f"{ctx.remote}/{current}"
    if source is None:
        options = branch_select_options(
            ctx.git, remote=ctx.remote, exclude=frozenset({current, own_tracking})
        )
        source = ctx.console.fuzzy_select(
            f"Branch to merge into '{current}'", options
        )
        if source is None:
            user_output("No branch selected.")
            return WorkflowResult.aborted("No branch selected.")

    resolved = ctx.resolver.resolve(source)
    if not resolved.remote_prefixed and resolved.local_candidate == current:
        raise ValidationFailure(f"Cannot merge '{current}' into itself.")
    merge_ref = resolved.existing_ref
    if merge_ref is None:
        raise ValidationFailure(
            f"Branch '{source}' was not found locally or on remote '{ctx.remote}'."
        )

    user_output(
        f"Merging {click.style(merge_ref, fg='cyan')} into {click.style(current, fg='cyan')}..."
    )
    if not ctx.git.merge(merge_ref):
        return recover_from_conflict(ctx, operation="merge")

    user_output(success_text("Merge succeeded."))
    if resolved.local_exists and ctx.console.confirm(
        f"Delete the merged local branch '{resolved.local_candidate}'?", default=False
    ):
        ctx.git.delete_branch(resolved.local_candidate, force=False)
        user_output(f"Deleted local branch {click.style(resolved.local_candidate, fg='cyan')}.")
    return WorkflowResult.done()
