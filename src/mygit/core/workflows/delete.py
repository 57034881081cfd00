"""Delete workflow: remove a branch locally and/or on the remote."""

import click

from mygit.core.branches import branch_select_options
from mygit.core.context import MygitContext
from mygit.core.outcome import WorkflowResult
from mygit.errors import ValidationFailure
from mygit.output import user_output


def delete_branch(ctx: MygitContext, *, target: str | None, force: bool) -> WorkflowResult:
    """Delete ``target`` locally and/or on the remote, each behind its own confirmation.

    The checked-out local branch can never be deleted. Declining both deletions is
    a benign abort.

    Args:
        ctx: Mygit context
        target: Local or '<remote>/'-prefixed name; selected interactively when None
        force: Delete the local branch even if it is not fully merged

    Raises:
        ValidationFailure: If the branch is checked out or exists nowhere
    """
    remote = ctx.remote
    has_remote = ctx.git.remote_url(remote) is not None
    if has_remote:
        ctx.git.fetch_prune(remote)

    if target is None:
        options = branch_select_options(ctx.git, remote=remote, exclude=frozenset())
        target = ctx.console.fuzzy_select("Branch to delete", options)
        if target is None:
            user_output("No branch selected.")
            return WorkflowResult.aborted("No branch selected.")

    resolved = ctx.resolver.resolve(target)
    current = ctx.git.current_branch()
    if not resolved.remote_prefixed and resolved.local_candidate == current:
        raise ValidationFailure(
            f"Cannot delete '{current}' because it is currently checked out."
        )

    can_delete_remote = has_remote and resolved.remote_exists
    if not resolved.local_exists and not can_delete_remote:
        raise ValidationFailure(
            f"Branch '{target}' was not found locally or on remote '{remote}'."
        )

    deleted = False
    if resolved.local_exists and ctx.console.confirm(
        f"Delete local branch '{resolved.local_candidate}'?", default=False
    ):
        ctx.git.delete_branch(resolved.local_candidate, force=force)
        user_output(f"Deleted local branch {click.style(resolved.local_candidate, fg='cyan')}.")
        deleted = True

    if can_delete_remote and ctx.console.confirm(
        f"Delete remote branch '{resolved.remote_candidate}'?", default=False
    ):
        ctx.git.push_delete(remote, resolved.local_candidate)
        user_output(f"Deleted remote branch {click.style(resolved.remote_candidate, fg='blue')}.")
        deleted = True

    if not deleted:
        user_output("No deletion performed.")
        return WorkflowResult.aborted("No deletion performed.")
    return WorkflowResult.done()
