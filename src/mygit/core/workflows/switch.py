"""Switch workflow: check out a local branch, or a local copy of a remote one."""

import click

from mygit.core.branches import branch_select_options
from mygit.core.context import MygitContext
from mygit.core.outcome import WorkflowOutcome, WorkflowResult
from mygit.core.workflows.guard import guard_uncommitted_changes
from mygit.errors import ValidationFailure
from mygit.output import user_output


def switch_branch(ctx: MygitContext, *, target: str | None) -> WorkflowResult:
    """Switch to ``target``, selecting it interactively when None.

    - an existing local branch is checked out
    - a branch that only exists as '<remote>/x' is offered as a new local tracking
      branch 'x', created and checked out on confirmation
    - anything else is a ValidationFailure

    Raises:
        ValidationFailure: If the branch does not exist locally or on the remote
    """
    if guard_uncommitted_changes(ctx, action="switch") is WorkflowOutcome.ABORT:
        return WorkflowResult.aborted("Switch cancelled.")

    if target is None:
        options = branch_select_options(ctx.git, remote=ctx.remote, exclude=frozenset())
        target = ctx.console.fuzzy_select("Branch to switch to", options)
        if target is None:
            user_output("No branch selected.")
            return WorkflowResult.aborted("No branch selected.")

    resolved = ctx.resolver.resolve(target)
    current = ctx.git.current_branch()

    if resolved.local_exists:
        return _checkout_local(ctx, resolved.local_candidate, current=current)

    if resolved.remote_exists:
        # "<remote>/x" was given while a local "x" already exists
        if resolved.remote_prefixed and ctx.git.ref_exists(resolved.local_candidate):
            user_output(f"Local branch '{resolved.local_candidate}' already exists; using it.")
            return _checkout_local(ctx, resolved.local_candidate, current=current)

        if not ctx.console.confirm(
            f"Create local branch '{resolved.local_candidate}' tracking "
            f"'{resolved.remote_candidate}' and switch to it?",
            default=True,
        ):
            user_output("Switch cancelled.")
            return WorkflowResult.aborted("Switch cancelled.")
        ctx.git.create_tracking_branch(resolved.local_candidate, resolved.remote_candidate)
        ctx.git.checkout(resolved.local_candidate)
        user_output(
            f"Created {click.style(resolved.local_candidate, fg='cyan')} tracking "
            f"{click.style(resolved.remote_candidate, fg='blue')} and switched to it."
        )
        return WorkflowResult.done()

    raise ValidationFailure(
        f"Branch '{target}' was not found locally or on remote '{ctx.remote}'."
    )


def _checkout_local(ctx: MygitContext, branch: str, *, current: str | None) -> WorkflowResult:
    if branch == current:
        user_output(f"Already on {click.style(branch, fg='cyan')}.")
        return WorkflowResult.done()
    ctx.git.checkout(branch)
    user_output(f"Switched to {click.style(branch, fg='cyan')}.")
    return WorkflowResult.done()
