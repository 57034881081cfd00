"""Save workflow: commit everything, then optionally push and pull."""

import click

from mygit.core.context import MygitContext
from mygit.core.outcome import WorkflowResult
from mygit.core.workflows.recovery import recover_from_conflict
from mygit.errors import ValidationFailure
from mygit.output import success_text, user_output, warning_text


def save_changes(ctx: MygitContext, *, message: str | None) -> WorkflowResult:
    """Stage and commit all changes, then offer to push with tracking and to pull.

    Args:
        ctx: Mygit context
        message: Commit message; prompted for when None

    Raises:
        ValidationFailure: If the commit message is empty
    """
    if not ctx.git.has_uncommitted_changes():
        user_output("Nothing to commit; the working tree is clean.")
        return WorkflowResult.aborted("Nothing to commit.")

    text = message.strip() if message is not None else ctx.console.prompt("Commit message")
    if not text:
        raise ValidationFailure("A commit message is required.")

    ctx.git.stage_all()
    ctx.git.commit(text)
    user_output("Committed locally.")

    branch = ctx.git.current_branch()
    if branch is None:
        user_output(warning_text("HEAD is detached; skipping push."))
        return WorkflowResult.done()

    remote = ctx.remote
    if ctx.git.remote_url(remote) is None:
        user_output(warning_text(f"Remote '{remote}' is not configured; skipping push."))
        user_output(success_text("Save complete."))
        return WorkflowResult.done()

    if not ctx.console.confirm(f"Also push to '{remote}/{branch}'?", default=False):
        user_output("Skipped push.")
        user_output(success_text("Save complete."))
        return WorkflowResult.done()

    ctx.git.push(remote, branch, set_upstream=True)
    user_output(f"Pushed to {click.style(f'{remote}/{branch}', fg='cyan')}.")

    if ctx.console.confirm(
        f"Pull the latest changes from '{remote}/{branch}'? (conflicts are possible)",
        default=False,
    ):
        if not ctx.git.pull(remote, branch):
            return recover_from_conflict(ctx, operation="pull")
        user_output(success_text("Pull succeeded; the branch is up to date."))

    user_output(success_text("Save complete."))
    return WorkflowResult.done()
