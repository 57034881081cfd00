"""Reset workflow: undo the most recent commit."""

import click

from mygit.core.context import MygitContext
from mygit.core.outcome import WorkflowOutcome, WorkflowResult
from mygit.core.workflows.guard import guard_uncommitted_changes
from mygit.errors import ValidationFailure
from mygit.gateway.console.types import SelectOption
from mygit.output import user_output

RESET_MODES = ("soft", "mixed", "hard")

RESET_OPTIONS = [
    SelectOption(label="soft: keep the changes staged", value="soft"),
    SelectOption(label="mixed: keep the changes as unstaged edits", value="mixed"),
    SelectOption(label="hard: discard the changes (cannot be undone!)", value="hard"),
]


def undo_last_commit(ctx: MygitContext, *, mode: str | None) -> WorkflowResult:
    """Move the current branch back by one commit.

    A hard reset drops the commit's changes and any uncommitted ones: the
    uncommitted-changes guard runs first and a second confirmation is required.

    Raises:
        ValidationFailure: If there is no parent commit or the mode is unknown
    """
    if not ctx.git.ref_exists("HEAD~"):
        raise ValidationFailure("There is no previous commit to go back to.")

    if mode is None:
        mode = ctx.console.choose(
            "How should the last commit be undone?", RESET_OPTIONS, default_index=0
        )
        if mode is None:
            user_output("Reset cancelled.")
            return WorkflowResult.aborted("Reset cancelled.")
    if mode not in RESET_MODES:
        raise ValidationFailure(f"Unknown reset mode '{mode}'.")

    if mode == "hard" and (
        guard_uncommitted_changes(ctx, action="reset") is WorkflowOutcome.ABORT
    ):
        return WorkflowResult.aborted("Reset cancelled.")

    if not ctx.console.confirm(f"Undo the last commit ({mode})?", default=False):
        user_output("Reset cancelled.")
        return WorkflowResult.aborted("Reset cancelled.")

    if mode == "hard":
        user_output(
            click.style("The changes of the last commit will be lost.", fg="red", bold=True)
        )
        if not ctx.console.confirm("Really discard them? This cannot be undone!", default=False):
            user_output("Reset cancelled.")
            return WorkflowResult.aborted("Reset cancelled.")

    ctx.git.undo_last_commit(mode)
    user_output(f"Undid the last commit ({mode}).")
    return WorkflowResult.done()
