"""Guard that runs before workflows which rewrite the working tree."""

from enum import Enum

import click

from mygit.core.branches import validate_new_branch_name
from mygit.core.context import MygitContext
from mygit.core.outcome import WorkflowOutcome
from mygit.errors import ValidationFailure
from mygit.gateway.console.types import SelectOption
from mygit.output import success_text, user_output, warning_text


class GuardChoice(Enum):
    COMMIT = "commit"
    NEW_BRANCH = "new-branch"
    DISCARD = "discard"
    CANCEL = "cancel"


GUARD_OPTIONS = [
    SelectOption(label="Commit the changes now", value=GuardChoice.COMMIT),
    SelectOption(label="Move the changes to a new branch", value=GuardChoice.NEW_BRANCH),
    SelectOption(label="Discard the changes (cannot be undone!)", value=GuardChoice.DISCARD),
    SelectOption(label="Cancel", value=GuardChoice.CANCEL),
]


def guard_uncommitted_changes(ctx: MygitContext, *, action: str) -> WorkflowOutcome:
    """Make sure the working tree is clean before ``action`` runs.

    A clean tree returns CONTINUE without prompting. Otherwise the user picks one
    of four ways forward:

    - commit: stage everything and commit with a required message -> CONTINUE
    - new branch: create and switch to a new branch holding the changes -> ABORT
      (the intended action is not performed)
    - discard: after a second confirmation, hard-reset -> CONTINUE; declining the
      second confirmation -> ABORT
    - cancel, or no selection -> ABORT

    Raises:
        ValidationFailure: If the commit message or new branch name is invalid
    """
    status = ctx.git.status_porcelain()
    if not status:
        return WorkflowOutcome.CONTINUE

    user_output(warning_text(f"You have uncommitted changes. What should happen before {action}?"))
    for line in status.splitlines():
        user_output(click.style(f"  {line}", dim=True))

    choice = ctx.console.choose("Uncommitted changes", GUARD_OPTIONS, default_index=3)

    if choice is GuardChoice.COMMIT:
        message = ctx.console.prompt("Commit message")
        if not message:
            raise ValidationFailure("A commit message is required.")
        ctx.git.stage_all()
        ctx.git.commit(message)
        user_output(success_text("Committed the changes locally. Push them separately."))
        return WorkflowOutcome.CONTINUE

    if choice is GuardChoice.NEW_BRANCH:
        name = validate_new_branch_name(ctx.git, ctx.console.prompt("New branch name"))
        ctx.git.checkout_new(name)
        user_output(
            f"Created branch {click.style(name, fg='cyan')} carrying your changes. "
            f"The {action} was not performed."
        )
        return WorkflowOutcome.ABORT

    if choice is GuardChoice.DISCARD:
        user_output(click.style("All uncommitted changes will be discarded.", fg="red", bold=True))
        if not ctx.console.confirm("Really discard them? This cannot be undone!", default=False):
            user_output("Discard cancelled.")
            return WorkflowOutcome.ABORT
        ctx.git.reset_hard()
        user_output("Discarded the uncommitted changes.")
        return WorkflowOutcome.CONTINUE

    user_output(f"Cancelled the {action}.")
    return WorkflowOutcome.ABORT
