"""Optional push-with-tracking step shared by the create and copy workflows."""

import click

from mygit.core.context import MygitContext
from mygit.output import user_output


def offer_push_with_tracking(ctx: MygitContext, branch: str, *, verb: str) -> bool:
    """Ask whether to publish ``branch`` to the configured remote with upstream tracking.

    No prompt is shown when the remote is not configured.

    Args:
        ctx: Mygit context
        branch: Local branch to push
        verb: Past-tense verb describing how the branch came to be ("created", "copied")

    Returns:
        True if the branch was pushed
    """
    remote = ctx.remote
    if ctx.git.remote_url(remote) is None:
        user_output(click.style(f"Remote '{remote}' is not configured; skipping push.", dim=True))
        return False

    if not ctx.console.confirm(
        f"Push the {verb} branch '{branch}' to '{remote}' and track it?", default=False
    ):
        user_output("Skipped push.")
        return False

    ctx.git.push(remote, branch, set_upstream=True)
    user_output(
        f"Pushed {click.style(branch, fg='cyan')} to "
        f"{click.style(f'{remote}/{branch}', fg='blue')} with tracking."
    )
    return True
