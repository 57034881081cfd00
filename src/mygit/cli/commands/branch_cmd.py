import click

from mygit.cli.alias import alias
from mygit.cli.core import exit_with_result
from mygit.core.context import MygitContext
from mygit.core.workflows.listing import list_branches


@alias("br")
@click.command("branch")
@click.pass_obj
def branch_cmd(ctx: MygitContext) -> None:
    """List branches and how each relates to the remote.

    Blue branches are in sync, orange ones need a push or pull (or have
    diverged). The current branch is marked with '*'.
    """
    exit_with_result(list_branches(ctx))
