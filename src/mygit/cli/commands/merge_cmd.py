import click

from mygit.cli.alias import alias
from mygit.cli.core import exit_with_result
from mygit.core.context import MygitContext
from mygit.core.workflows.merge import merge_branch


@alias("me")
@click.command("merge")
@click.argument("branch", required=False)
@click.pass_obj
def merge_cmd(ctx: MygitContext, branch: str | None) -> None:
    """Merge BRANCH into the current branch."""
    exit_with_result(merge_branch(ctx, source=branch))
