import click

from mygit.cli.alias import alias
from mygit.cli.core import exit_with_result
from mygit.core.context import MygitContext
from mygit.core.workflows.delete import delete_branch


@alias("del")
@click.command("delete")
@click.argument("branch", required=False)
@click.option("-f", "--force", is_flag=True, help="Delete the local branch even if unmerged")
@click.pass_obj
def delete_cmd(ctx: MygitContext, branch: str | None, force: bool) -> None:
    """Delete BRANCH locally and/or on the remote, asking before each."""
    exit_with_result(delete_branch(ctx, target=branch, force=force))
