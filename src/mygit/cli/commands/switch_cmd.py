import click

from mygit.cli.alias import alias
from mygit.cli.core import exit_with_result
from mygit.core.context import MygitContext
from mygit.core.workflows.switch import switch_branch


@alias("sw")
@click.command("switch")
@click.argument("branch", required=False)
@click.pass_obj
def switch_cmd(ctx: MygitContext, branch: str | None) -> None:
    """Switch to BRANCH, a local or remote-tracking branch.

    Without BRANCH, pick one interactively.
    """
    exit_with_result(switch_branch(ctx, target=branch))
