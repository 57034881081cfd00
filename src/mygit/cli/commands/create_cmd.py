import click

from mygit.cli.alias import alias
from mygit.cli.core import exit_with_result
from mygit.core.context import MygitContext
from mygit.core.workflows.create import create_branch


@alias("cr")
@click.command("create")
@click.argument("name", required=False)
@click.pass_obj
def create_cmd(ctx: MygitContext, name: str | None) -> None:
    """Create branch NAME from the current commit."""
    exit_with_result(create_branch(ctx, name=name))
