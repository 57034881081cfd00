import click

from mygit.cli.alias import alias
from mygit.cli.core import exit_with_result
from mygit.core.context import MygitContext
from mygit.core.workflows.copy import copy_branch


@alias("cp")
@click.command("copy")
@click.argument("source", required=False)
@click.argument("new_name", required=False)
@click.pass_obj
def copy_cmd(ctx: MygitContext, source: str | None, new_name: str | None) -> None:
    """Create NEW_NAME as a copy of SOURCE without switching to it."""
    exit_with_result(copy_branch(ctx, source=source, new_name=new_name))
