import click

from mygit.cli.core import exit_with_result
from mygit.core.context import MygitContext
from mygit.core.workflows.repo import create_repository


@click.command("create")
@click.argument("name")
@click.pass_obj
def repo_create(ctx: MygitContext, name: str) -> None:
    """Create a new repository in directory NAME."""
    exit_with_result(create_repository(ctx, name=name))
