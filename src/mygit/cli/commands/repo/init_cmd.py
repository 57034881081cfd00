import click

from mygit.cli.core import exit_with_result
from mygit.core.context import MygitContext
from mygit.core.workflows.repo import init_repository


@click.command("init")
@click.pass_obj
def repo_init(ctx: MygitContext) -> None:
    """Turn the current directory into a git repository."""
    exit_with_result(init_repository(ctx))
