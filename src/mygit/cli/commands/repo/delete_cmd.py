import click

from mygit.cli.core import exit_with_result
from mygit.core.context import MygitContext
from mygit.core.workflows.repo import delete_repository


@click.command("delete")
@click.pass_obj
def repo_delete(ctx: MygitContext) -> None:
    """Delete the repository history (.git) of the current directory.

    The working files are kept. Requires typing the directory name to confirm.
    """
    exit_with_result(delete_repository(ctx))
