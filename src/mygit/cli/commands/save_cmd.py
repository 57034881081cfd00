import click

from mygit.cli.alias import alias
from mygit.cli.core import exit_with_result
from mygit.core.context import MygitContext
from mygit.core.workflows.save import save_changes


@alias("sa")
@click.command("save")
@click.option("-m", "--message", help="Commit message (prompted for when omitted)")
@click.pass_obj
def save_cmd(ctx: MygitContext, message: str | None) -> None:
    """Commit all changes, then optionally push and pull."""
    exit_with_result(save_changes(ctx, message=message))
