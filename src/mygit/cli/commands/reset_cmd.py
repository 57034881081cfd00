import click

from mygit.cli.alias import alias
from mygit.cli.core import exit_with_result
from mygit.core.context import MygitContext
from mygit.core.workflows.reset import undo_last_commit


@alias("rs")
@click.command("reset")
@click.option("--soft", "mode", flag_value="soft", help="Keep the changes staged")
@click.option("--mixed", "mode", flag_value="mixed", help="Keep the changes unstaged")
@click.option("--hard", "mode", flag_value="hard", help="Discard the changes")
@click.pass_obj
def reset_cmd(ctx: MygitContext, mode: str | None) -> None:
    """Undo the last commit.

    Without a mode flag, choose one interactively.
    """
    exit_with_result(undo_last_commit(ctx, mode=mode))
