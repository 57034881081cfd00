import click

from mygit.cli.alias import alias
from mygit.cli.core import exit_with_result
from mygit.core.context import MygitContext
from mygit.core.workflows.listing import show_tree


@alias("tr")
@click.command("tree")
@click.option(
    "-n",
    "--max-count",
    type=click.IntRange(min=1),
    default=None,
    help="Show at most this many commits",
)
@click.pass_obj
def tree_cmd(ctx: MygitContext, max_count: int | None) -> None:
    """Show the commit graph of all branches."""
    exit_with_result(show_tree(ctx, max_count=max_count))
