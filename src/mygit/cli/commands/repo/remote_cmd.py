"""Commands managing the configured remote."""

import click

from mygit.cli.core import exit_with_result
from mygit.core.context import MygitContext
from mygit.core.workflows.repo import add_remote, remove_remote, set_remote_url, show_remote


@click.group("remote")
def remote_group() -> None:
    """Manage the configured remote (see the 'remote' config key)."""
    pass


@remote_group.command("add")
@click.argument("url", required=False)
@click.pass_obj
def remote_add(ctx: MygitContext, url: str | None) -> None:
    """Add the remote with URL."""
    exit_with_result(add_remote(ctx, url=url))


@remote_group.command("set-url")
@click.argument("url", required=False)
@click.pass_obj
def remote_set_url(ctx: MygitContext, url: str | None) -> None:
    """Point the remote at URL."""
    exit_with_result(set_remote_url(ctx, url=url))


@remote_group.command("remove")
@click.pass_obj
def remote_remove(ctx: MygitContext) -> None:
    """Stop tracking the remote."""
    exit_with_result(remove_remote(ctx))


@remote_group.command("show")
@click.pass_obj
def remote_show(ctx: MygitContext) -> None:
    """Print the remote's URL."""
    exit_with_result(show_remote(ctx))
