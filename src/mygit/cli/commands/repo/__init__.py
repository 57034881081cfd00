"""Repository setup commands."""

import click

from mygit.cli.commands.repo.create_cmd import repo_create
from mygit.cli.commands.repo.delete_cmd import repo_delete
from mygit.cli.commands.repo.init_cmd import repo_init
from mygit.cli.commands.repo.remote_cmd import remote_group


@click.group("repo")
def repo_group() -> None:
    """Create, delete and configure repositories."""
    pass


repo_group.add_command(repo_init)
repo_group.add_command(repo_create)
repo_group.add_command(repo_delete)
repo_group.add_command(remote_group)
