"""Short command aliases (``mygit sw`` for ``mygit switch``)."""

from collections.abc import Callable

import click

ALIASES_ATTR = "_mygit_aliases"


def alias(*names: str) -> Callable[[click.Command], click.Command]:
    """Attach alias names to a click command.

    Must be applied above ``@click.command`` so it receives the command object.
    The aliases take effect when the command is added with register_with_aliases.
    """

    def decorator(command: click.Command) -> click.Command:
        setattr(command, ALIASES_ATTR, tuple(names))
        return command

    return decorator


def get_aliases(command: click.Command) -> tuple[str, ...]:
    return getattr(command, ALIASES_ATTR, ())


def register_with_aliases(group: click.Group, command: click.Command) -> None:
    """Add ``command`` to ``group`` under its own name and every alias."""
    group.add_command(command)
    for name in get_aliases(command):
        group.add_command(command, name=name)
