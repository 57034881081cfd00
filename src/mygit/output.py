"""User-facing output helpers.

Messages meant for the person at the terminal go to stderr so that stdout only
carries command results (branch listings, the commit graph).
"""

import click


def user_output(message: str = "", *, nl: bool = True) -> None:
    """Print a message for the user on stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str = "") -> None:
    """Print command results on stdout."""
    click.echo(message)


def error_text(message: str) -> str:
    return click.style("Error: ", fg="red", bold=True) + message


def warning_text(message: str) -> str:
    return click.style("Warning: ", fg="yellow", bold=True) + message


def success_text(message: str) -> str:
    return click.style(message, fg="green")


# Branches that need attention (unsynced, newly created)
ORANGE = (255, 165, 0)
