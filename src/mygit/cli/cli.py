import logging
from pathlib import Path
from typing import Any

import click

from mygit.cli.alias import get_aliases, register_with_aliases
from mygit.cli.commands.branch_cmd import branch_cmd
from mygit.cli.commands.copy_cmd import copy_cmd
from mygit.cli.commands.create_cmd import create_cmd
from mygit.cli.commands.delete_cmd import delete_cmd
from mygit.cli.commands.merge_cmd import merge_cmd
from mygit.cli.commands.repo import repo_group
from mygit.cli.commands.reset_cmd import reset_cmd
from mygit.cli.commands.save_cmd import save_cmd
from mygit.cli.commands.switch_cmd import switch_cmd
from mygit.cli.commands.tree_cmd import tree_cmd
from mygit.cli.config import default_config_path, load_config
from mygit.core.context import create_context
from mygit.errors import MygitError
from mygit.output import error_text, user_output

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


class MygitGroup(click.Group):
    """Root group: the single place where mygit errors become exit status 1.

    Also lists each command once in --help, with its aliases next to the name.
    """

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except MygitError as e:
            logger.debug("Command failed", exc_info=True)
            user_output(error_text(e.message))
            raise SystemExit(1) from e

    def format_commands(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        rows = []
        for name in self.list_commands(ctx):
            command = self.get_command(ctx, name)
            if command is None or command.hidden or name != command.name:
                continue
            aliases = get_aliases(command)
            label = f"{name} ({', '.join(aliases)})" if aliases else name
            rows.append((label, command.get_short_help_str(limit=formatter.width)))
        if rows:
            with formatter.section("Commands"):
                formatter.write_dl(rows)


@click.group(cls=MygitGroup, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="mygit")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Everyday git workflows with interactive guidance."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        config = load_config(default_config_path())
        ctx.obj = create_context(config, cwd=Path.cwd())


# Commands with @alias decorators use register_with_aliases() to auto-register aliases
register_with_aliases(cli, save_cmd)  # Has @alias("sa")
register_with_aliases(cli, branch_cmd)  # Has @alias("br")
register_with_aliases(cli, switch_cmd)  # Has @alias("sw")
register_with_aliases(cli, merge_cmd)  # Has @alias("me")
register_with_aliases(cli, copy_cmd)  # Has @alias("cp")
register_with_aliases(cli, delete_cmd)  # Has @alias("del")
register_with_aliases(cli, create_cmd)  # Has @alias("cr")
register_with_aliases(cli, tree_cmd)  # Has @alias("tr")
register_with_aliases(cli, reset_cmd)  # Has @alias("rs")
cli.add_command(repo_group)


def main() -> None:
    """CLI entry point used by the `mygit` console script."""
    cli()
