import logging

import click

from gitmcp_setup.cli.commands.info import info_cmd
from gitmcp_setup.cli.commands.setup import setup_cmd
from gitmcp_setup.cli.commands.status import status_cmd
from gitmcp_setup.cli.config import ConfigError
from gitmcp_setup.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="gitmcp-setup")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Set up the Git MCP Server for AI agents in this repository."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context()
        except ConfigError as e:
            raise click.ClickException(str(e)) from e


cli.add_command(info_cmd)
cli.add_command(setup_cmd)
cli.add_command(status_cmd)
