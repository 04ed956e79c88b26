"""Info command: server configuration and exposed tools."""

import click

from gitmcp_setup.core.context import SetupContext
from gitmcp_setup.core.probe import AVAILABLE_TOOLS
from gitmcp_setup.core.server_config import build_server_config, render_server_config
from gitmcp_setup.output.output import machine_output, user_output


@click.command("info")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["yaml", "json"]),
    default="yaml",
    show_default=True,
    help="Format of the server configuration written to stdout.",
)
@click.option(
    "--environment",
    default=None,
    help="Value for the server's ENVIRONMENT variable (overrides config).",
)
@click.pass_obj
def info_cmd(ctx: SetupContext, output_format: str, environment: str | None) -> None:
    """Print the MCP server entry for agent configuration.

    The server entry goes to stdout so it can be redirected into a
    configuration file; the list of tools the server exposes goes to stderr.

    Examples:

    \b
      gitmcp info > git-mcp.yml
      gitmcp info --format json --environment production
    """
    config = build_server_config(ctx.catalog, environment or ctx.config.environment)
    machine_output(render_server_config(config, output_format).rstrip("\n"))

    user_output("")
    user_output(click.style("Available tools:", bold=True))
    tools = ctx.probe.available_tools()
    for tool in sorted(tools, key=AVAILABLE_TOOLS.index):
        user_output(f"  • {tool}")
