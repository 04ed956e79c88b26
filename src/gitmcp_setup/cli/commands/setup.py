"""Interactive setup command for the Git MCP helper."""

import click

from gitmcp_setup.core.context import SetupContext
from gitmcp_setup.core.remediation import run_setup


@click.command("setup")
@click.pass_obj
def setup_cmd(ctx: SetupContext) -> None:
    """Check prerequisites and offer to install what is missing.

    Detects the Git MCP Server gem and a git repository in the current
    directory. When either is missing, offers to install the server,
    initialize a repository and create an initial commit.

    Examples:

    \b
      # Run the interactive setup
      gitmcp setup
    """
    run_setup(ctx)
