"""Status command: non-interactive prerequisite report."""

import click

from gitmcp_setup.core.context import SetupContext
from gitmcp_setup.core.remediation import show_readiness, show_repo_status
from gitmcp_setup.output.output import user_output


@click.command("status")
@click.pass_obj
def status_cmd(ctx: SetupContext) -> None:
    """Report Git MCP Server readiness without changing anything.

    Shows whether the server and a git repository are present, the
    working-tree state when a repository exists, and the manual steps for
    anything that is missing.
    """
    probe = ctx.probe
    user_output(click.style("🔍 Checking Git MCP Server setup...", bold=True))
    user_output("")

    status = probe.readiness()
    show_readiness(status)
    show_repo_status(ctx)

    instructions = probe.installation_instructions()
    if not instructions:
        user_output("")
        user_output(click.style("✨ Git MCP Server is ready to use!", fg="green", bold=True))
        return

    user_output("")
    user_output(click.style("To finish setup:", fg="yellow", bold=True))
    for line in instructions:
        user_output(line)
    user_output("Or run: gitmcp setup")
