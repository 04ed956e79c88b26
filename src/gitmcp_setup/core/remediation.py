"""Interactive setup flow for the Git MCP helper.

Reports the current prerequisites and, when something is missing, offers to
fix each missing piece in turn. Failed or declined steps are reported and
the flow moves on; nothing here aborts the run except end of input.
"""

from enum import Enum

import click

from gitmcp_setup.core.command_catalog import display_command
from gitmcp_setup.core.context import SetupContext
from gitmcp_setup.core.probe import ReadinessStatus
from gitmcp_setup.output.output import user_output

CAPABILITIES = (
    "Complete Git repository management",
    "Branch and merge operations",
    "Commit history analysis",
    "Diff and blame functionality",
    "Stash and tag management",
)


class SetupOutcome(Enum):
    """Terminal state of a setup run, re-derived after remediation."""

    READY = "ready"
    PARTIALLY_READY = "partially_ready"
    STILL_BLOCKED = "still_blocked"

    @staticmethod
    def from_readiness(status: ReadinessStatus) -> "SetupOutcome":
        if status.usable:
            return SetupOutcome.READY
        if status.helper_available or status.repo_available:
            return SetupOutcome.PARTIALLY_READY
        return SetupOutcome.STILL_BLOCKED


def is_affirmative(response: str) -> bool:
    """Empty input or anything starting with y/Y accepts."""
    answer = response.lower()
    return answer == "" or answer.startswith("y")


def prompt_yes_no(ctx: SetupContext, question: str) -> bool:
    return is_affirmative(ctx.console.read_line(question))


def _success(message: str) -> None:
    user_output(click.style(message, fg="green"))


def _failure(message: str) -> None:
    user_output(click.style(message, fg="red"))


def _note(message: str) -> None:
    user_output(click.style(message, fg="yellow"))


def _detail(message: str) -> None:
    user_output(click.style(message, fg="cyan"))


def _manual_fallback(*commands: tuple[str, ...]) -> None:
    _note("Please try running manually:")
    for args in commands:
        _detail(f"  {display_command(args)}")


def show_readiness(status: ReadinessStatus) -> None:
    if status.repo_available:
        _success("✓ Git repository detected")
    else:
        _failure("✗ No Git repository found")

    if status.helper_available:
        _success("✓ Git MCP Server is already installed")
    else:
        _failure("✗ Git MCP Server not found")


def show_repo_status(ctx: SetupContext) -> None:
    status = ctx.probe.repo_status()
    if not status.initialized:
        return

    user_output("")
    _note("Repository Status:")
    _detail(f"  • Repository: {'Clean' if status.clean else 'Has changes'}")
    if status.has_staged:
        _detail("  • Staged files: Yes")
    if status.has_unstaged:
        _detail("  • Unstaged changes: Yes")
    if status.has_untracked:
        _detail("  • Untracked files: Yes")


def show_capabilities() -> None:
    user_output("")
    _note("Git MCP Server provides your AI agents with:")
    for capability in CAPABILITIES:
        _detail(f"  • {capability}")


def install_helper(ctx: SetupContext) -> bool:
    user_output("")
    _success("Installing Git MCP Server globally...")

    if ctx.runner.execute(ctx.catalog.install_helper, cwd=ctx.cwd).succeeded:
        _success("✓ Git MCP Server installed successfully!")
        return True

    user_output("")
    _failure("❌ Failed to install Git MCP Server")
    _manual_fallback(ctx.catalog.install_helper)
    return False


def create_initial_commit(ctx: SetupContext) -> bool:
    # Staging failures surface through the commit result
    ctx.runner.execute(ctx.catalog.stage_all, cwd=ctx.cwd)
    if ctx.runner.execute(ctx.catalog.initial_commit, cwd=ctx.cwd).succeeded:
        _success("✓ Initial commit created!")
        return True
    _note("⚠ Could not create initial commit (possibly no files to commit)")
    return False


def initialize_repository(ctx: SetupContext) -> bool:
    user_output("")
    _success("Initializing Git repository...")

    if not ctx.runner.execute(ctx.catalog.init_repo, cwd=ctx.cwd).succeeded:
        user_output("")
        _failure("❌ Failed to initialize Git repository")
        _manual_fallback(ctx.catalog.init_repo)
        return False

    _success("✓ Git repository initialized successfully!")
    if prompt_yes_no(ctx, "Would you like to make an initial commit? (Y/n)"):
        create_initial_commit(ctx)
    return True


def handle_setup_requirements(ctx: SetupContext, status: ReadinessStatus) -> None:
    show_capabilities()

    if not status.helper_available:
        if prompt_yes_no(ctx, "\nWould you like to install Git MCP Server? (Y/n)"):
            install_helper(ctx)
        else:
            user_output("")
            _note("Skipping Git MCP Server installation.")

    if status.repo_available:
        return

    if prompt_yes_no(ctx, "\nWould you like to initialize a Git repository? (Y/n)"):
        initialize_repository(ctx)
    else:
        user_output("")
        _note("Skipping Git repository initialization.")
        _detail("Note: Git MCP Server requires a Git repository to function.")


def show_next_steps(status: ReadinessStatus) -> None:
    user_output("")
    _note("Next steps:")

    if status.usable:
        _detail("1. Add the Git MCP Server to your agent configuration:")
        _detail("   gitmcp info --format yaml")
        user_output("")
        _detail("2. Restart your agents so they pick up the new server")
        user_output("")
        _success("Your AI agents now have full Git repository access! 🎉")
    else:
        _detail("1. Complete the missing requirements above")
        _detail("2. Run setup again: gitmcp setup")
        _detail("3. Then add the server to your agent configuration:")
        _detail("   gitmcp info --format yaml")

    user_output("")
    _detail("For more information:")
    _detail("  • Check Git status: gitmcp status")
    _detail("  • View server configuration: gitmcp info")


def run_setup(ctx: SetupContext) -> SetupOutcome:
    """Run the interactive setup once and report where it ended up."""
    _success("🔧 Git MCP Server Setup")
    _success("=" * 50)

    status = ctx.probe.readiness()
    show_readiness(status)

    if status.usable:
        _success("✓ Git MCP Server setup is complete!")
        show_repo_status(ctx)
    else:
        handle_setup_requirements(ctx, status)

    user_output("")
    _success("✅ Setup process completed!")

    final_status = ctx.probe.readiness()
    show_next_steps(final_status)
    return SetupOutcome.from_readiness(final_status)
