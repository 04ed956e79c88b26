"""Catalog of the external commands used by probes and remediation steps."""

import shlex
from dataclasses import dataclass

DEFAULT_HELPER_NAME = "git-mcp-server"
INITIAL_COMMIT_MESSAGE = "Initial commit"


@dataclass(frozen=True)
class CommandCatalog:
    """Exact argv for every external operation.

    Probe and remediation code never builds command lines itself; tests
    substitute a catalog to redirect any operation.
    """

    helper_executable: str
    helper_registry_query: tuple[str, ...]
    helper_path_lookup: tuple[str, ...]
    repo_root_query: tuple[str, ...]
    short_status: tuple[str, ...]
    install_helper: tuple[str, ...]
    init_repo: tuple[str, ...]
    stage_all: tuple[str, ...]
    initial_commit: tuple[str, ...]

    @staticmethod
    def for_helper(name: str = DEFAULT_HELPER_NAME) -> "CommandCatalog":
        """Build the catalog for a helper distributed as a gem of the same name."""
        return CommandCatalog(
            helper_executable=name,
            helper_registry_query=("gem", "list", "-i", name),
            helper_path_lookup=("which", name),
            repo_root_query=("git", "rev-parse", "--git-dir"),
            short_status=("git", "status", "--porcelain"),
            install_helper=("gem", "install", name, "--no-document"),
            init_repo=("git", "init"),
            stage_all=("git", "add", "."),
            initial_commit=("git", "commit", "-m", INITIAL_COMMIT_MESSAGE),
        )


def display_command(args: tuple[str, ...]) -> str:
    """Render argv as a shell line an operator can copy."""
    return shlex.join(args)
