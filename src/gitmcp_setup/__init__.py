"""gitmcp CLI entry point.

This package provides a Click-based CLI that detects, reports and
interactively sets up the Git MCP Server and the git repository it serves.
See `gitmcp --help` for details.
"""

from gitmcp_setup.cli.cli import cli


def main() -> None:
    """CLI entry point used by the `gitmcp` console script."""
    cli()
