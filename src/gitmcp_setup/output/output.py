"""Operator-facing output.

All human-readable status lines go to stderr so stdout stays available for
machine-readable output such as `gitmcp info`.
"""

import click


def user_output(message: str = "", *, nl: bool = True) -> None:
    """Write a status line for the operator."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str) -> None:
    """Write structured output meant for other programs."""
    click.echo(message)
