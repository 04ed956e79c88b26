"""Interactive console implementation backed by click prompts."""

import click

from gitmcp_setup.gateway.console.abc import Console


class InteractiveConsole(Console):
    """Production implementation reading from standard input.

    End of input raises click.Abort, which is left to the CLI to handle.
    """

    def read_line(self, prompt: str) -> str:
        return click.prompt(
            click.style(prompt, fg="green"),
            default="",
            show_default=False,
            prompt_suffix=" ",
            err=True,
        )
